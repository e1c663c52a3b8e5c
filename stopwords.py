# SQL Server English noise words. Terms in this list are not indexed, so a
# condition built on one of them can never match.
STANDARD_STOP_WORDS = (
    '$', '0', '1', '2', '3', '4', '5', '6', '7', '8', '9',
    'a', 'about', 'after', 'all', 'also', 'an', 'and', 'another', 'any', 'are',
    'as', 'at', 'b', 'be', 'because', 'been', 'before', 'being', 'between',
    'both', 'but', 'by', 'c', 'came', 'can', 'come', 'could', 'd', 'did', 'do',
    'does', 'e', 'each', 'else', 'f', 'for', 'from', 'g', 'get', 'got', 'h',
    'had', 'has', 'have', 'he', 'her', 'here', 'him', 'himself', 'his', 'how',
    'i', 'if', 'in', 'into', 'is', 'it', 'its', 'j', 'just', 'k', 'l', 'like',
    'm', 'make', 'many', 'me', 'might', 'more', 'most', 'much', 'must', 'my',
    'n', 'never', 'no', 'now', 'o', 'of', 'on', 'only', 'or', 'other', 'our',
    'out', 'over', 'p', 'q', 'r', 're', 's', 'said', 'same', 'see', 'should',
    'since', 'so', 'some', 'still', 'such', 't', 'take', 'than', 'that', 'the',
    'their', 'them', 'then', 'there', 'these', 'they', 'this', 'those',
    'through', 'to', 'too', 'u', 'under', 'up', 'use', 'v', 'very', 'w', 'want',
    'was', 'way', 'we', 'well', 'were', 'what', 'when', 'where', 'which',
    'while', 'who', 'will', 'with', 'would', 'x', 'y', 'you', 'your', 'z',
)
