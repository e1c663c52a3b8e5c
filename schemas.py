from typing import List, Optional, Tuple
from enum import Enum
from pydantic import BaseModel, ConfigDict, field_validator

class DefaultConjunctionType(str, Enum):
    AND = "and"
    OR = "or"

class FtsQuerySettings(BaseModel):
    """Options read once when an FtsQuery is constructed."""
    model_config = ConfigDict(frozen=True)

    # Seed the stop words with the standard SQL Server noise words
    add_standard_stop_words: bool = False
    additional_stop_words: Tuple[str, ...] = ()
    # Conjunction assumed between terms with no explicit operator
    default_conjunction: DefaultConjunctionType = DefaultConjunctionType.AND
    # Inflectional finds all tenses of a word (start, started, starting) and
    # the single, plural and possessive forms of nouns
    use_inflectional_search: bool = True
    # Append * to every plain word to search by the beginning of words
    use_trailing_wildcard_for_all_words: bool = False
    treat_near_as_operator: bool = True
    # Replaces the default punctuation entirely when not empty
    enabled_punctuation: str = ""
    disabled_punctuation: str = ""

    @field_validator("enabled_punctuation", "disabled_punctuation", mode="before")
    @classmethod
    def join_characters(cls, value):
        if isinstance(value, (list, tuple, set, frozenset)):
            for char in value:
                if not isinstance(char, str) or len(char) != 1:
                    raise ValueError(f"punctuation must be single characters, got {char!r}")
            return "".join(value)
        return value

class TransformRequest(BaseModel):
    query: str
    settings: Optional[FtsQuerySettings] = None

class TransformResponse(BaseModel):
    query: str
    condition: str
    empty: bool
    settings: FtsQuerySettings

class StopWordsResponse(BaseModel):
    stop_words: List[str]
    total: int
