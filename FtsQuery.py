import logging
from collections.abc import MutableSet
from typing import Iterable, Optional

from cursor import Cursor
from fixup import fix_up_expression_tree
from nodes import ConjunctionType, InternalNode, Node, TermForm, TerminalNode, render
from schemas import FtsQuerySettings
from stopwords import STANDARD_STOP_WORDS

logger = logging.getLogger(__name__)

# Characters not allowed in unquoted search terms
DEFAULT_PUNCTUATION = "~\"'`!@#$%^&*()-+=[]{}\\|;:,.<>?/"

QUOTES = "\"'"


class StopWordSet(MutableSet):
    """Set of words compared without regard to case."""

    def __init__(self, words: Iterable[str] = ()):
        self._words = {}
        for word in words:
            self.add(word)

    def __contains__(self, word):
        return isinstance(word, str) and word.casefold() in self._words

    def __iter__(self):
        return iter(self._words.values())

    def __len__(self):
        return len(self._words)

    def add(self, word: str):
        self._words.setdefault(word.casefold(), word)

    def discard(self, word: str):
        self._words.pop(word.casefold(), None)

    def __repr__(self):
        return f"StopWordSet({sorted(self._words.values())!r})"


class FtsQuery:
    """
    Converts a user-friendly search phrase to a SQL Server full-text search
    condition (the argument of CONTAINS / CONTAINSTABLE). Badly formed input
    never raises; the best condition that can be built is returned, or an
    empty string when no valid condition is left.

        abc                     inflectional forms of abc
        ~abc                    thesaurus variations of abc
        "abc"                   exact term abc
        +abc                    exact term abc
        "abc" near "def"        exact term abc near exact term def
        abc*                    words that start with abc
        -abc def                inflectional forms of def but not of abc
        abc def                 inflectional forms of both abc and def
        abc or def              inflectional forms of either abc or def
        <+abc +def>             exact term abc near exact term def
        abc and (def or ghi)    inflectional forms of abc and either def or ghi
    """

    def __init__(self, settings: Optional[FtsQuerySettings] = None, add_standard_stop_words: bool = False):
        if settings is None:
            settings = FtsQuerySettings(add_standard_stop_words=add_standard_stop_words)
        self.settings = settings

        # Terms in this set are left out of the resulting condition
        self.stop_words = StopWordSet()
        if settings.add_standard_stop_words:
            self.stop_words |= STANDARD_STOP_WORDS
        self.stop_words |= settings.additional_stop_words

        punctuation = settings.enabled_punctuation or DEFAULT_PUNCTUATION
        self.punctuation = "".join(c for c in punctuation if c not in settings.disabled_punctuation)

        self.default_conjunction = ConjunctionType[settings.default_conjunction.name]
        self.default_term_form = TermForm.INFLECTIONAL if settings.use_inflectional_search else TermForm.LITERAL

        logger.debug("FtsQuery ready: %d stop words, punctuation %r, default conjunction %s",
                     len(self.stop_words), self.punctuation, self.default_conjunction.value)

    def is_stop_word(self, word: str) -> bool:
        return word in self.stop_words

    def transform(self, query: str) -> str:
        """
        Returns a valid full-text search condition for query, or an empty
        string if a valid condition was not possible.
        """
        try:
            node = self.parse_node(query, self.default_conjunction)
            node = fix_up_expression_tree(node, is_root=True)
            condition = render(node)
        except RecursionError:
            logger.warning("Query nested too deeply to transform (%d characters)", len(query))
            return ""
        logger.debug("Transformed %r -> %r", query, condition)
        return condition

    def parse_node(self, query: Optional[str], default_conjunction: ConjunctionType) -> Optional[Node]:
        """Parses a query segment into an expression tree without fixing it up."""
        conjunction = default_conjunction
        term_form = self.default_term_form
        exclude = False
        reset_state = True
        root = None

        parser = Cursor(query)
        while not parser.at_end:
            if reset_state:
                # Modifiers only apply to the term that follows them
                conjunction = default_conjunction
                term_form = self.default_term_form
                exclude = False
                reset_state = False

            parser.skip_whitespace()
            if parser.at_end:
                break

            ch = parser.peek()
            if ch in self.punctuation:
                if ch in QUOTES:
                    parser.advance()
                    term = parser.parse_while(lambda c: c != ch)
                    root = self.add_term(root, term, TermForm.LITERAL, exclude, conjunction)
                    reset_state = True
                elif ch == "(":
                    block = self.extract_block(parser, "(", ")")
                    node = self.parse_node(block, default_conjunction)
                    root = self.add_node(root, node, conjunction, grouped=True)
                    reset_state = True
                elif ch == "<":
                    block = self.extract_block(parser, "<", ">")
                    node = self.parse_node(block, ConjunctionType.NEAR)
                    root = self.add_node(root, node, conjunction)
                    reset_state = True
                elif ch == "-":
                    exclude = True
                elif ch == "+":
                    term_form = TermForm.LITERAL
                elif ch == "~":
                    term_form = TermForm.THESAURUS
                # Anything else just separates terms
                parser.advance()
                continue

            term = parser.parse_while(lambda c: c not in self.punctuation and not c.isspace())

            # Trailing wildcard
            if parser.peek() == "*":
                parser.advance()
                root = self.add_term(root, term + "*", TermForm.LITERAL, exclude, conjunction)
                reset_state = True
                continue

            keyword = term.upper()
            if keyword == "AND":
                conjunction = ConjunctionType.AND
            elif keyword == "OR":
                conjunction = ConjunctionType.OR
            elif keyword == "NEAR" and self.settings.treat_near_as_operator:
                conjunction = ConjunctionType.NEAR
            elif keyword == "NOT":
                exclude = True
            elif self.settings.use_trailing_wildcard_for_all_words:
                root = self.add_term(root, term + "*", TermForm.LITERAL, exclude, conjunction)
                reset_state = True
            else:
                root = self.add_term(root, term, term_form, exclude, conjunction)
                reset_state = True
        return root

    def add_term(self, root: Optional[Node], term: str, form: TermForm, exclude: bool,
                 conjunction: ConjunctionType) -> Optional[Node]:
        """Adds a terminal node for term unless it is empty or a stop word."""
        term = term.strip()
        if not term or self.is_stop_word(term):
            return root
        return self.add_node(root, TerminalNode(term, form, exclude), conjunction)

    @staticmethod
    def add_node(root: Optional[Node], node: Optional[Node], conjunction: ConjunctionType,
                 grouped: bool = False) -> Optional[Node]:
        """Joins node to the right of the tree built so far and returns the new root."""
        if node is None:
            return root
        node.grouped = grouped
        if root is None:
            return node
        return InternalNode(root, node, conjunction)

    @staticmethod
    def extract_block(parser: Cursor, open_char: str, close_char: str) -> str:
        """
        Returns the text between open_char at the current position and its
        matching close_char. Delimiters inside quotes don't count. The parser
        is left on the closing character, or at the end of the text if there
        isn't one.
        """
        depth = 1
        parser.advance()
        start = parser.index
        while not parser.at_end:
            ch = parser.peek()
            if ch == open_char:
                depth += 1
            elif ch == close_char:
                depth -= 1
                if depth == 0:
                    break
            elif ch in QUOTES:
                parser.advance()
                parser.skip_while(lambda c: c != ch)
            parser.advance()
        return parser.extract(start, parser.index)
