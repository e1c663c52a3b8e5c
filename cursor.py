from typing import Callable

# Returned by peek() for positions past the end of the text
NULL_CHAR = '\0'


class Cursor:
    """Read position over a string of user input.

    None of the methods raise: peeking past the end returns NULL_CHAR and
    advancing is clamped to the length of the text.
    """

    def __init__(self, text: str = None):
        self.reset(text)

    def reset(self, text: str):
        self.text = text or ''
        self.index = 0

    @property
    def at_end(self) -> bool:
        return self.index >= len(self.text)

    def peek(self, ahead: int = 0) -> str:
        pos = self.index + ahead
        return self.text[pos] if pos < len(self.text) else NULL_CHAR

    def extract(self, start: int, end: int) -> str:
        return self.text[start:end]

    def advance(self, ahead: int = 1):
        self.index = min(self.index + ahead, len(self.text))

    def skip_whitespace(self):
        self.skip_while(str.isspace)

    def skip_while(self, predicate: Callable[[str], bool]):
        while not self.at_end and predicate(self.peek()):
            self.advance()

    def parse_while(self, predicate: Callable[[str], bool]) -> str:
        """Skip characters while predicate holds and return the skipped span."""
        start = self.index
        self.skip_while(predicate)
        return self.extract(start, self.index)
