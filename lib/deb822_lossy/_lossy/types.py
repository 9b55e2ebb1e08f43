from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from deb822_lossy._lossy.tokens import Deb822TokenKind


class Deb822ParseError(ValueError):
    """The text could not be parsed as a deb822 file

    No partial document is available when this is raised.
    """


class UnexpectedTokenError(Deb822ParseError):
    """A token appeared in a position where the grammar does not allow it"""

    def __init__(self, kind, text):
        # type: (Deb822TokenKind, str) -> None
        self.kind = kind
        self.text = text
        super().__init__(kind, text)

    def __str__(self):
        # type: () -> str
        return "Unexpected token: " + self.text


class UnexpectedEofError(Deb822ParseError):
    """The input ended while a field separator or value was still expected"""

    def __str__(self):
        # type: () -> str
        return "Unexpected end-of-file"
