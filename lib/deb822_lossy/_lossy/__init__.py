# The "from X import Y as Y" form is what mypy --strict accepts as an explicit
# re-export without relative imports.

# pylint: disable=useless-import-alias
from deb822_lossy._lossy.parsing import (
    parse_deb822_text as parse_deb822_text,
    parse_deb822_tokens as parse_deb822_tokens,
)
from deb822_lossy._lossy.model import (
    Deb822Document as Deb822Document,
    Deb822Paragraph as Deb822Paragraph,
    Deb822Field as Deb822Field,
)
from deb822_lossy._lossy.tokens import (
    Deb822TokenKind as Deb822TokenKind,
    tokenize_deb822_text as tokenize_deb822_text,
)
from deb822_lossy._lossy.types import (
    Deb822ParseError as Deb822ParseError,
    UnexpectedTokenError as UnexpectedTokenError,
    UnexpectedEofError as UnexpectedEofError,
)

__all__ = [
    'parse_deb822_text',
    'parse_deb822_tokens',
    'tokenize_deb822_text',
    'Deb822TokenKind',
    'Deb822Document',
    'Deb822Paragraph',
    'Deb822Field',
    'Deb822ParseError',
    'UnexpectedTokenError',
    'UnexpectedEofError',
]
