""" Lossy parsing of deb822 (debian/control style) files

The core of the package is parse_deb822_text, which turns the text of a
deb822 file into a Deb822Document.  The modules control, dep3, relations and
vcs interpret the fields of common file types on top of that.
"""

# pylint: disable=useless-import-alias
from deb822_lossy._lossy import (
    parse_deb822_text as parse_deb822_text,
    tokenize_deb822_text as tokenize_deb822_text,
    Deb822Document as Deb822Document,
    Deb822Paragraph as Deb822Paragraph,
    Deb822Field as Deb822Field,
    Deb822ParseError as Deb822ParseError,
    UnexpectedTokenError as UnexpectedTokenError,
    UnexpectedEofError as UnexpectedEofError,
)

__all__ = [
    'parse_deb822_text',
    'tokenize_deb822_text',
    'Deb822Document',
    'Deb822Paragraph',
    'Deb822Field',
    'Deb822ParseError',
    'UnexpectedTokenError',
    'UnexpectedEofError',
]
