""" Lossy parser for RFC822-like Debian data formats

This module turns deb822 text (debian/control files, DEP-3 patch headers,
Packages files, ...) into a Deb822Document: a list of paragraphs, each being a
list of (name, value) fields in the order they appear in the file.

The parser is "lossy" in the sense that it recovers the field names and
values exactly, but throws away comments and formatting.  Writing the document
back gives the same fields, not the same bytes::

    >>> from deb822_lossy import parse_deb822_text
    >>> document = parse_deb822_text('''\\
    ... Package: hello
    ... # The version of hello
    ... Version: 2.10
    ... Description: A program that says hello
    ...  Some more text
    ...
    ... Package: world
    ... ''')
    >>> len(document)
    2
    >>> document[0]['Description']
    'A program that says hello\\nSome more text'
    >>> print(document.convert_to_text(), end='')
    Package: hello
    Version: 2.10
    Description: A program that says hello
    Some more text
    <BLANKLINE>
    Package: world

Syntax errors are fatal.  The parser raises a Deb822ParseError subclass on
the first problem and never returns a partially parsed document.

Grammar notes
-------------

 * Paragraphs are separated by one or more empty lines (lines consisting only
   of whitespace count as empty when they do not follow a field).
 * A line starting with a space or a tab continues the value of the previous
   field.  The indentation itself is not part of the value.
 * Lines starting with "#" are comments and are ignored, including inside a
   multi-line value.
"""

import logging

from typing import Iterable, List, Optional, Union

from deb822_lossy._lossy._util import BufferingIterator
from deb822_lossy._lossy.model import Deb822Document, Deb822Field, Deb822Paragraph
from deb822_lossy._lossy.tokens import Deb822Token, Deb822TokenKind, tokenize_deb822_text
from deb822_lossy._lossy.types import UnexpectedEofError, UnexpectedTokenError

logger = logging.getLogger(__name__)

_KEY = Deb822TokenKind.KEY
_COLON = Deb822TokenKind.COLON
_VALUE = Deb822TokenKind.VALUE
_WHITESPACE = Deb822TokenKind.WHITESPACE
_INDENT = Deb822TokenKind.INDENT
_NEWLINE = Deb822TokenKind.NEWLINE


def _unexpected(token):
    # type: (Deb822Token) -> UnexpectedTokenError
    return UnexpectedTokenError(token.kind, token.text)


def _skip_comment_line(buffered_stream):
    # type: (BufferingIterator[Deb822Token]) -> None
    # Consume everything up to and including the newline ending the comment
    for token in buffered_stream:
        if token.kind is _NEWLINE:
            break


def _read_first_value_line(buffered_stream, value_parts):
    # type: (BufferingIterator[Deb822Token], List[str]) -> None
    """Consume "<colon><space><value><newline>" after a field name"""
    separator = next(buffered_stream, None)
    if separator is None:
        raise UnexpectedEofError()
    if separator.kind is not _COLON:
        raise _unexpected(separator)

    # The space between the colon and the value is not part of the value
    for _ in buffered_stream.takewhile(lambda t: t.kind is _WHITESPACE):
        pass

    seen_line_content = False
    for token in buffered_stream:
        seen_line_content = True
        if token.kind is _VALUE:
            value_parts.append(token.text)
        elif token.kind is _NEWLINE:
            break
        else:
            raise _unexpected(token)

    if not seen_line_content:
        # "Field:" (or "Field: ") at the very end of the input
        raise UnexpectedEofError()
    value_parts.append('\n')


def _read_continuation_lines(buffered_stream, value_parts):
    # type: (BufferingIterator[Deb822Token], List[str]) -> None
    """Consume the continuation lines (if any) of the current field"""
    while True:
        next_token = buffered_stream.peek()
        if next_token is None:
            return
        if next_token.is_comment:
            # A comment line between continuation lines.  If the value does
            # not continue after it, then dropping it here is equivalent to
            # dropping it at the top level.
            _skip_comment_line(buffered_stream)
            continue
        if next_token.kind is not _INDENT:
            return

        next(buffered_stream)
        while True:
            token = buffered_stream.peek()
            if token is None or token.kind is _KEY:
                return
            if token.kind is _VALUE:
                value_parts.append(token.text)
            elif token.is_comment:
                pass
            elif token.kind is _NEWLINE:
                # Normalize "\r\n" to "\n" inside values
                value_parts.append('\n')
                next(buffered_stream)
                break
            else:
                raise _unexpected(token)
            next(buffered_stream)


def _build_field(field_name_token, buffered_stream):
    # type: (Deb822Token, BufferingIterator[Deb822Token]) -> Deb822Field
    value_parts = []  # type: List[str]
    _read_first_value_line(buffered_stream, value_parts)
    _read_continuation_lines(buffered_stream, value_parts)
    # The newline ending the last line is a terminator rather than a part of
    # the value.  Whitespace-only continuation lines at the end of a value can
    # leave more than one.
    value = "".join(value_parts).rstrip('\n')
    return Deb822Field(field_name_token.text, value)


def parse_deb822_tokens(tokens):
    # type: (Iterable[Deb822Token]) -> Deb822Document
    """Assemble a token stream into a Deb822Document

    This is the second half of parse_deb822_text.  It is exposed separately
    for callers that want to inspect or filter the token stream first.

    :param tokens: An iterable of tokens as produced by tokenize_deb822_text.
    :raises UnexpectedTokenError: A token appeared where the grammar does not
      allow it (e.g. a line starting with a colon or a continuation line
      without a field to continue).
    :raises UnexpectedEofError: The input ended after a field name without a
      colon or after the colon of a field without any value line.
    """
    buffered_stream = BufferingIterator(tokens)  # type: BufferingIterator[Deb822Token]
    document = Deb822Document()
    current_fields = []  # type: List[Deb822Field]

    for token in buffered_stream:
        kind = token.kind
        if kind is _KEY:
            current_fields.append(_build_field(token, buffered_stream))
        elif kind is _NEWLINE:
            # An empty line.  It ends the current paragraph (if any).
            if current_fields:
                document.append(Deb822Paragraph(current_fields))
                current_fields = []
        elif token.is_comment:
            _skip_comment_line(buffered_stream)
        elif kind is _WHITESPACE:
            pass
        else:
            # COLON, VALUE, INDENT and ERROR cannot start a line of a paragraph
            raise _unexpected(token)

    if current_fields:
        document.append(Deb822Paragraph(current_fields))

    logger.debug("Parsed deb822 document with %d paragraph(s)", len(document))
    return document


def parse_deb822_text(sequence,  # type: Union[str, bytes, Iterable[Union[str, bytes]]]
                      *,
                      encoding='utf-8',  # type: str
                      ):
    # type: (...) -> Deb822Document
    """Parse a deb822 file into a Deb822Document

    :param sequence: The text as a str, bytes or an iterable over lines of str
      or bytes (an open file for reading will do).  The lines must include the
      trailing line ending ("\\n") except for the last line.
    :param encoding: The encoding used to decode bytes (default: UTF-8).
    :raises Deb822ParseError: The text is not a syntactically valid deb822
      file (see parse_deb822_tokens for the concrete exceptions).
    """
    return parse_deb822_tokens(tokenize_deb822_text(sequence, encoding=encoding))
