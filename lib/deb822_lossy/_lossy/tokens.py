import enum
import re
import sys

from typing import Iterable, Iterator, Optional, Union

from deb822_lossy._lossy._util import BufferingIterator


_RE_WHITESPACE_LINE = re.compile(r'^[ \t]+$')
_RE_LINE_TERMINATOR = re.compile(r'\r?\n\Z')
_RE_INDENT = re.compile(r'[ \t]+')

# A field line is "<name>:<space><value>".  The name runs up to the first
# colon or whitespace.  Anything else after a name is left for the parser
# to reject (missing colon).
_RE_FIELD_LINE = re.compile(r'''
    ^                                          # Start of line
    (?P<field_name> [^\s:#] [^\s:]* )          # Field name
    (?:
        (?P<separator> : )
        (?P<space_before_value> [ \t]* )       # Not part of the value
        (?P<value> .* )                        # The rest of the line (may be empty)
      |
        (?P<garbage> .+ )                      # Field name without a separator
    )?
    $
''', re.VERBOSE | re.DOTALL)


class Deb822TokenKind(enum.Enum):
    """The closed set of token kinds produced by the tokenizer"""

    KEY = 'key'
    COLON = 'colon'
    VALUE = 'value'
    WHITESPACE = 'whitespace'
    INDENT = 'indent'
    NEWLINE = 'newline'
    COMMENT = 'comment'
    ERROR = 'error'


class Deb822Token:
    """A token is an atomic syntactical element from a deb822 file

    A file is tokenized into a series of tokens.  If these tokens are converted
    to text in the same order, you get exactly the same text back.  The lossy
    parser later throws away the tokens that carry no field content (comments
    and insignificant whitespace).
    """

    __slots__ = ('_text',)

    kind = None  # type: Deb822TokenKind

    def __init__(self, text):
        # type: (str) -> None
        if text == '':  # pragma: no cover
            raise ValueError("Tokens must have content")
        self._text = text  # type: str
        self._verify_token_text()

    def __repr__(self):
        # type: () -> str
        return "{clsname}('{text}')".format(clsname=self.__class__.__name__,
                                            text=self._text.replace('\n', '\\n'),
                                            )

    def __eq__(self, other):
        # type: (object) -> bool
        if not isinstance(other, Deb822Token):
            return NotImplemented
        return self.kind is other.kind and self._text == other._text

    def __hash__(self):
        # type: () -> int
        return hash((self.kind, self._text))

    def _verify_token_text(self):
        # type: () -> None
        if '\n' in self._text or '\r' in self._text:
            raise ValueError("Only newline tokens may contain line terminators")

    @property
    def is_comment(self):
        # type: () -> bool
        return False

    @property
    def text(self):
        # type: () -> str
        return self._text

    # To support callers that want a simple interface for converting tokens to text
    def convert_to_text(self):
        # type: () -> str
        return self._text


class Deb822WhitespaceToken(Deb822Token):
    """Insignificant whitespace (after a colon or on an otherwise blank line)"""

    __slots__ = ()

    kind = Deb822TokenKind.WHITESPACE

    def _verify_token_text(self):
        # type: () -> None
        super()._verify_token_text()
        if not self._text.isspace():
            raise ValueError(self.__class__.__name__ + " tokens must only contain whitespace")


class Deb822IndentToken(Deb822WhitespaceToken):
    """The leading whitespace of a continuation line"""

    __slots__ = ()

    kind = Deb822TokenKind.INDENT


class Deb822NewlineToken(Deb822WhitespaceToken):
    """A line terminator ("\\n" or "\\r\\n")

    On its own (i.e. an empty line), it separates paragraphs.
    """

    __slots__ = ()

    kind = Deb822TokenKind.NEWLINE

    def __init__(self, text='\n'):
        # type: (str) -> None
        super().__init__(text)

    def _verify_token_text(self):
        # type: () -> None
        if self._text not in ('\n', '\r\n'):
            raise ValueError("Newline tokens must be exactly one line terminator")


class Deb822ErrorToken(Deb822Token):
    """Token that represents a syntactical error"""

    __slots__ = ()

    kind = Deb822TokenKind.ERROR

    def _verify_token_text(self):
        # type: () -> None
        # Error tokens carry whatever text could not be classified
        pass


class Deb822CommentToken(Deb822Token):

    __slots__ = ()

    kind = Deb822TokenKind.COMMENT

    @property
    def is_comment(self):
        # type: () -> bool
        return True


class Deb822KeyToken(Deb822Token):

    __slots__ = ()

    kind = Deb822TokenKind.KEY

    def __init__(self, text):
        # type: (str) -> None
        super().__init__(sys.intern(text))


class Deb822ColonToken(Deb822Token):

    __slots__ = ()

    kind = Deb822TokenKind.COLON

    def __init__(self):
        # type: () -> None
        super().__init__(':')


class Deb822ValueToken(Deb822Token):
    """The content of a value line (first line or continuation line)"""

    __slots__ = ()

    kind = Deb822TokenKind.VALUE


def _iter_text_lines(text):
    # type: (str) -> Iterator[str]
    # str.splitlines also splits on form feeds and unicode separators,
    # which are ordinary value characters in deb822.
    start = 0
    end = len(text)
    while start < end:
        idx = text.find('\n', start)
        if idx < 0:
            yield text[start:]
            return
        yield text[start:idx + 1]
        start = idx + 1


def _as_lines(sequence, encoding):
    # type: (Union[str, bytes, Iterable[Union[str, bytes]]], str) -> Iterator[str]
    if isinstance(sequence, bytes):
        sequence = sequence.decode(encoding)
    if isinstance(sequence, str):
        yield from _iter_text_lines(sequence)
        return
    for x in sequence:
        if isinstance(x, bytes):
            x = x.decode(encoding)
        yield x


def tokenize_deb822_text(sequence,  # type: Union[str, bytes, Iterable[Union[str, bytes]]]
                         *,
                         encoding='utf-8',  # type: str
                         ):
    # type: (...) -> Iterator[Deb822Token]
    """Tokenize a deb822 file

    The tokenizer never rejects input.  Text it cannot classify is emitted as
    a Deb822ErrorToken and left for the parser to reject.

    >>> [t.kind.name for t in tokenize_deb822_text("Package: hello\\n")]
    ['KEY', 'COLON', 'WHITESPACE', 'VALUE', 'NEWLINE']

    :param sequence: The text as a str, UTF-8 encoded bytes or an iterable of
      lines (a file open for reading will do).  Lines from an iterable must
      include their line terminator except for the last line.
    :param encoding: The encoding used to decode bytes.
    """
    field_open = False

    text_stream = BufferingIterator(_as_lines(sequence, encoding))  # type: BufferingIterator[str]

    for no, line in enumerate(text_stream, start=1):

        newline_match = _RE_LINE_TERMINATOR.search(line)
        if newline_match is None:
            # We expect newlines at the end of each line except the last.
            if text_stream.peek() is not None:
                raise ValueError("Invalid line iterator: Line " + str(no) + " did not end on a"
                                 " newline and it is not the last line in the stream!")
            if line == '':
                continue
            content = line
            newline = None  # type: Optional[Deb822NewlineToken]
        else:
            content = line[:newline_match.start()]
            newline = Deb822NewlineToken(newline_match.group())

        if '\r' in content or '\n' in content:
            # A bare "\r" (or a line from an iterable with an embedded
            # newline) cannot be classified.
            field_open = False
            yield Deb822ErrorToken(content)
        elif content == '':
            # Blank lines terminate fields
            field_open = False
        elif content[0] == '#':
            yield Deb822CommentToken(content)
        elif content[0] in ' \t':
            if field_open:
                indent = _RE_INDENT.match(content)
                assert indent is not None
                yield Deb822IndentToken(indent.group())
                if indent.end() < len(content):
                    yield Deb822ValueToken(content[indent.end():])
            elif _RE_WHITESPACE_LINE.match(content):
                yield Deb822WhitespaceToken(sys.intern(content))
            else:
                yield Deb822ErrorToken(content)
        else:
            field_line_match = _RE_FIELD_LINE.match(content)
            if field_line_match is None:
                field_open = False
                yield Deb822ErrorToken(content)
            else:
                field_open = True
                field_name, separator, space_before, value, garbage = field_line_match.group(
                    'field_name', 'separator', 'space_before_value', 'value', 'garbage',
                )
                yield Deb822KeyToken(field_name)
                if separator:
                    yield Deb822ColonToken()
                if space_before:
                    yield Deb822WhitespaceToken(sys.intern(space_before))
                if value:
                    yield Deb822ValueToken(value)
                if garbage:
                    yield Deb822ErrorToken(garbage)

        if newline is not None:
            yield newline
