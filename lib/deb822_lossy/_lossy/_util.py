import collections
import collections.abc
import logging

from typing import (
    Callable, Iterable, Iterator, Optional, TypeVar, TYPE_CHECKING,
)

if TYPE_CHECKING:
    from deb822_lossy._lossy.tokens import Deb822Token


T = TypeVar('T')


def print_tokens(tokens,  # type: Iterable['Deb822Token']
                 *,
                 output_function=None,  # type: Optional[Callable[[str], None]]
                 ):
    # type: (...) -> None
    """Debugging aid, which can dump a token stream one token per line

    Each physical line of the input is indented under a "line N" header so
    it is easy to see where the tokenizer split a line.

    >>> print_tokens(tokenize_deb822_text("A: b\\n"), output_function=print)
    line 1
      KEY Deb822KeyToken('A')
      COLON Deb822ColonToken(':')
      WHITESPACE Deb822WhitespaceToken(' ')
      VALUE Deb822ValueToken('b')
      NEWLINE Deb822NewlineToken('\\n')

    :param tokens: An iterable of Deb822Token (e.g. the output of
      tokenize_deb822_text).
    :param output_function: Callable that receives a single str argument and is responsible
      for "displaying" that line. The callable may be invoked multiple times (one per line
      of output).  Defaults to logging.info if omitted.
    """
    if output_function is None:
        output_function = logging.info
    line_no = 1
    start_of_line = True
    for token in tokens:
        if start_of_line:
            output_function("line " + str(line_no))
            start_of_line = False
        output_function("  " + token.kind.name + " " + repr(token))
        if token.text.endswith('\n'):
            line_no += 1
            start_of_line = True


class BufferingIterator(collections.abc.Iterator[T]):
    """Iterator with lookahead (peek without consuming)"""

    def __init__(self, stream: Iterable[T]) -> None:
        self._stream = iter(stream)  # type: Iterator[T]
        self._buffer = collections.deque()  # type: collections.deque[T]
        self._expired = False  # type: bool

    def __next__(self):
        # type: () -> T
        if self._buffer:
            return self._buffer.popleft()
        if self._expired:
            raise StopIteration
        return next(self._stream)

    def takewhile(self, predicate):
        # type: (Callable[[T], bool]) -> Iterable[T]
        """Variant of itertools.takewhile except it does not discard the first non-matching item"""
        buffer = self._buffer
        while buffer or self._fill_buffer(1):
            v = buffer[0]
            if predicate(v):
                buffer.popleft()
                yield v
            else:
                break

    def _fill_buffer(self, number):
        # type: (int) -> bool
        if not self._expired:
            while len(self._buffer) < number:
                try:
                    self._buffer.append(next(self._stream))
                except StopIteration:
                    self._expired = True
                    break
        return bool(self._buffer)

    def peek(self):
        # type: () -> Optional[T]
        return self.peek_at(1)

    def peek_at(self, items_ahead):
        # type: (int) -> Optional[T]
        self._fill_buffer(items_ahead)
        if len(self._buffer) < items_ahead:
            return None
        return self._buffer[items_ahead - 1]
