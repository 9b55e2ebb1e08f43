#!/usr/bin/python3
# -*- coding: utf-8 -*- vim: fileencoding=utf-8 :

# Copyright (C) 2026 The python-deb822-lossy developers
#
# This program is free software; you can redistribute it and/or
# modify it under the terms of the GNU General Public License
# as published by the Free Software Foundation, either version 2
# of the License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program; if not, write to the Free Software
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA 02110-1301 USA

"""Tests for the deb822 tokenizer"""
import io
import textwrap
from typing import List, Tuple

import pytest

from deb822_lossy._lossy.tokens import (
    Deb822Token, Deb822TokenKind, Deb822NewlineToken, Deb822WhitespaceToken,
    tokenize_deb822_text,
)


KEY = Deb822TokenKind.KEY
COLON = Deb822TokenKind.COLON
VALUE = Deb822TokenKind.VALUE
WHITESPACE = Deb822TokenKind.WHITESPACE
INDENT = Deb822TokenKind.INDENT
NEWLINE = Deb822TokenKind.NEWLINE
COMMENT = Deb822TokenKind.COMMENT
ERROR = Deb822TokenKind.ERROR


def kinds_and_text(text):
    # type: (str) -> List[Tuple[Deb822TokenKind, str]]
    return [(t.kind, t.text) for t in tokenize_deb822_text(text)]


class TestTokenizer:

    def test_simple_field(self):
        # type: () -> None
        assert kinds_and_text("Package: hello\n") == [
            (KEY, 'Package'),
            (COLON, ':'),
            (WHITESPACE, ' '),
            (VALUE, 'hello'),
            (NEWLINE, '\n'),
        ]

    def test_field_without_space_or_value(self):
        # type: () -> None
        assert kinds_and_text("Priority:optional\nEmpty:\n") == [
            (KEY, 'Priority'),
            (COLON, ':'),
            (VALUE, 'optional'),
            (NEWLINE, '\n'),
            (KEY, 'Empty'),
            (COLON, ':'),
            (NEWLINE, '\n'),
        ]

    def test_continuation_lines(self):
        # type: () -> None
        text = textwrap.dedent('''\
            Description: A
             Some more text
            \tand a tab
            ''')
        assert kinds_and_text(text) == [
            (KEY, 'Description'),
            (COLON, ':'),
            (WHITESPACE, ' '),
            (VALUE, 'A'),
            (NEWLINE, '\n'),
            (INDENT, ' '),
            (VALUE, 'Some more text'),
            (NEWLINE, '\n'),
            (INDENT, '\t'),
            (VALUE, 'and a tab'),
            (NEWLINE, '\n'),
        ]

    def test_whitespace_only_line_inside_field_is_a_continuation(self):
        # type: () -> None
        assert kinds_and_text("Subject: A\n \n B\n") == [
            (KEY, 'Subject'),
            (COLON, ':'),
            (WHITESPACE, ' '),
            (VALUE, 'A'),
            (NEWLINE, '\n'),
            (INDENT, ' '),
            (NEWLINE, '\n'),
            (INDENT, ' '),
            (VALUE, 'B'),
            (NEWLINE, '\n'),
        ]

    def test_blank_lines(self):
        # type: () -> None
        assert kinds_and_text("A: b\n\n  \nC: d") == [
            (KEY, 'A'),
            (COLON, ':'),
            (WHITESPACE, ' '),
            (VALUE, 'b'),
            (NEWLINE, '\n'),
            (NEWLINE, '\n'),
            (WHITESPACE, '  '),
            (NEWLINE, '\n'),
            (KEY, 'C'),
            (COLON, ':'),
            (WHITESPACE, ' '),
            (VALUE, 'd'),
        ]

    def test_comments(self):
        # type: () -> None
        assert kinds_and_text("# comment\nA: b\n# another\n") == [
            (COMMENT, '# comment'),
            (NEWLINE, '\n'),
            (KEY, 'A'),
            (COLON, ':'),
            (WHITESPACE, ' '),
            (VALUE, 'b'),
            (NEWLINE, '\n'),
            (COMMENT, '# another'),
            (NEWLINE, '\n'),
        ]

    def test_comment_does_not_end_field(self):
        # type: () -> None
        # The continuation line after the comment is still an indent
        assert kinds_and_text("A: b\n# c\n d\n")[-3:] == [
            (INDENT, ' '),
            (VALUE, 'd'),
            (NEWLINE, '\n'),
        ]

    def test_error_tokens(self):
        # type: () -> None
        assert kinds_and_text(": no key\n") == [
            (ERROR, ': no key'),
            (NEWLINE, '\n'),
        ]
        # Indentation without a field to continue
        assert kinds_and_text(" indented\n") == [
            (ERROR, ' indented'),
            (NEWLINE, '\n'),
        ]
        assert kinds_and_text("A: b\n\n indented\n")[-2:] == [
            (ERROR, ' indented'),
            (NEWLINE, '\n'),
        ]

    def test_key_without_colon(self):
        # type: () -> None
        assert kinds_and_text("Package hello\n") == [
            (KEY, 'Package'),
            (ERROR, ' hello'),
            (NEWLINE, '\n'),
        ]
        assert kinds_and_text("Package") == [
            (KEY, 'Package'),
        ]

    def test_crlf_line_endings(self):
        # type: () -> None
        assert kinds_and_text("A: b\r\n c\r\n\r\n") == [
            (KEY, 'A'),
            (COLON, ':'),
            (WHITESPACE, ' '),
            (VALUE, 'b'),
            (NEWLINE, '\r\n'),
            (INDENT, ' '),
            (VALUE, 'c'),
            (NEWLINE, '\r\n'),
            (NEWLINE, '\r\n'),
        ]

    def test_value_keeps_trailing_whitespace(self):
        # type: () -> None
        assert kinds_and_text("Section:   section   \n") == [
            (KEY, 'Section'),
            (COLON, ':'),
            (WHITESPACE, '   '),
            (VALUE, 'section   '),
            (NEWLINE, '\n'),
        ]

    def test_tokenization_is_total(self):
        # type: () -> None
        text = textwrap.dedent('''\
            # Leading comment
            Source: debhelper
            Build-Depends: po4a,
             gettext
            : broken

              \t
            Package: debhelper
            Description: something
            # inline
             .
             Final remark
            Missing colon here
            ''') + "Last: field\r\nNo-Newline: at end"
        tokens = list(tokenize_deb822_text(text))
        assert "".join(t.convert_to_text() for t in tokens) == text

    def test_bytes_and_line_iterables(self):
        # type: () -> None
        text = "Package: héllo\nVersion: 1\n"
        expected = kinds_and_text(text)
        from_bytes = [(t.kind, t.text) for t in tokenize_deb822_text(text.encode('utf-8'))]
        from_lines = [(t.kind, t.text)
                      for t in tokenize_deb822_text(text.splitlines(keepends=True))]
        from_file = [(t.kind, t.text)
                     for t in tokenize_deb822_text(io.BytesIO(text.encode('utf-8')))]
        assert from_bytes == expected
        assert from_lines == expected
        assert from_file == expected
        latin1 = [(t.kind, t.text)
                  for t in tokenize_deb822_text(text.encode('latin-1'), encoding='latin-1')]
        assert latin1 == expected

    def test_line_iterable_without_newlines(self):
        # type: () -> None
        with pytest.raises(ValueError):
            list(tokenize_deb822_text(["A: b", "C: d"]))

    def test_empty_input(self):
        # type: () -> None
        assert kinds_and_text("") == []


class TestTokens:

    def test_token_equality(self):
        # type: () -> None
        assert Deb822NewlineToken() == Deb822NewlineToken('\n')
        assert Deb822WhitespaceToken(' ') != Deb822NewlineToken()

    def test_token_validation(self):
        # type: () -> None
        with pytest.raises(ValueError):
            Deb822NewlineToken('\n\n')
        with pytest.raises(ValueError):
            Deb822WhitespaceToken('not space')
        with pytest.raises(ValueError):
            Deb822Token('embedded\nnewline')

    def test_repr(self):
        # type: () -> None
        assert repr(Deb822NewlineToken()) == "Deb822NewlineToken('\\n')"

    def test_only_comment_tokens_are_comments(self):
        # type: () -> None
        tokens = list(tokenize_deb822_text("# comment\nA: b\n #not a comment\n"))
        assert [t.kind for t in tokens if t.is_comment] == [COMMENT]
        assert [t.convert_to_text() for t in tokens if t.is_comment] == ['# comment']
