# Copyright (c) 2006-2013 James Graham and other contributors
#
# Permission is hereby granted, free of charge, to any person obtaining
# a copy of this software and associated documentation files (the
# "Software"), to deal in the Software without restriction, including
# without limitation the rights to use, copy, modify, merge, publish,
# distribute, sublicense, and/or sell copies of the Software, and to
# permit persons to whom the Software is furnished to do so, subject to
# the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE
# LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION
# OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION
# WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.

import pytest

from picoxml import _xmlchars
from picoxml.constants import EOF


@pytest.mark.parametrize("c,expected", [
    ("\t", True), ("\n", True), ("\r", True), (" ", True), ("a", True),
    ("\ud7ff", True), ("\ue000", True), ("\ufffd", True), ("\U00010000", True),
    ("\x00", False), ("\x01", False), ("\x1f", False), ("\ufffe", False),
    ("\uffff", False), (EOF, False),
])
def test_is_char(c, expected):
    assert _xmlchars.isChar(c) is expected


@pytest.mark.parametrize("codepoint,expected", [
    (0x9, True), (0xA, True), (0xD, True), (0x20, True), (0x10FFFF, True),
    (0x0, False), (0x8, False), (0xD800, False), (0xFFFE, False), (0x110000, False),
])
def test_is_char_code(codepoint, expected):
    assert _xmlchars.isCharCode(codepoint) is expected


@pytest.mark.parametrize("c,expected", [
    (" ", True), ("\t", True), ("\n", True), ("\r", True),
    ("\x0b", False), ("\xa0", False), ("a", False), (EOF, False),
])
def test_is_space(c, expected):
    assert _xmlchars.isSpace(c) is expected


@pytest.mark.parametrize("c,start,name", [
    ("a", True, True), ("Z", True, True), ("_", True, True), (":", True, True),
    ("\u00c0", True, True), ("\u4e00", True, True),
    ("1", False, True), ("-", False, True), (".", False, True), ("\u00b7", False, True),
    ("\u0300", False, True),
    (" ", False, False), ("<", False, False), ("&", False, False), (EOF, False, False),
])
def test_name_chars(c, start, name):
    assert _xmlchars.isNameStartChar(c) is start
    assert _xmlchars.isNameChar(c) is name


@pytest.mark.parametrize("s,expected", [
    ("a", True), ("a:b", True), ("_x-1.2", True), ("xml", True),
    ("", False), ("1a", False), ("-a", False), ("a b", False),
])
def test_is_name(s, expected):
    assert _xmlchars.isName(s) is expected


@pytest.mark.parametrize("c,expected", [
    ("a", True), ("0", True), ("-", True), ("'", True), (" ", True), ("\n", True),
    ("\"", False), ("<", False), ("&", False), ("\t", False), (EOF, False),
])
def test_is_pubid_char(c, expected):
    assert _xmlchars.isPubidChar(c) is expected


def test_digits():
    assert _xmlchars.isDigit("7")
    assert not _xmlchars.isDigit("a")
    assert not _xmlchars.isDigit(EOF)
    assert _xmlchars.isHexDigit("a")
    assert _xmlchars.isHexDigit("F")
    assert not _xmlchars.isHexDigit("g")
    assert not _xmlchars.isHexDigit(EOF)


@pytest.mark.parametrize("s,expected", [
    (" ", True), ("\n\t \r", True), ("", False), (" a ", False),
])
def test_is_whitespace(s, expected):
    assert _xmlchars.isWhitespace(s) is expected
