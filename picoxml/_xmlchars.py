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

"""Character classes of the XML 1.0 (fifth edition) productions.

Every predicate takes a single character, or EOF, and returns a bool. EOF
never belongs to any class.
"""

import re

from .constants import spaceCharacters, digits, hexDigits

_nameStartChars = (":A-Z_a-z"
                   "\u00C0-\u00D6\u00D8-\u00F6\u00F8-\u02FF"
                   "\u0370-\u037D\u037F-\u1FFF\u200C-\u200D"
                   "\u2070-\u218F\u2C00-\u2FEF\u3001-\uD7FF"
                   "\uF900-\uFDCF\uFDF0-\uFFFD"
                   "\U00010000-\U000EFFFF")

_nameChars = _nameStartChars + "\\-.0-9\u00B7\u0300-\u036F\u203F-\u2040"

_chars = "\t\n\r\u0020-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF"

_pubidChars = " \r\na-zA-Z0-9\\-'()+,./:=?;!*#@$_%"

nameStartCharRe = re.compile("[%s]" % _nameStartChars)
nameCharRe = re.compile("[%s]" % _nameChars)
nameRe = re.compile("[%s][%s]*\\Z" % (_nameStartChars, _nameChars))
charRe = re.compile("[%s]" % _chars)
pubidCharRe = re.compile("[%s]" % _pubidChars)


def isChar(c):
    return c is not None and charRe.match(c) is not None


def isCharCode(codepoint):
    return (codepoint in (0x9, 0xA, 0xD) or
            0x20 <= codepoint <= 0xD7FF or
            0xE000 <= codepoint <= 0xFFFD or
            0x10000 <= codepoint <= 0x10FFFF)


def isSpace(c):
    return c in spaceCharacters


def isNameStartChar(c):
    return c is not None and nameStartCharRe.match(c) is not None


def isNameChar(c):
    return c is not None and nameCharRe.match(c) is not None


def isName(s):
    """True if s as a whole matches the Name production"""
    return nameRe.match(s) is not None


def isPubidChar(c):
    return c is not None and pubidCharRe.match(c) is not None


def isDigit(c):
    return c in digits


def isHexDigit(c):
    return c in hexDigits


def isWhitespace(s):
    """True if s is a non-empty run of S characters"""
    return bool(s) and not s.strip("".join(spaceCharacters))
