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

import string

EOF = None

E = {
    "expected":
        "Expected %(expected)s but got %(got)s.",
    "expected-tag-name":
        "Expected tag name. Got '%(data)s' instead.",
    "expected-attribute-name":
        "Expected attribute name. Got '%(data)s' instead.",
    "expected-quote":
        "Expected a quoted attribute value. Got '%(data)s' instead.",
    "missing-whitespace-between-attributes":
        "Attributes must be separated by whitespace.",
    "duplicate-attribute":
        "Attribute '%(name)s' appears more than once on element '%(element)s'.",
    "malformed-qualified-name":
        "'%(name)s' is not a well-formed qualified name.",
    "lt-in-attribute-value":
        "'<' is not allowed in attribute values.",
    "eof-in-tag":
        "Unexpected end of file in tag.",
    "eof-in-attribute-value":
        "Unexpected end of file in attribute value.",
    "eof-in-comment":
        "Unexpected end of file in comment.",
    "eof-in-cdata":
        "Unexpected end of file in CDATA section.",
    "eof-in-pi":
        "Unexpected end of file in processing instruction.",
    "eof-in-doctype":
        "Unexpected end of file in DOCTYPE.",
    "double-dash-in-comment":
        "'--' is not allowed inside a comment.",
    "cdata-end-in-text":
        "']]>' is not allowed in character data.",
    "bare-ampersand":
        "'&' must start an entity or character reference.",
    "expected-semicolon":
        "Reference '&%(name)s' is not terminated by ';'.",
    "expected-numeric-entity":
        "Expected digits in character reference.",
    "illegal-codepoint-for-numeric-entity":
        "Character reference '&#%(charAsInt)s;' does not denote a legal character.",
    "expected-pi-target":
        "Expected processing instruction target. Got '%(data)s' instead.",
    "reserved-pi-target":
        "Processing instruction target '%(name)s' is reserved.",
    "misplaced-xml-declaration":
        "The XML declaration is only allowed at the start of the document.",
    "expected-version-info":
        "The XML declaration must start with a version.",
    "expected-markup-declaration":
        "Expected '<!--', '<![CDATA[' or '<!DOCTYPE'.",
    "misplaced-doctype":
        "DOCTYPE is only allowed in the prolog.",
    "duplicate-doctype":
        "Only one DOCTYPE is allowed.",
    "expected-doctype-name":
        "Expected a name after <!DOCTYPE.",
    "non-whitespace-outside-root":
        "Character data is not allowed outside the root element.",
    "reference-outside-root":
        "References are not allowed outside the root element.",
    "cdata-outside-root":
        "CDATA sections are not allowed outside the root element.",
    "multiple-roots":
        "Only one root element is allowed, found '%(name)s'.",
    "missing-root":
        "The document has no root element.",
    "unexpected-end-tag":
        "Unexpected end tag '%(name)s'.",
    "mismatched-end-tag":
        "End tag '%(name)s' does not match start tag '%(expected)s'.",
    "eof-in-element":
        "Unexpected end of file, element '%(name)s' is still open.",
    "empty-namespace-binding":
        "Prefix '%(prefix)s' cannot be bound to an empty namespace.",
    "unbound-prefix":
        "Prefix '%(prefix)s' is not bound to a namespace.",
    "truncated-byte-order-mark":
        "Input ended inside a byte order mark.",
}

spaceCharacters = frozenset([
    "\t",
    "\n",
    "\r",
    " "
])

digits = frozenset(string.digits)
hexDigits = frozenset(string.hexdigits)

entities = {
    "amp": "&",
    "lt": "<",
    "gt": ">",
    "quot": "\"",
    "apos": "'",
}

entitiesReverse = dict((v, k) for k, v in entities.items())

namespaces = {
    "xml": "http://www.w3.org/XML/1998/namespace",
    "xmlns": "http://www.w3.org/2000/xmlns/",
}

prefixes = dict((v, k) for k, v in namespaces.items())

tokenTypes = {
    "XmlDeclaration": 0,
    "Doctype": 1,
    "Characters": 2,
    "SpaceCharacters": 3,
    "StartTag": 4,
    "EndTag": 5,
    "Comment": 6,
    "ProcessingInstruction": 7,
    "CData": 8,
    "EntityRef": 9,
    "CharRef": 10,
}

tagTokenTypes = frozenset([tokenTypes["StartTag"], tokenTypes["EndTag"]])


class XMLError(Exception):
    """Base class for every error raised by picoxml"""
    pass


class InvalidSyntax(XMLError):
    """The document is not well-formed

    line is 1-based, column is 0-based.
    """
    def __init__(self, line, column, message):
        XMLError.__init__(self, line, column, message)
        self.line = line
        self.column = column
        self.message = message

    def __str__(self):
        return "line %d, column %d: %s" % (self.line, self.column, self.message)


class MalformedInput(InvalidSyntax):
    """The byte stream could not be decoded"""
    pass


class InvalidState(XMLError):
    """A writer method was called in a state that does not allow it"""
    pass


class DataLossWarning(UserWarning):
    """Raised when the current tree is unable to represent the input data"""
    pass
