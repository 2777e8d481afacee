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

from collections import deque

from .constants import EOF, entities, tokenTypes, spaceCharacters
from ._xmlchars import (isSpace, isNameStartChar, isNameChar, isDigit,
                        isHexDigit, isCharCode, isWhitespace)
from ._inputstream import XMLInputStream
from ._utils import Name, Attribute


def offsetPosition(position, text, offset):
    """Position of text[offset] given the position of text[0]"""
    line, column = position
    nLines = text.count("\n", 0, offset)
    if nLines:
        column = offset - (text.rfind("\n", 0, offset) + 1)
    else:
        column += offset
    return (line + nLines, column)


class XMLTokenizer(object):
    """ This class takes care of tokenizing XML.

    * self.stream
      Points to XMLInputStream object.

    Iterating over the tokenizer yields one dict per production, with the
    type taken from constants.tokenTypes and the (line, column) where the
    production started under "position". Well-formedness violations inside
    a production raise InvalidSyntax; checks that need the element stack
    are left to the parser.
    """

    def __init__(self, stream, **kwargs):

        self.stream = XMLInputStream(stream, **kwargs)

        # Setup the initial tokenizer state
        self.state = self.prologState

        # The current token being created
        self.currentToken = None
        # Where the markup construct being read started
        self.markupPosition = (1, 0)
        super(XMLTokenizer, self).__init__()

    def __iter__(self):
        """ This is where the magic happens.

        We do our usually processing through the states and when we have a token
        to return we yield the token which pauses processing until the next token
        is requested.
        """
        self.tokenQueue = deque([])
        # Start processing. When EOF is reached self.state will return False
        # instead of True and the loop will terminate.
        while self.state():
            while self.tokenQueue:
                yield self.tokenQueue.popleft()
        while self.tokenQueue:
            yield self.tokenQueue.popleft()

    def syntaxError(self, errorcode, datavars=None, position=None):
        self.stream.syntaxError(errorcode, datavars, position)

    def consumeQualifiedName(self, position):
        name = self.stream.take(isNameChar)
        prefix, sep, localName = name.partition(":")
        if sep and (not prefix or not localName or ":" in localName):
            self.syntaxError("malformed-qualified-name", {"name": name}, position)
        return name

    def consumeNumberEntity(self, position):
        """This function returns (base, digits, char) for the character
        reference whose "&#" has just been consumed.

        The reference must denote a legal XML Char.
        """
        if self.stream.attempt("x"):
            base = 16
            digits = self.stream.take(isHexDigit)
        else:
            base = 10
            digits = self.stream.take(isDigit)

        if not digits:
            self.syntaxError("expected-numeric-entity")
        if not self.stream.attempt(";"):
            self.syntaxError("expected-semicolon",
                             {"name": "#" + ("x" if base == 16 else "") + digits})

        charAsInt = int(digits, base)
        if not isCharCode(charAsInt):
            self.syntaxError("illegal-codepoint-for-numeric-entity",
                             {"charAsInt": ("x" if base == 16 else "") + digits},
                             position)
        return base, digits, chr(charAsInt)

    def consumeEntityName(self, position):
        """Read the name and ';' of an entity reference whose '&' was consumed"""
        if not isNameStartChar(self.stream.peek()):
            self.syntaxError("bare-ampersand", position=position)
        name = self.stream.take(isNameChar)
        if not self.stream.attempt(";"):
            self.syntaxError("expected-semicolon", {"name": name})
        return name

    def consumeReference(self, position):
        if self.stream.attempt("#"):
            base, digits, char = self.consumeNumberEntity(position)
            self.tokenQueue.append({"type": tokenTypes["CharRef"],
                                    "base": base, "data": digits,
                                    "char": char, "position": position})
        else:
            name = self.consumeEntityName(position)
            if name in entities:
                self.tokenQueue.append({"type": tokenTypes["Characters"],
                                        "data": entities[name],
                                        "position": position})
            else:
                self.tokenQueue.append({"type": tokenTypes["EntityRef"],
                                        "name": name, "position": position})

    def consumeQuotedValue(self, stops=()):
        quote = self.stream.char()
        if quote not in ("'", "\""):
            self.stream.unget(quote)
            self.syntaxError("expected-quote", {"data": quote or "EOF"})
        value = self.stream.charsUntil((quote,) + tuple(stops))
        return quote, value

    def consumeAttributeValue(self, skippedEntities):
        quote, value = self.consumeQuotedValue(("&", "<"))
        stops = (quote, "&", "<")
        rv = [value]
        while True:
            position = self.stream.position()
            c = self.stream.char()
            if c == quote:
                break
            elif c == "&":
                if self.stream.attempt("#"):
                    rv.append(self.consumeNumberEntity(position)[2])
                else:
                    name = self.consumeEntityName(position)
                    if name in entities:
                        rv.append(entities[name])
                    else:
                        # Unknown entities stay as written
                        rv.append("&%s;" % name)
                        skippedEntities.append(name)
            elif c == "<":
                self.syntaxError("lt-in-attribute-value", position=position)
            else:
                self.syntaxError("eof-in-attribute-value")
            rv.append(self.stream.charsUntil(stops))
        return "".join(rv)

    def consumeUntil(self, terminator, errorcode):
        """Return the text before terminator and consume both"""
        rv = []
        first, rest = terminator[0], terminator[1:]
        while True:
            rv.append(self.stream.charsUntil((first,)))
            c = self.stream.char()
            if c is EOF:
                self.syntaxError(errorcode)
            if self.stream.attempt(rest):
                break
            rv.append(c)
        return "".join(rv)

    def emitCharacters(self, data, position):
        index = data.find("]]>")
        if index != -1:
            self.syntaxError("cdata-end-in-text",
                             position=offsetPosition(position, data, index))
        if isWhitespace(data):
            self.tokenQueue.append({"type": tokenTypes["SpaceCharacters"],
                                    "data": data, "position": position})
        else:
            self.tokenQueue.append({"type": tokenTypes["Characters"],
                                    "data": data, "position": position})

    # Below are the various tokenizer states worked out.

    def prologState(self):
        self.state = self.dataState
        start = self.stream.peek(6)
        if len(start) == 6 and start[:5] == "<?xml" and start[5] in spaceCharacters:
            self.markupPosition = self.stream.position()
            self.stream.attempt("<?xml")
            self.xmlDeclarationState()
        return True

    def xmlDeclarationState(self):
        attributes = []
        self.stream.take(isSpace)
        if not self.stream.lookahead("version"):
            self.syntaxError("expected-version-info")

        spaces = True
        for name in ("version", "encoding", "standalone"):
            if spaces and self.stream.attempt(name):
                self.stream.take(isSpace)
                self.stream.expect("=", "'='")
                self.stream.take(isSpace)
                quote, value = self.consumeQuotedValue()
                self.stream.expect(quote, "closing quote")
                attributes.append(Attribute(None, name, value))
                spaces = self.stream.take(isSpace)
        self.stream.expect("?>", "'?>'")

        self.tokenQueue.append({"type": tokenTypes["XmlDeclaration"],
                                "data": attributes,
                                "position": self.markupPosition})
        return True

    def dataState(self):
        position = self.stream.position()
        data = self.stream.char()
        if data == "<":
            self.markupPosition = position
            self.state = self.tagOpenState
        elif data == "&":
            self.consumeReference(position)
        elif data is EOF:
            # Tokenization ends.
            return False
        else:
            chars = self.stream.charsUntil(("<", "&"))
            self.emitCharacters(data + chars, position)
        return True

    def tagOpenState(self):
        data = self.stream.char()
        if data == "!":
            self.state = self.markupDeclarationOpenState
        elif data == "?":
            self.state = self.processingInstructionState
        elif data == "/":
            self.state = self.endTagOpenState
        elif isNameStartChar(data):
            self.stream.unget(data)
            self.state = self.tagNameState
        elif data is EOF:
            self.syntaxError("eof-in-tag")
        else:
            self.stream.unget(data)
            self.syntaxError("expected-tag-name", {"data": data})
        return True

    def tagNameState(self):
        self.currentToken = {"type": tokenTypes["StartTag"],
                             "name": self.consumeQualifiedName(self.markupPosition),
                             "data": [],
                             "selfClosing": False,
                             "skippedEntities": [],
                             "position": self.markupPosition}
        seen = set()
        while True:
            sawSpace = bool(self.stream.take(isSpace))
            position = self.stream.position()
            data = self.stream.char()
            if data == ">":
                break
            elif data == "/":
                self.stream.expect(">", "'>'")
                self.currentToken["selfClosing"] = True
                break
            elif data is EOF:
                self.syntaxError("eof-in-tag")
            elif isNameStartChar(data):
                self.stream.unget(data)
                if not sawSpace:
                    self.syntaxError("missing-whitespace-between-attributes")
                self.attributeState(seen, position)
            else:
                self.stream.unget(data)
                self.syntaxError("expected-attribute-name", {"data": data})

        self.tokenQueue.append(self.currentToken)
        self.currentToken = None
        self.state = self.dataState
        return True

    def attributeState(self, seen, position):
        rawName = self.consumeQualifiedName(position)
        if rawName in seen:
            self.syntaxError("duplicate-attribute",
                             {"name": rawName, "element": self.currentToken["name"]},
                             position)
        seen.add(rawName)
        self.stream.take(isSpace)
        self.stream.expect("=", "'='")
        self.stream.take(isSpace)
        value = self.consumeAttributeValue(self.currentToken["skippedEntities"])
        name = Name.fromString(rawName)
        self.currentToken["data"].append(Attribute(name.prefix, name.localName, value))

    def endTagOpenState(self):
        data = self.stream.peek()
        if not isNameStartChar(data):
            self.syntaxError("expected-tag-name", {"data": data or "EOF"})
        name = self.stream.take(isNameChar)
        self.stream.take(isSpace)
        self.stream.expect(">", "'>'")
        self.tokenQueue.append({"type": tokenTypes["EndTag"], "name": name,
                                "position": self.markupPosition})
        self.state = self.dataState
        return True

    def markupDeclarationOpenState(self):
        if self.stream.attempt("--"):
            self.state = self.commentState
        elif self.stream.attempt("[CDATA["):
            self.state = self.cdataSectionState
        elif self.stream.attempt("DOCTYPE"):
            self.state = self.doctypeState
        else:
            self.syntaxError("expected-markup-declaration")
        return True

    def commentState(self):
        rv = []
        while True:
            rv.append(self.stream.charsUntil(("-",)))
            position = self.stream.position()
            data = self.stream.char()
            if data is EOF:
                self.syntaxError("eof-in-comment")
            if self.stream.attempt("-"):
                if self.stream.attempt(">"):
                    break
                self.syntaxError("double-dash-in-comment", position=position)
            rv.append(data)
        self.tokenQueue.append({"type": tokenTypes["Comment"], "data": "".join(rv),
                                "position": self.markupPosition})
        self.state = self.dataState
        return True

    def cdataSectionState(self):
        data = self.consumeUntil("]]>", "eof-in-cdata")
        self.tokenQueue.append({"type": tokenTypes["CData"], "data": data,
                                "position": self.markupPosition})
        self.state = self.dataState
        return True

    def processingInstructionState(self):
        data = self.stream.peek()
        if not isNameStartChar(data):
            self.syntaxError("expected-pi-target", {"data": data or "EOF"})
        target = self.stream.take(isNameChar)
        if target == "xml":
            self.syntaxError("misplaced-xml-declaration", position=self.markupPosition)
        elif target.lower() == "xml":
            self.syntaxError("reserved-pi-target", {"name": target},
                             position=self.markupPosition)

        if self.stream.attempt("?>"):
            data = ""
        else:
            self.stream.expect(isSpace, "whitespace or '?>'")
            self.stream.take(isSpace)
            data = self.consumeUntil("?>", "eof-in-pi")
        self.tokenQueue.append({"type": tokenTypes["ProcessingInstruction"],
                                "name": target, "data": data,
                                "position": self.markupPosition})
        self.state = self.dataState
        return True

    def doctypeState(self):
        self.stream.expect(isSpace, "whitespace")
        self.stream.take(isSpace)
        if not isNameStartChar(self.stream.peek()):
            self.syntaxError("expected-doctype-name")
        name = self.stream.take(isNameChar)

        # The body is kept verbatim; only its nesting is followed
        rv = []
        depth = 0
        while True:
            rv.append(self.stream.charsUntil(("[", "]", ">", "'", "\"", "<")))
            data = self.stream.char()
            if data is EOF:
                self.syntaxError("eof-in-doctype")
            elif data == ">" and depth == 0:
                break
            elif data in ("'", "\""):
                rv.append(data + self.consumeUntil(data, "eof-in-doctype") + data)
                continue
            elif data == "<" and self.stream.attempt("!--"):
                rv.append("<!--" + self.consumeUntil("-->", "eof-in-doctype") + "-->")
                continue
            elif data == "<" and self.stream.attempt("?"):
                rv.append("<?" + self.consumeUntil("?>", "eof-in-doctype") + "?>")
                continue
            elif data == "[":
                depth += 1
            elif data == "]" and depth:
                depth -= 1
            rv.append(data)

        self.tokenQueue.append({"type": tokenTypes["Doctype"], "name": name,
                                "data": "".join(rv),
                                "position": self.markupPosition})
        self.state = self.dataState
        return True
