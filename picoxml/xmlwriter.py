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

"""Writes XML one construct at a time

XMLWriter checks that the calls made on it describe a well-formed
document and writes the markup for them to a text stream as they arrive.
"""

from ._utils import escape
from ._xmlchars import isWhitespace
from .constants import InvalidState, namespaces

__all__ = ["XMLWriter", "DocumentNotOpened", "DocumentOpen", "ElementOpen",
           "ElementClosedChildrenAllowed", "DocumentClosed"]

# Writer states
DocumentNotOpened = "DocumentNotOpened"
DocumentOpen = "DocumentOpen"
ElementOpen = "ElementOpen"
ElementClosedChildrenAllowed = "ElementClosedChildrenAllowed"
DocumentClosed = "DocumentClosed"


def escapeContent(data):
    # A literal CR would come back as LF after line-end normalisation
    return escape(data).replace("\r", "&#13;")


class ElementState(object):
    def __init__(self, prefix, localName, empty):
        self.prefix = prefix or None
        self.localName = localName
        self.empty = empty
        self.defaultNamespace = None
        self.namespaces = {}

    @property
    def qname(self):
        if self.prefix is None:
            return self.localName
        return "%s:%s" % (self.prefix, self.localName)


class XMLWriter(object):
    """Writer for well-formed XML

    stream is any object with a write method taking str; flush and close
    are passed on to it when it has them.

    A start tag stays open after writeStartElement so that attributes and
    namespace declarations can follow, and is closed by the next call that
    writes anything else. Elements from writeEmptyElement need no
    writeEndElement. Calling one of the write methods before
    writeStartDocument opens the document without an XML declaration.
    Calls that would make the document malformed raise InvalidState;
    comments, CDATA sections and processing instructions whose content
    cannot be written raise ValueError.
    """

    def __init__(self, stream):
        self.stream = stream
        self.state = DocumentNotOpened
        self.openElements = []
        self.rootWritten = False
        self.doctypeWritten = False

    def write(self, data):
        self.stream.write(data)

    # State handling

    def requireDocument(self):
        if self.state == DocumentClosed:
            raise InvalidState("document already ended")
        if self.state == DocumentNotOpened:
            self.state = DocumentOpen

    def closePendingTag(self):
        if self.state != ElementOpen:
            return
        element = self.openElements[-1]
        if element.empty:
            self.write(" />")
            self.popElement()
        else:
            self.write(">")
            self.state = ElementClosedChildrenAllowed

    def popElement(self):
        element = self.openElements.pop()
        if self.openElements:
            self.state = ElementClosedChildrenAllowed
        else:
            self.state = DocumentOpen
        return element

    def requireMarkupWriteable(self):
        self.requireDocument()
        self.closePendingTag()

    def requireContentWriteable(self):
        self.requireMarkupWriteable()
        if not self.openElements:
            raise InvalidState("content outside the root element")

    def requireElementWriteable(self):
        self.requireMarkupWriteable()
        if not self.openElements and self.rootWritten:
            raise InvalidState("document already has a root element")

    def requireAttributeWriteable(self):
        if self.state != ElementOpen:
            raise InvalidState("no start tag open for attributes")

    # Document

    def writeStartDocument(self, version="1.0", encoding=None, standalone=None):
        if self.state != DocumentNotOpened:
            raise InvalidState("document already open")
        self.write("<?xml version=\"%s\"" % escape(version))
        if encoding is not None:
            self.write(" encoding=\"%s\"" % escape(encoding))
        if standalone is not None:
            if standalone is True:
                standalone = "yes"
            elif standalone is False:
                standalone = "no"
            self.write(" standalone=\"%s\"" % escape(standalone))
        self.write("?>")
        self.state = DocumentOpen

    def writeDTD(self, name, declaration=""):
        """Write a DOCTYPE; declaration is everything after the name"""
        self.requireDocument()
        if self.state != DocumentOpen or self.rootWritten or self.doctypeWritten:
            raise InvalidState("DOCTYPE must precede the root element")
        self.write("<!DOCTYPE %s%s>" % (name, declaration))
        self.doctypeWritten = True

    def writeEndDocument(self):
        """Close any open elements and end the document"""
        if self.state in (DocumentNotOpened, DocumentClosed):
            raise InvalidState("document not open")
        self.closePendingTag()
        while self.openElements:
            self.writeEndElement()
        self.state = DocumentClosed

    # Elements and attributes

    def _startElement(self, prefix, localName, empty):
        self.requireElementWriteable()
        element = ElementState(prefix, localName, empty)
        self.write("<%s" % element.qname)
        self.openElements.append(element)
        self.rootWritten = True
        self.state = ElementOpen

    def writeStartElement(self, prefix, localName):
        self._startElement(prefix, localName, False)

    def writeEmptyElement(self, prefix, localName):
        self._startElement(prefix, localName, True)

    def writeEndElement(self):
        self.requireMarkupWriteable()
        if not self.openElements:
            raise InvalidState("no open element to end")
        element = self.popElement()
        self.write("</%s>" % element.qname)

    def writeAttribute(self, prefix, localName, value):
        self.requireAttributeWriteable()
        if prefix:
            self.write(" %s:%s=\"%s\"" % (prefix, localName, escapeContent(value)))
        else:
            self.write(" %s=\"%s\"" % (localName, escapeContent(value)))

    def writeDefaultNamespace(self, uri):
        self.requireAttributeWriteable()
        self.write(" xmlns=\"%s\"" % escape(uri))
        self.openElements[-1].defaultNamespace = uri

    def writeNamespace(self, prefix, uri):
        if not prefix:
            self.writeDefaultNamespace(uri)
            return
        self.requireAttributeWriteable()
        self.write(" xmlns:%s=\"%s\"" % (prefix, escape(uri)))
        self.openElements[-1].namespaces[prefix] = uri

    # Content

    def writeCharacters(self, text):
        """Write escaped text; outside the root only whitespace is allowed"""
        self.requireMarkupWriteable()
        if not self.openElements and text and not isWhitespace(text):
            raise InvalidState("content outside the root element")
        if self.openElements:
            text = escapeContent(text)
        self.write(text)

    def writeCData(self, text):
        if "]]>" in text:
            raise ValueError("CDATA section cannot contain ]]>")
        self.requireContentWriteable()
        self.write("<![CDATA[%s]]>" % text)

    def writeComment(self, text):
        if "--" in text or text.endswith("-"):
            raise ValueError("comment cannot contain -- or end with -")
        self.requireMarkupWriteable()
        self.write("<!--%s-->" % text)

    def writeProcessingInstruction(self, target, data=""):
        if "?>" in data:
            raise ValueError("processing instruction cannot contain ?>")
        self.requireMarkupWriteable()
        if data:
            self.write("<?%s %s?>" % (target, data))
        else:
            self.write("<?%s?>" % target)

    def writeEntityRef(self, name):
        self.requireContentWriteable()
        self.write("&%s;" % name)

    def writeCharRef(self, digits, base=10):
        """Write a character reference

        digits is the reference as written, or an int code point.
        """
        if isinstance(digits, int):
            digits = "%x" % digits if base == 16 else "%d" % digits
        self.requireContentWriteable()
        if base == 16:
            self.write("&#x%s;" % digits)
        else:
            self.write("&#%s;" % digits)

    # Namespace lookups

    def getNamespaceURI(self, prefix):
        """Namespace bound to prefix by the open elements, or None

        A prefix of None or "" asks for the default namespace.
        """
        if prefix == "xml":
            return namespaces["xml"]
        for element in reversed(self.openElements):
            if not prefix:
                if element.defaultNamespace is not None:
                    return element.defaultNamespace or None
            elif prefix in element.namespaces:
                return element.namespaces[prefix]
        return None

    def getPrefix(self, uri):
        """A prefix bound to uri by the open elements, "" when uri is the
        default namespace, or None
        """
        seen = set()
        for element in reversed(self.openElements):
            if element.defaultNamespace is not None and "" not in seen:
                if element.defaultNamespace == uri:
                    return ""
                seen.add("")
            for prefix, namespace in element.namespaces.items():
                if prefix not in seen:
                    if namespace == uri:
                        return prefix
                    seen.add(prefix)
        if uri == namespaces["xml"]:
            return "xml"
        return None

    # Stream

    def flush(self):
        if hasattr(self.stream, "flush"):
            self.stream.flush()

    def close(self):
        """Close the stream, then complain about elements left open"""
        if hasattr(self.stream, "close"):
            self.stream.close()
        if self.openElements:
            raise InvalidState("closed with %d elements still open" %
                               len(self.openElements))
