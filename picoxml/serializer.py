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

import codecs

from . import treewalkers
from .xmlwriter import XMLWriter, DocumentNotOpened, DocumentClosed

__all__ = ["XMLSerializer", "SerializeError", "serialize"]


class _Chunks(list):
    """Collects what an XMLWriter writes until the serializer yields it"""
    write = list.append


def serialize(input, tree="simpletree", encoding=None, **serializer_opts):
    """Serialize a tree, returning str, or bytes when encoding is given"""
    walker = treewalkers.getTreeWalker(tree)
    s = XMLSerializer(**serializer_opts)
    return s.render(walker(input), encoding)


class XMLSerializer(object):

    # declaration options
    omit_xml_declaration = False
    inject_encoding = True

    # tag syntax options
    use_empty_elements = True

    # error handling
    strict = False

    options = ("omit_xml_declaration", "inject_encoding", "use_empty_elements",
               "strict")

    def __init__(self, **kwargs):
        """Initialize XMLSerializer.

        Keyword options (default given first unless specified) include:

        omit_xml_declaration=False|True
          Leave out the XML declaration even when the tree has one.
        inject_encoding=True|False
          When serializing to bytes, make the XML declaration name the
          encoding used, adding a declaration if the tree has none.
        use_empty_elements=True|False
          Write elements without children as <name />. Otherwise they are
          written as <name></name>.
        strict=False|True
          Raise SerializeError for tokens that cannot be written instead of
          recording them in errors.
        """
        unexpected_args = frozenset(kwargs) - frozenset(self.options)
        if len(unexpected_args) > 0:
            raise TypeError("__init__() got an unexpected keyword argument '%s'" %
                            next(iter(unexpected_args)))
        for attr in self.options:
            setattr(self, attr, kwargs.get(attr, getattr(self, attr)))
        self.errors = []

    def encode(self, string):
        assert isinstance(string, str)
        if self.encoding:
            return self.encoder.encode(string)
        else:
            return string

    def serialize(self, treewalker, encoding=None):
        """Generator over the serialized chunks of the tokens of treewalker"""
        self.encoding = encoding
        self.errors = []
        if encoding:
            # One encoder for the whole output, so a BOM is written only once
            self.encoder = codecs.getincrementalencoder(encoding)("xmlcharrefreplace")
        if encoding and self.inject_encoding and not self.omit_xml_declaration:
            from .filters.inject_encoding import Filter
            treewalker = Filter(treewalker, encoding)

        chunks = _Chunks()
        writer = XMLWriter(chunks)
        for token in treewalker:
            self.writeToken(writer, token)
            for chunk in chunks:
                yield self.encode(chunk)
            del chunks[:]

        if writer.state not in (DocumentNotOpened, DocumentClosed):
            writer.writeEndDocument()
        for chunk in chunks:
            yield self.encode(chunk)

    def writeToken(self, writer, token):
        type = token["type"]
        if type == "XmlDeclaration":
            if not self.omit_xml_declaration:
                attrs = dict((attr.qname, attr.value) for attr in token["data"])
                writer.writeStartDocument(attrs.get("version", "1.0"),
                                          attrs.get("encoding"),
                                          attrs.get("standalone"))

        elif type == "Doctype":
            writer.writeDTD(token["name"], token["data"])

        elif type in ("StartTag", "EmptyTag"):
            if type == "EmptyTag" and self.use_empty_elements:
                writer.writeEmptyElement(token["prefix"], token["name"])
            else:
                writer.writeStartElement(token["prefix"], token["name"])
            for attr in token["data"]:
                if attr.prefix is None and attr.localName == "xmlns":
                    writer.writeDefaultNamespace(attr.value)
                elif attr.prefix == "xmlns":
                    writer.writeNamespace(attr.localName, attr.value)
                else:
                    writer.writeAttribute(attr.prefix, attr.localName, attr.value)
            if type == "EmptyTag" and not self.use_empty_elements:
                writer.writeEndElement()

        elif type == "EndTag":
            writer.writeEndElement()

        elif type in ("Characters", "SpaceCharacters"):
            writer.writeCharacters(token["data"])

        elif type == "CData":
            writer.writeCData(token["data"])

        elif type == "Comment":
            writer.writeComment(token["data"])

        elif type == "ProcessingInstruction":
            writer.writeProcessingInstruction(token["name"], token["data"])

        elif type == "Entity":
            writer.writeEntityRef(token["name"])

        elif type == "CharRef":
            writer.writeCharRef(token["data"], token["base"])

        elif type in ("StartPrefixMapping", "EndPrefixMapping"):
            # Declarations are written from the xmlns attributes
            pass

        else:
            self.serializeError(token.get("data", "Unknown token type %s" % type))

    def render(self, treewalker, encoding=None):
        """Serialize the tree into a str, or bytes when encoding is given"""
        if encoding:
            return b"".join(list(self.serialize(treewalker, encoding)))
        else:
            return "".join(list(self.serialize(treewalker)))

    def serializeError(self, data="Unknown token"):
        self.errors.append(data)
        if self.strict:
            raise SerializeError(data)


class SerializeError(Exception):
    """Error in serialized tree"""
    pass
