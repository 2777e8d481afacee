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

from xml.sax.xmlreader import AttributesNSImpl


def attributesNS(attributes):
    """AttributesNSImpl for the attributes of a tag, leaving out namespace
    declarations
    """
    attrs = {}
    qnames = {}
    for attr in attributes:
        if attr.isNamespaceDeclaration:
            continue
        key = (attr.namespace, attr.localName)
        attrs[key] = attr.value
        qnames[key] = attr.qname
    return AttributesNSImpl(attrs, qnames)


def qualifiedName(token):
    if token.get("prefix") is None:
        return token["name"]
    return "%s:%s" % (token["prefix"], token["name"])


def to_sax(walker, handler):
    """Call SAX-like content handler based on treewalker walker

    walker may also be the event generator of a parser. endDocument is only
    called once the events are exhausted, so it is skipped when parsing
    raises.
    """
    handler.startDocument()
    depth = 0

    for token in walker:
        type = token["type"]
        if type in ("Doctype", "XmlDeclaration", "Comment"):
            continue
        elif type == "StartPrefixMapping":
            handler.startPrefixMapping(token["prefix"] or None, token["namespace"])
        elif type == "EndPrefixMapping":
            handler.endPrefixMapping(token["prefix"] or None)
        elif type in ("StartTag", "EmptyTag"):
            for name in token.get("skippedEntities", ()):
                handler.skippedEntity(name)
            handler.startElementNS((token["namespace"], token["name"]),
                                   qualifiedName(token),
                                   attributesNS(token["data"]))
            if type == "EmptyTag":
                handler.endElementNS((token["namespace"], token["name"]),
                                     qualifiedName(token))
            else:
                depth += 1
        elif type == "EndTag":
            depth -= 1
            handler.endElementNS((token["namespace"], token["name"]),
                                 qualifiedName(token))
        elif type == "SpaceCharacters" and depth == 0:
            handler.ignorableWhitespace(token["data"])
        elif type in ("Characters", "SpaceCharacters", "CData"):
            handler.characters(token["data"])
        elif type == "CharRef":
            handler.characters(token["char"])
        elif type == "Entity":
            handler.skippedEntity(token["name"])
        elif type == "ProcessingInstruction":
            handler.processingInstruction(token["name"], token["data"])
        else:
            assert False, "Unknown token type"

    handler.endDocument()
