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

from . import _tokenizer
from . import treebuilders
from ._namespaces import NamespaceScope
from ._utils import MethodDispatcher, Name
from .constants import E, InvalidSyntax, tokenTypes, tagTokenTypes
from .treeadapters.sax import to_sax


def parse(doc, treebuilder="simpletree", strictNamespaces=False,
          matchEndTags=True, **kwargs):
    """Parse an XML document into a tree

    doc may be a str, bytes or a file object. Remaining keyword arguments
    (encoding, defaultEncoding) are passed on to the input stream.
    """
    tb = treebuilders.getTreeBuilder(treebuilder)
    p = XMLParser(tb, strictNamespaces=strictNamespaces, matchEndTags=matchEndTags)
    return p.parse(doc, **kwargs)


def parseEvents(doc, handler, strictNamespaces=False, matchEndTags=True, **kwargs):
    """Parse an XML document, reporting it to a SAX ContentHandler"""
    p = XMLParser(strictNamespaces=strictNamespaces, matchEndTags=matchEndTags)
    p.parseEvents(doc, handler, **kwargs)


def iterparse(doc, strictNamespaces=False, matchEndTags=True, **kwargs):
    """Return an iterator over the events of an XML document"""
    p = XMLParser(strictNamespaces=strictNamespaces, matchEndTags=matchEndTags)
    return p.events(doc, **kwargs)


tokenTypeNames = dict((v, k) for k, v in tokenTypes.items())


class XMLParser(object):
    """XML parser

    Checks the document structure on top of the tokenizer, resolves
    namespace prefixes and passes the resulting events to a tree builder or
    a SAX ContentHandler. Parsing stops at the first well-formedness error
    with an InvalidSyntax exception.
    """

    def __init__(self, tree=None, strictNamespaces=False, matchEndTags=True,
                 debug=False):
        """
        strictNamespaces - raise InvalidSyntax for prefixes with no binding
        in scope instead of leaving their namespace as None

        matchEndTags - raise InvalidSyntax when an end tag does not repeat the
        name of its start tag

        tree - a treebuilder class controlling the type of tree that will be
        returned. Built in treebuilders can be accessed through
        picoxml.treebuilders.getTreeBuilder(treeType)
        """
        self.strictNamespaces = strictNamespaces
        self.matchEndTags = matchEndTags
        self.debug = debug

        if tree is None:
            tree = treebuilders.getTreeBuilder("simpletree")
        self.tree = tree()
        self.errors = []
        self.log = []

        self.tokenHandlers = MethodDispatcher([
            (tokenTypes["XmlDeclaration"], self.processXmlDeclaration),
            (tokenTypes["Doctype"], self.processDoctype),
            (tokenTypes["StartTag"], self.processStartTag),
            (tokenTypes["EndTag"], self.processEndTag),
            (tokenTypes["Characters"], self.processCharacters),
            (tokenTypes["SpaceCharacters"], self.processSpaceCharacters),
            (tokenTypes["CData"], self.processCData),
            (tokenTypes["Comment"], self.processComment),
            (tokenTypes["ProcessingInstruction"], self.processProcessingInstruction),
            (tokenTypes["EntityRef"], self.processReference),
            (tokenTypes["CharRef"], self.processReference),
        ])

        self.treeHandlers = MethodDispatcher([
            ("XmlDeclaration", self.tree.insertXmlDeclaration),
            ("Doctype", self.tree.insertDoctype),
            ("StartTag", self.tree.insertElement),
            ("EndTag", self.tree.popElement),
            (("Characters", "SpaceCharacters"), self.tree.insertText),
            ("CData", self.tree.insertCData),
            ("Comment", self.tree.insertComment),
            ("ProcessingInstruction", self.tree.insertProcessingInstruction),
            ("Entity", self.tree.insertEntity),
            ("CharRef", self.tree.insertCharRef),
        ])
        # Prefix mappings only matter to the streaming path
        self.treeHandlers.default = lambda token: None

    def reset(self):
        self.errors = []
        self.log = []
        self.scope = NamespaceScope()
        self.openElements = []
        self.maxDepth = 0
        self.doctypeSeen = False
        # "prolog" until the root start tag, "content" inside the root and
        # "epilog" after its end tag
        self.phase = "prolog"

    @property
    def documentEncoding(self):
        """Name of the character encoding that was used to decode the input
        stream, or :obj:`None` if that is not determined yet

        """
        if not hasattr(self, "tokenizer"):
            return None
        return self.tokenizer.stream.charEncoding[0].name

    def parse(self, stream, **kwargs):
        """Parse an XML document into a tree and return the document

        stream - a file-like object, bytes or str containing the document

        encoding - force the given character encoding, bypassing byte order
        mark detection

        defaultEncoding - encoding used when the first bytes do not identify
        one, UTF-8 unless given
        """
        self.tree.reset()
        for token in self.events(stream, **kwargs):
            self.treeHandlers[token["type"]](token)
        return self.tree.getDocument()

    def parseEvents(self, stream, handler, **kwargs):
        """Parse an XML document, calling the methods of handler, an
        xml.sax.handler.ContentHandler, as the document is read
        """
        to_sax(self.events(stream, **kwargs), handler)

    def events(self, stream, **kwargs):
        """Generator over the events of the document in stream

        Events are dicts in the format produced by the tree walkers, with the
        StartPrefixMapping and EndPrefixMapping events added around the tags
        that declare namespaces.
        """
        self.tokenizer = _tokenizer.XMLTokenizer(stream, **kwargs)
        self.reset()

        for token in self.tokenizer:
            if self.debug:
                info = {"type": tokenTypeNames[token["type"]]}
                if token["type"] in tagTokenTypes:
                    info["name"] = token["name"]
                self.log.append((self.phase, "process" + info["type"], info))
            for event in self.tokenHandlers[token["type"]](token):
                yield event

        position = self.tokenizer.stream.position()
        if self.openElements:
            self.syntaxError("eof-in-element", {"name": self.openElements[-1][0]},
                             position)
        if self.phase == "prolog":
            self.syntaxError("missing-root", position=position)

    def syntaxError(self, errorcode, datavars=None, position=None):
        if position is None:
            position = self.tokenizer.stream.position()
        raise InvalidSyntax(position[0], position[1], E[errorcode] % (datavars or {}))

    def parseError(self, errorcode, datavars=None, position=None):
        if position is None:
            position = self.tokenizer.stream.position()
        self.errors.append((position, errorcode, datavars or {}))

    def resolvePrefix(self, prefix, position):
        namespace = self.scope.lookup(prefix)
        if namespace is None and prefix is not None:
            if self.strictNamespaces:
                self.syntaxError("unbound-prefix", {"prefix": prefix}, position)
            self.parseError("unbound-prefix", {"prefix": prefix}, position)
        return namespace

    def processXmlDeclaration(self, token):
        yield {"type": "XmlDeclaration", "data": token["data"],
               "position": token["position"]}

    def processDoctype(self, token):
        if self.phase != "prolog":
            self.syntaxError("misplaced-doctype", position=token["position"])
        if self.doctypeSeen:
            self.syntaxError("duplicate-doctype", position=token["position"])
        self.doctypeSeen = True
        yield {"type": "Doctype", "name": token["name"], "data": token["data"],
               "position": token["position"]}

    def processStartTag(self, token):
        position = token["position"]
        if self.phase == "epilog":
            self.syntaxError("multiple-roots", {"name": token["name"]}, position)
        self.phase = "content"

        declared = self.scope.pushFrame(token["data"], position)
        for prefix, namespace in declared:
            yield {"type": "StartPrefixMapping", "prefix": prefix,
                   "namespace": namespace, "position": position}

        name = Name.fromString(token["name"])
        namespace = self.resolvePrefix(name.prefix, position)
        attributes = []
        seen = set()
        for attr in token["data"]:
            if attr.isNamespaceDeclaration:
                attributes.append(attr)
                continue
            if attr.prefix is not None:
                attr = attr._replace(namespace=self.resolvePrefix(attr.prefix, position))
            # Distinct prefixes may still resolve to the same expanded name
            if (attr.namespace, attr.localName) in seen:
                self.syntaxError("duplicate-attribute",
                                 {"name": attr.qname, "element": token["name"]},
                                 position)
            seen.add((attr.namespace, attr.localName))
            attributes.append(attr)

        self.openElements.append((token["name"], name, namespace))
        self.maxDepth = max(self.maxDepth, len(self.openElements))
        yield {"type": "StartTag", "name": name.localName, "prefix": name.prefix,
               "namespace": namespace, "data": attributes,
               "skippedEntities": token["skippedEntities"], "position": position}

        if token["selfClosing"]:
            for event in self.closeElement(position):
                yield event

    def processEndTag(self, token):
        position = token["position"]
        if not self.openElements:
            self.syntaxError("unexpected-end-tag", {"name": token["name"]}, position)
        expected = self.openElements[-1][0]
        if token["name"] != expected:
            datavars = {"name": token["name"], "expected": expected}
            if self.matchEndTags:
                self.syntaxError("mismatched-end-tag", datavars, position)
            self.parseError("mismatched-end-tag", datavars, position)
        for event in self.closeElement(position):
            yield event

    def closeElement(self, position):
        rawName, name, namespace = self.openElements.pop()
        yield {"type": "EndTag", "name": name.localName, "prefix": name.prefix,
               "namespace": namespace, "position": position}
        for prefix in self.scope.popFrame():
            yield {"type": "EndPrefixMapping", "prefix": prefix,
                   "position": position}
        if not self.openElements:
            self.phase = "epilog"

    def processCharacters(self, token):
        if self.phase != "content":
            self.syntaxError("non-whitespace-outside-root", position=token["position"])
        yield {"type": "Characters", "data": token["data"],
               "position": token["position"]}

    def processSpaceCharacters(self, token):
        yield {"type": "SpaceCharacters", "data": token["data"],
               "position": token["position"]}

    def processCData(self, token):
        if self.phase != "content":
            self.syntaxError("cdata-outside-root", position=token["position"])
        yield {"type": "CData", "data": token["data"],
               "position": token["position"]}

    def processComment(self, token):
        yield {"type": "Comment", "data": token["data"],
               "position": token["position"]}

    def processProcessingInstruction(self, token):
        yield {"type": "ProcessingInstruction", "name": token["name"],
               "data": token["data"], "position": token["position"]}

    def processReference(self, token):
        if self.phase != "content":
            self.syntaxError("reference-outside-root", position=token["position"])
        if token["type"] == tokenTypes["EntityRef"]:
            yield {"type": "Entity", "name": token["name"],
                   "position": token["position"]}
        else:
            yield {"type": "CharRef", "base": token["base"], "data": token["data"],
                   "char": token["char"], "position": token["position"]}
