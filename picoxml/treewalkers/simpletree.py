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

from . import base
from ..treebuilders import simpletree


class TreeWalker(base.TreeWalker):
    """Walks a simpletree Document, or any node inside one"""

    def __iter__(self):
        node = self.tree
        if isinstance(node, simpletree.Document):
            for token in self.walkDocument(node):
                yield token
        else:
            for token in self.walkNode(node):
                yield token

    def walkDocument(self, document):
        if document.prolog is not None:
            yield self.xmlDeclaration(document.prolog.attributes)
        if document.doctype is not None:
            yield self.doctype(document.doctype.name, document.doctype.declaration)
        for node in document.beforeMiscs:
            for token in self.walkNode(node):
                yield token
        if document.root is not None:
            for token in self.walkNode(document.root):
                yield token
        for node in document.afterMiscs:
            for token in self.walkNode(node):
                yield token

    def walkNode(self, node):
        if isinstance(node, simpletree.Element):
            for token in self.walkElement(node):
                yield token
        elif isinstance(node, simpletree.Text):
            for token in self.text(node.value):
                yield token
        elif isinstance(node, simpletree.WhiteSpace):
            yield self.whiteSpace(node.value)
        elif isinstance(node, simpletree.CData):
            yield self.cdata(node.value)
        elif isinstance(node, simpletree.Comment):
            yield self.comment(node.value)
        elif isinstance(node, simpletree.ProcessingInstruction):
            yield self.processingInstruction(node.target, node.data)
        elif isinstance(node, simpletree.EntityRef):
            yield self.entity(node.name)
        elif isinstance(node, simpletree.CharRef):
            yield self.charRef(node.base, node.digits)
        else:
            yield self.unknown(type(node).__name__)

    def walkElement(self, element):
        declared = self.namespaceDeclarations(element.attributes)
        for prefix, namespace in declared:
            yield self.startPrefixMapping(prefix, namespace)

        if not element.children:
            yield self.emptyTag(element.namespace, element.prefix,
                                element.localName, element.attributes)
        else:
            yield self.startTag(element.namespace, element.prefix,
                                element.localName, element.attributes)
            for child in element.children:
                for token in self.walkNode(child):
                    yield token
            yield self.endTag(element.namespace, element.prefix, element.localName)

        for prefix, namespace in reversed(declared):
            yield self.endPrefixMapping(prefix)
