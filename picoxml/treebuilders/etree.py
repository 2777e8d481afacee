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

import warnings

from . import base
from ..constants import DataLossWarning
from .._utils import moduleFactoryFactory


def getETreeBuilder(ElementTreeImplementation):
    ElementTree = ElementTreeImplementation

    def _getETreeTag(name, namespace):
        if namespace is None:
            return name
        return "{%s}%s" % (namespace, name)

    class TreeBuilder(base.TreeBuilder):
        """Builds an ElementTree

        Namespaced names use the {namespace}localName form. Namespace
        declarations are not kept as attributes since ElementTree derives
        them on output. Constructs the tree has no place for are dropped
        with a DataLossWarning.
        """
        implementation = ElementTree

        def createElement(self, token):
            element = ElementTree.Element(_getETreeTag(token["name"],
                                                       token["namespace"]))
            for attr in token["data"]:
                if attr.isNamespaceDeclaration:
                    continue
                if attr.namespace is not None:
                    element.set(_getETreeTag(attr.localName, attr.namespace),
                                attr.value)
                else:
                    element.set(attr.qname, attr.value)
            return element

        def closeElement(self, element):
            return element

        def appendChild(self, parent, node):
            parent.append(node)

        def appendText(self, parent, data):
            if len(parent):
                last = parent[-1]
                last.tail = (last.tail or "") + data
            else:
                parent.text = (parent.text or "") + data

        def insertMisc(self, node):
            # Only the root element survives in an ElementTree
            pass

        def insertXmlDeclaration(self, token):
            pass

        def insertDoctype(self, token):
            warnings.warn("Dropping the DOCTYPE of the document", DataLossWarning)

        def insertText(self, token):
            if self.openElements:
                self.appendText(self.openElements[-1], token["data"])

        def insertCData(self, token):
            self.appendText(self.openElements[-1], token["data"])

        def insertCharRef(self, token):
            self.appendText(self.openElements[-1], token["char"])

        def insertEntity(self, token):
            warnings.warn("Dropping reference to undeclared entity %s" % token["name"],
                          DataLossWarning)

        def insertComment(self, token):
            if self.openElements:
                self.appendChild(self.openElements[-1], ElementTree.Comment(token["data"]))
            else:
                warnings.warn("Dropping comment outside the root element",
                              DataLossWarning)

        def insertProcessingInstruction(self, token):
            node = ElementTree.ProcessingInstruction(token["name"], token["data"] or None)
            if self.openElements:
                self.appendChild(self.openElements[-1], node)
            else:
                warnings.warn("Dropping processing instruction %s outside the root element" %
                              token["name"], DataLossWarning)

        def getDocument(self):
            return ElementTree.ElementTree(self.root)

    return locals()


getETreeModule = moduleFactoryFactory(getETreeBuilder)
