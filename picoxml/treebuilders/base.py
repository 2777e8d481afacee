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

class TreeBuilder(object):
    """Base treebuilder implementation

    The parser calls one insertXxx method per event. Elements are kept on
    openElements while their content is read; other nodes go to the
    innermost open element or, outside the root, to the misc lists.

    Subclasses set the node classes, called as:

    documentClass(declaration, beforeMiscs, root, afterMiscs, doctype)
    xmlDeclarationClass(attributes)
    doctypeClass(name, declaration)
    commentClass(data)
    processingInstructionClass(target, data)
    whiteSpaceClass(data)
    cdataClass(data)
    entityRefClass(name)
    charRefClass(base, digits)

    and implement the element hooks below.
    """

    documentClass = None
    xmlDeclarationClass = None
    doctypeClass = None
    commentClass = None
    processingInstructionClass = None
    whiteSpaceClass = None
    cdataClass = None
    entityRefClass = None
    charRefClass = None

    def __init__(self):
        self.reset()

    def reset(self):
        self.openElements = []
        self.declaration = None
        self.doctype = None
        self.beforeMiscs = []
        self.root = None
        self.afterMiscs = []

    def createElement(self, token):
        """Return the object kept on openElements for a StartTag token"""
        raise NotImplementedError

    def closeElement(self, element):
        """Return the finished node for an element taken off openElements"""
        raise NotImplementedError

    def appendChild(self, parent, node):
        raise NotImplementedError

    def appendText(self, parent, data):
        raise NotImplementedError

    def insertNode(self, node):
        if self.openElements:
            self.appendChild(self.openElements[-1], node)
        else:
            self.insertMisc(node)

    def insertMisc(self, node):
        if self.root is None:
            self.beforeMiscs.append(node)
        else:
            self.afterMiscs.append(node)

    def insertXmlDeclaration(self, token):
        self.declaration = self.xmlDeclarationClass(token["data"])

    def insertDoctype(self, token):
        self.doctype = self.doctypeClass(token["name"], token["data"])

    def insertElement(self, token):
        self.openElements.append(self.createElement(token))

    def popElement(self, token):
        element = self.closeElement(self.openElements.pop())
        if self.openElements:
            self.appendChild(self.openElements[-1], element)
        else:
            self.root = element

    def insertText(self, token):
        if self.openElements:
            self.appendText(self.openElements[-1], token["data"])
        else:
            self.insertMisc(self.whiteSpaceClass(token["data"]))

    def insertCData(self, token):
        self.insertNode(self.cdataClass(token["data"]))

    def insertComment(self, token):
        self.insertNode(self.commentClass(token["data"]))

    def insertProcessingInstruction(self, token):
        self.insertNode(self.processingInstructionClass(token["name"], token["data"]))

    def insertEntity(self, token):
        self.insertNode(self.entityRefClass(token["name"]))

    def insertCharRef(self, token):
        self.insertNode(self.charRefClass(token["base"], token["data"]))

    def getDocument(self):
        "Return the final tree"
        return self.documentClass(self.declaration, self.beforeMiscs, self.root,
                                  self.afterMiscs, self.doctype)
