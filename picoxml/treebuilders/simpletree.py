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

"""The native tree of picoxml

Every node is immutable and compares by value, so two parses of the same
document produce equal trees. Besides elements and text the tree keeps
whitespace runs, CDATA sections, comments, processing instructions and
unresolved references, which is enough to write the document back out.
"""

from . import base
from .._utils import Name
from .._xmlchars import isWhitespace


class Node(object):
    """Base class of all nodes

    The fields of a node are listed in fields, which subclasses also use as
    their __slots__.
    """
    __slots__ = ()
    fields = ()

    def __init__(self, *args):
        assert len(args) == len(self.fields)
        for name, value in zip(self.fields, args):
            object.__setattr__(self, name, value)

    def __setattr__(self, name, value):
        raise AttributeError("%s nodes are immutable" % type(self).__name__)

    def _fields(self):
        return tuple(getattr(self, name) for name in self.fields)

    def __eq__(self, other):
        return type(self) is type(other) and self._fields() == other._fields()

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self).__name__,) + self._fields())

    def __repr__(self):
        return "%s(%s)" % (type(self).__name__,
                           ", ".join(repr(value) for value in self._fields()))


class _Sequence(Node):
    """Read only view of an ordered sequence of nodes"""
    __slots__ = fields = ("items",)

    def __init__(self, items=()):
        Node.__init__(self, tuple(items))

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, list(self.items))


class Nodes(_Sequence):
    """The children of an element"""
    __slots__ = ()

    def elements(self):
        return [node for node in self.items if isinstance(node, Element)]


class Miscs(_Sequence):
    """Comments, processing instructions and whitespace outside the root"""
    __slots__ = ()


class Attributes(_Sequence):
    """The attributes of an element, in document order"""
    __slots__ = ()

    def get(self, qname, default=None):
        """Value of the attribute written as qname"""
        for attr in self.items:
            if attr.qname == qname:
                return attr.value
        return default

    def getNS(self, namespace, localName, default=None):
        """Value of the attribute with the given resolved name"""
        for attr in self.items:
            if attr.namespace == namespace and attr.localName == localName:
                return attr.value
        return default


Nodes.EMPTY = Nodes()
Attributes.EMPTY = Attributes()


class Element(Node):
    __slots__ = fields = ("name", "attributes", "children", "namespace")

    def __init__(self, name, attributes=Attributes.EMPTY, children=Nodes.EMPTY,
                 namespace=None):
        if not isinstance(name, Name):
            name = Name.fromString(name)
        if not isinstance(attributes, Attributes):
            attributes = Attributes(attributes)
        if not isinstance(children, Nodes):
            children = Nodes(children)
        Node.__init__(self, name, attributes, children, namespace)

    @property
    def prefix(self):
        return self.name.prefix

    @property
    def localName(self):
        return self.name.localName

    @property
    def nameTuple(self):
        return self.namespace, self.name.localName

    def __repr__(self):
        return "<Element %s>" % (self.name,)


class Text(Node):
    __slots__ = fields = ("value",)


class WhiteSpace(Node):
    __slots__ = fields = ("value",)


class CData(Node):
    __slots__ = fields = ("value",)


class Comment(Node):
    __slots__ = fields = ("value",)


class ProcessingInstruction(Node):
    __slots__ = fields = ("target", "data")

    def __init__(self, target, data=""):
        Node.__init__(self, target, data)


class EntityRef(Node):
    __slots__ = fields = ("name",)


class CharRef(Node):
    __slots__ = fields = ("base", "digits")

    @property
    def char(self):
        return chr(int(self.digits, self.base))


class XmlDeclaration(Node):
    __slots__ = fields = ("attributes",)

    def __init__(self, attributes=Attributes.EMPTY):
        if not isinstance(attributes, Attributes):
            attributes = Attributes(attributes)
        Node.__init__(self, attributes)

    @property
    def version(self):
        return self.attributes.get("version", "1.0")

    @property
    def encoding(self):
        return self.attributes.get("encoding", "utf-8")

    @property
    def standalone(self):
        return self.attributes.get("standalone")


class DocumentType(Node):
    """A DOCTYPE, kept as written since its contents are not processed"""
    __slots__ = fields = ("name", "declaration")


class Document(Node):
    __slots__ = fields = ("prolog", "beforeMiscs", "root", "afterMiscs", "doctype")

    def __init__(self, prolog, beforeMiscs, root, afterMiscs, doctype=None):
        if not isinstance(beforeMiscs, Miscs):
            beforeMiscs = Miscs(beforeMiscs)
        if not isinstance(afterMiscs, Miscs):
            afterMiscs = Miscs(afterMiscs)
        Node.__init__(self, prolog, beforeMiscs, root, afterMiscs, doctype)


class ElementFrame(object):
    """An element whose start tag has been read but not its end tag"""

    def __init__(self, token):
        self.name = Name(token["prefix"], token["name"])
        self.namespace = token["namespace"]
        self.attributes = Attributes(token["data"])
        self.children = []
        self.pendingText = []


class TreeBuilder(base.TreeBuilder):
    documentClass = Document
    xmlDeclarationClass = XmlDeclaration
    doctypeClass = DocumentType
    commentClass = Comment
    processingInstructionClass = ProcessingInstruction
    whiteSpaceClass = WhiteSpace
    cdataClass = CData
    entityRefClass = EntityRef
    charRefClass = CharRef

    def createElement(self, token):
        return ElementFrame(token)

    def closeElement(self, frame):
        self.flushText(frame)
        if frame.children:
            children = Nodes(frame.children)
        else:
            children = Nodes.EMPTY
        return Element(frame.name, frame.attributes, children, frame.namespace)

    def appendChild(self, frame, node):
        self.flushText(frame)
        frame.children.append(node)

    def appendText(self, frame, data):
        # Adjacent character data becomes a single node
        frame.pendingText.append(data)

    def flushText(self, frame):
        if frame.pendingText:
            data = "".join(frame.pendingText)
            frame.pendingText = []
            if isWhitespace(data):
                frame.children.append(WhiteSpace(data))
            else:
                frame.children.append(Text(data))
