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

from ..constants import spaceCharacters

__all__ = ["TreeWalker"]

spaceCharacters = "".join(spaceCharacters)


class TreeWalker(object):
    """Walks a tree, generating the tokens the parser's events use

    Subclasses implement __iter__ with the helpers below.
    """

    def __init__(self, tree):
        self.tree = tree

    def __iter__(self):
        raise NotImplementedError

    def error(self, msg):
        return {"type": "SerializeError", "data": msg}

    def xmlDeclaration(self, attrs):
        return {"type": "XmlDeclaration", "data": list(attrs)}

    def doctype(self, name, declaration):
        return {"type": "Doctype", "name": name, "data": declaration}

    def namespaceDeclarations(self, attrs):
        """(prefix, namespace) pairs declared by attrs, "" for the default"""
        rv = []
        for attr in attrs:
            if attr.prefix is None and attr.localName == "xmlns":
                rv.append(("", attr.value))
            elif attr.prefix == "xmlns":
                rv.append((attr.localName, attr.value))
        return rv

    def startPrefixMapping(self, prefix, namespace):
        return {"type": "StartPrefixMapping", "prefix": prefix,
                "namespace": namespace}

    def endPrefixMapping(self, prefix):
        return {"type": "EndPrefixMapping", "prefix": prefix}

    def emptyTag(self, namespace, prefix, name, attrs):
        return {"type": "EmptyTag", "name": name, "prefix": prefix,
                "namespace": namespace, "data": list(attrs)}

    def startTag(self, namespace, prefix, name, attrs):
        return {"type": "StartTag", "name": name, "prefix": prefix,
                "namespace": namespace, "data": list(attrs)}

    def endTag(self, namespace, prefix, name):
        return {"type": "EndTag", "name": name, "prefix": prefix,
                "namespace": namespace}

    def text(self, data):
        middle = data.lstrip(spaceCharacters)
        left = data[:len(data) - len(middle)]
        if left:
            yield {"type": "SpaceCharacters", "data": left}
        data = middle
        middle = data.rstrip(spaceCharacters)
        right = data[len(middle):]
        if middle:
            yield {"type": "Characters", "data": middle}
        if right:
            yield {"type": "SpaceCharacters", "data": right}

    def whiteSpace(self, data):
        return {"type": "SpaceCharacters", "data": data}

    def cdata(self, data):
        return {"type": "CData", "data": data}

    def comment(self, data):
        return {"type": "Comment", "data": data}

    def processingInstruction(self, target, data):
        return {"type": "ProcessingInstruction", "name": target, "data": data}

    def entity(self, name):
        return {"type": "Entity", "name": name}

    def charRef(self, base, digits):
        return {"type": "CharRef", "base": base, "data": digits,
                "char": chr(int(digits, base))}

    def unknown(self, nodeType):
        return self.error("Unknown node type: " + nodeType)
