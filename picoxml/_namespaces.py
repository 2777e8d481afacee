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

from .constants import E, InvalidSyntax, namespaces


class NamespaceScope(object):
    """Prefix bindings visible at the current point of a document

    Each open element owns one frame listing the prefixes its start tag
    declared. Bindings are indexed by prefix, each prefix mapping to the
    stack of URIs bound to it by enclosing elements, so lookup is a single
    dict access. The default namespace has a stack of its own in which None
    means "no default namespace" (either never declared or undeclared with
    xmlns="").
    """

    def __init__(self):
        self.frames = []
        # xml is bound by definition
        self.bindings = {"xml": [namespaces["xml"]]}
        self.defaults = [None]

    @property
    def depth(self):
        return len(self.frames)

    @property
    def defaultNamespace(self):
        return self.defaults[-1]

    def lookup(self, prefix):
        """Return the namespace bound to prefix, or None

        A prefix of None asks for the default namespace.
        """
        if prefix is None:
            return self.defaults[-1]
        stack = self.bindings.get(prefix)
        if stack:
            return stack[-1]
        return None

    def pushFrame(self, attributes, position=(1, 0)):
        """Open a frame for a start tag with the given raw attributes

        Returns the (prefix, namespace) pairs the tag declares, in attribute
        order, with "" standing for the default namespace. Binding a prefix
        to the empty string raises InvalidSyntax.
        """
        declared = []
        for attr in attributes:
            if attr.prefix is None and attr.localName == "xmlns":
                declared.append(("", attr.value))
            elif attr.prefix == "xmlns":
                if not attr.value:
                    raise InvalidSyntax(position[0], position[1],
                                        E["empty-namespace-binding"] %
                                        {"prefix": attr.localName})
                declared.append((attr.localName, attr.value))

        for prefix, namespace in declared:
            if prefix == "":
                self.defaults.append(namespace or None)
            else:
                self.bindings.setdefault(prefix, []).append(namespace)
        self.frames.append([prefix for prefix, namespace in declared])
        return declared

    def popFrame(self):
        """Close the innermost frame

        Returns the prefixes it declared in reverse declaration order, ""
        standing for the default namespace.
        """
        frame = self.frames.pop()
        for prefix in frame:
            if prefix == "":
                self.defaults.pop()
            else:
                stack = self.bindings[prefix]
                stack.pop()
                if not stack:
                    del self.bindings[prefix]
        return frame[::-1]
