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

"""A collection of modules for iterating through different kinds of
tree, generating tokens in the format of the parser's events.

To create a tree walker for a new type of tree, you need to do
implement a tree walker object (called TreeWalker by convention) that
takes a tree on construction and whose __iter__ generates the tokens.
treewalkers.base.TreeWalker has a helper for every token type.
"""

from .. import constants

__all__ = ["getTreeWalker", "pprint", "simpletree"]

treeWalkerCache = {}


def getTreeWalker(treeType):
    """Get a TreeWalker class for various types of tree with built-in support

    treeType (str): the name of the tree type required (case-insensitive).
        Supported values are:

        - "simpletree": the node model of picoxml.treebuilders.simpletree
    """

    treeType = treeType.lower()
    if treeType not in treeWalkerCache:
        if treeType == "simpletree":
            from . import simpletree
            treeWalkerCache[treeType] = simpletree.TreeWalker
        else:
            raise ValueError("""Unrecognised treewalker "%s" """ % treeType)
    return treeWalkerCache.get(treeType)


def concatenateCharacterTokens(tokens):
    pendingCharacters = []
    for token in tokens:
        type = token["type"]
        if type in ("Characters", "SpaceCharacters"):
            pendingCharacters.append(token["data"])
        else:
            if pendingCharacters:
                yield {"type": "Characters", "data": "".join(pendingCharacters)}
                pendingCharacters = []
            yield token
    if pendingCharacters:
        yield {"type": "Characters", "data": "".join(pendingCharacters)}


def _namespaced(namespace, name):
    if namespace:
        if namespace in constants.prefixes:
            ns = constants.prefixes[namespace]
        else:
            ns = namespace
        return "%s %s" % (ns, name)
    return name


def pprint(walker):
    """Pretty printer for tree walkers and parser events"""
    output = []
    indent = 0
    for token in concatenateCharacterTokens(walker):
        type = token["type"]
        if type in ("StartTag", "EmptyTag"):
            output.append("%s<%s>" % (" " * indent,
                                      _namespaced(token["namespace"], token["name"])))
            indent += 2
            # attributes (sorted for consistent ordering)
            attrs = sorted(token["data"], key=lambda attr: (attr.namespace or "",
                                                            attr.qname))
            for attr in attrs:
                if attr.namespace:
                    name = _namespaced(attr.namespace, attr.localName)
                else:
                    name = attr.qname
                output.append("%s%s=\"%s\"" % (" " * indent, name, attr.value))
            # self-closing
            if type == "EmptyTag":
                indent -= 2

        elif type == "EndTag":
            indent -= 2

        elif type == "XmlDeclaration":
            attrs = " ".join("%s=\"%s\"" % (attr.qname, attr.value)
                             for attr in token["data"])
            output.append("%s<?xml %s?>" % (" " * indent, attrs))

        elif type == "Doctype":
            output.append("%s<!DOCTYPE %s>" % (" " * indent, token["name"]))

        elif type in ("StartPrefixMapping", "EndPrefixMapping"):
            # Shown through the xmlns attributes
            pass

        elif type == "Comment":
            output.append("%s<!-- %s -->" % (" " * indent, token["data"]))

        elif type == "CData":
            output.append("%s<![CDATA[%s]]>" % (" " * indent, token["data"]))

        elif type == "ProcessingInstruction":
            if token["data"]:
                output.append("%s<?%s %s?>" % (" " * indent, token["name"], token["data"]))
            else:
                output.append("%s<?%s?>" % (" " * indent, token["name"]))

        elif type == "Entity":
            output.append("%s&%s;" % (" " * indent, token["name"]))

        elif type == "CharRef":
            if token["base"] == 16:
                output.append("%s&#x%s;" % (" " * indent, token["data"]))
            else:
                output.append("%s&#%s;" % (" " * indent, token["data"]))

        elif type == "Characters":
            output.append("%s\"%s\"" % (" " * indent, token["data"]))

        elif type == "SpaceCharacters":
            assert False, "concatenateCharacterTokens should have got rid of all Space tokens"

        else:
            raise ValueError("Unknown token type, %s" % type)

    return "\n".join(output)
