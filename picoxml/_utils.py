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

from collections import namedtuple
from types import ModuleType
import re

import xml.etree.ElementTree as default_etree

from .constants import entities, entitiesReverse


__all__ = ["default_etree", "MethodDispatcher", "moduleFactoryFactory",
           "Name", "Attribute", "UnescapedString", "escape", "unescape"]


class Name(namedtuple("Name", ["prefix", "localName"])):
    """A possibly qualified XML name

    prefix is None for unqualified names.
    """
    __slots__ = ()

    @classmethod
    def fromString(cls, raw):
        prefix, sep, localName = raw.partition(":")
        if not sep or not prefix or not localName:
            return cls(None, raw)
        return cls(prefix, localName)

    @property
    def qualified(self):
        return self.prefix is not None

    def __str__(self):
        if self.prefix is None:
            return self.localName
        return "%s:%s" % (self.prefix, self.localName)


class Attribute(namedtuple("Attribute", ["prefix", "localName", "value", "namespace"])):
    """An attribute with its value already unescaped

    namespace is filled in by namespace resolution and stays None for
    unprefixed attributes and for namespace declarations.
    """
    __slots__ = ()

    def __new__(cls, prefix, localName, value, namespace=None):
        return super(Attribute, cls).__new__(cls, prefix, localName, value, namespace)

    @property
    def name(self):
        return Name(self.prefix, self.localName)

    @property
    def qname(self):
        return str(self.name)

    @property
    def isNamespaceDeclaration(self):
        return ((self.prefix is None and self.localName == "xmlns") or
                self.prefix == "xmlns")


UnescapedString = namedtuple("UnescapedString", ["value", "unrecognizedEntities",
                                                 "containsUnterminatedAmpersand"])

_escapeRe = re.compile("[&<>\"']")


def escape(data):
    """Replace each of & < > " ' with its predefined entity reference"""
    return _escapeRe.sub(lambda m: "&%s;" % entitiesReverse[m.group(0)], data)


def unescape(data):
    """Expand the five predefined entity references in data

    Returns an UnescapedString. Unknown references are copied through and
    their names collected in unrecognizedEntities; an & with no following ;
    becomes &amp; and sets containsUnterminatedAmpersand.
    """
    rv = []
    unrecognized = []
    unterminated = False
    start = 0
    amp = data.find("&")
    while amp != -1:
        rv.append(data[start:amp])
        semi = data.find(";", amp + 1)
        if semi == -1:
            unterminated = True
            rv.append("&amp;")
            start = amp + 1
        else:
            name = data[amp + 1:semi]
            if name in entities:
                rv.append(entities[name])
            else:
                unrecognized.append(name)
                rv.append("&%s;" % name)
            start = semi + 1
        amp = data.find("&", start)
    rv.append(data[start:])
    return UnescapedString("".join(rv), unrecognized, unterminated)


class MethodDispatcher(dict):
    """Dict with 2 special properties:

    On initiation, keys that are lists, sets or tuples are converted to
    multiple keys so accessing any one of the items in the original
    list-like object returns the matching value

    md = MethodDispatcher({("foo", "bar"):"baz"})
    md["foo"] == "baz"

    A default value which can be set through the default attribute.
    """

    def __init__(self, items=()):
        _dictEntries = []
        for name, value in items:
            if isinstance(name, (list, tuple, frozenset, set)):
                for item in name:
                    _dictEntries.append((item, value))
            else:
                _dictEntries.append((name, value))
        dict.__init__(self, _dictEntries)
        assert len(self) == len(_dictEntries)
        self.default = None

    def __getitem__(self, key):
        return dict.get(self, key, self.default)


# Module Factory Factory (no, this isn't Java, I know)
# Here to stop this being duplicated all over the place.

def moduleFactoryFactory(factory):
    moduleCache = {}

    def moduleFactory(baseModule, *args, **kwargs):
        name = "_%s_factory" % baseModule.__name__

        key = (name, args, tuple(sorted(kwargs.items())))
        try:
            return moduleCache[key]
        except KeyError:
            mod = ModuleType(name)
            mod.__dict__.update(factory(baseModule, *args, **kwargs))
            moduleCache[key] = mod
            return mod

    return moduleFactory
