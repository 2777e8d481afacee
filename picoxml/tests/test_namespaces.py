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

import pytest

from picoxml._namespaces import NamespaceScope
from picoxml._utils import Attribute
from picoxml.constants import InvalidSyntax, namespaces


def xmlns(prefix, uri):
    if prefix is None:
        return Attribute(None, "xmlns", uri)
    return Attribute("xmlns", prefix, uri)


def test_initial_scope():
    scope = NamespaceScope()
    assert scope.depth == 0
    assert scope.defaultNamespace is None
    assert scope.lookup(None) is None
    assert scope.lookup("p") is None
    assert scope.lookup("xml") == namespaces["xml"]


def test_push_and_pop():
    scope = NamespaceScope()
    declared = scope.pushFrame([xmlns("a", "urn:a"), Attribute(None, "x", "1"),
                                xmlns(None, "urn:d")])
    assert declared == [("a", "urn:a"), ("", "urn:d")]
    assert scope.depth == 1
    assert scope.lookup("a") == "urn:a"
    assert scope.lookup(None) == "urn:d"
    assert scope.popFrame() == ["", "a"]
    assert scope.depth == 0
    assert scope.lookup("a") is None
    assert scope.defaultNamespace is None


def test_frame_without_declarations():
    scope = NamespaceScope()
    scope.pushFrame([xmlns("a", "urn:a")])
    assert scope.pushFrame([Attribute(None, "x", "1")]) == []
    assert scope.lookup("a") == "urn:a"
    assert scope.popFrame() == []
    assert scope.lookup("a") == "urn:a"


def test_shadowing():
    scope = NamespaceScope()
    scope.pushFrame([xmlns("a", "urn:1")])
    scope.pushFrame([xmlns("a", "urn:2")])
    assert scope.lookup("a") == "urn:2"
    scope.popFrame()
    assert scope.lookup("a") == "urn:1"


def test_undeclare_default():
    scope = NamespaceScope()
    scope.pushFrame([xmlns(None, "urn:d")])
    assert scope.pushFrame([xmlns(None, "")]) == [("", "")]
    assert scope.defaultNamespace is None
    scope.popFrame()
    assert scope.defaultNamespace == "urn:d"


def test_empty_prefix_binding():
    scope = NamespaceScope()
    with pytest.raises(InvalidSyntax) as excinfo:
        scope.pushFrame([xmlns("p", "")], (3, 4))
    assert (excinfo.value.line, excinfo.value.column) == (3, 4)
    assert "'p'" in excinfo.value.message
