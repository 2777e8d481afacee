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

from picoxml import escape, unescape
from picoxml._utils import Name, Attribute, MethodDispatcher, moduleFactoryFactory


@pytest.mark.parametrize("data,expected", [
    ("", ""),
    ("plain", "plain"),
    ("1 < 2 & 3 > 2", "1 &lt; 2 &amp; 3 &gt; 2"),
    ("\"quoted\" 'text'", "&quot;quoted&quot; &apos;text&apos;"),
    ("&amp;", "&amp;amp;"),
    ("<<", "&lt;&lt;"),
])
def test_escape(data, expected):
    assert escape(data) == expected


def test_unescape_predefined():
    rv = unescape("a &lt; b &amp;&amp; c &gt; d &quot;&apos;")
    assert rv.value == "a < b && c > d \"'"
    assert rv.unrecognizedEntities == []
    assert rv.containsUnterminatedAmpersand is False


def test_unescape_unrecognized():
    rv = unescape("&foo; and &bar;&lt;")
    assert rv.value == "&foo; and &bar;<"
    assert rv.unrecognizedEntities == ["foo", "bar"]
    assert rv.containsUnterminatedAmpersand is False


def test_unescape_unterminated():
    rv = unescape("AT&T")
    assert rv.value == "AT&amp;T"
    assert rv.unrecognizedEntities == []
    assert rv.containsUnterminatedAmpersand is True


def test_unescape_character_references_are_not_expanded():
    rv = unescape("&#65;")
    assert rv.value == "&#65;"
    assert rv.unrecognizedEntities == ["#65"]


@pytest.mark.parametrize("data", [
    "",
    "no markup at all",
    "<tag attr=\"value\">",
    "'single' and \"double\"",
    "tab\tnewline\n>>",
    "café \U0001F600",
])
def test_escape_unescape(data):
    rv = unescape(escape(data))
    assert rv.value == data
    assert rv.unrecognizedEntities == []
    assert rv.containsUnterminatedAmpersand is False


@pytest.mark.parametrize("raw,prefix,localName", [
    ("a", None, "a"),
    ("x:a", "x", "a"),
    ("xmlns:x", "xmlns", "x"),
    (":a", None, ":a"),
    ("a:", None, "a:"),
    ("a:b:c", "a", "b:c"),
])
def test_name_from_string(raw, prefix, localName):
    name = Name.fromString(raw)
    assert name == Name(prefix, localName)
    assert str(name) == raw
    assert name.qualified == (prefix is not None)


def test_attribute():
    attr = Attribute("x", "a", "1")
    assert attr.namespace is None
    assert attr.name == Name("x", "a")
    assert attr.qname == "x:a"
    assert not attr.isNamespaceDeclaration
    assert Attribute(None, "xmlns", "urn:a").isNamespaceDeclaration
    assert Attribute("xmlns", "x", "urn:a").isNamespaceDeclaration
    assert attr._replace(namespace="urn:x").namespace == "urn:x"


def test_method_dispatcher():
    md = MethodDispatcher([(("foo", "bar"), "baz"), ("qux", "quux")])
    assert md["foo"] == "baz"
    assert md["bar"] == "baz"
    assert md["qux"] == "quux"
    assert md["missing"] is None
    md.default = "default"
    assert md["missing"] == "default"


def test_module_factory():
    def factory(baseModule, value):
        return {"base": baseModule, "value": value}

    moduleFactory = moduleFactoryFactory(factory)
    first = moduleFactory(pytest, 1)
    assert first.base is pytest
    assert first.value == 1
    assert moduleFactory(pytest, 1) is first
    assert moduleFactory(pytest, 2) is not first
