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

from picoxml._utils import Attribute
from picoxml.filters import base, inject_encoding


def declaration(*attrs):
    return {"type": "XmlDeclaration",
            "data": [Attribute(None, name, value) for name, value in attrs]}


def pairs(token):
    return [(attr.localName, attr.value) for attr in token["data"]]


def test_base_filter_passes_through():
    tokens = [{"type": "Comment", "data": "x"}]
    f = base.Filter(tokens)
    assert list(f) == tokens
    assert f.count({"type": "Comment", "data": "x"}) == 1


def test_declaration_added():
    tokens = list(inject_encoding.Filter([{"type": "EmptyTag", "name": "a"}], "utf-8"))
    assert tokens[0]["type"] == "XmlDeclaration"
    assert pairs(tokens[0]) == [("version", "1.0"), ("encoding", "utf-8")]
    assert tokens[1] == {"type": "EmptyTag", "name": "a"}


def test_encoding_replaced():
    source = [declaration(("version", "1.0"), ("encoding", "latin-1"))]
    tokens = list(inject_encoding.Filter(source, "utf-16"))
    assert len(tokens) == 1
    assert pairs(tokens[0]) == [("version", "1.0"), ("encoding", "utf-16")]
    # The source token is left alone
    assert pairs(source[0]) == [("version", "1.0"), ("encoding", "latin-1")]


def test_encoding_inserted_after_version():
    source = [declaration(("version", "1.0"), ("standalone", "yes"))]
    tokens = list(inject_encoding.Filter(source, "utf-8"))
    assert pairs(tokens[0]) == [("version", "1.0"), ("encoding", "utf-8"),
                                ("standalone", "yes")]


def test_no_encoding():
    source = [{"type": "EmptyTag", "name": "a"}]
    assert list(inject_encoding.Filter(source, None)) == source


def test_only_first_token():
    source = [{"type": "Comment", "data": "x"}, declaration(("version", "1.0"))]
    tokens = list(inject_encoding.Filter(source, "utf-8"))
    assert [token["type"] for token in tokens] == [
        "XmlDeclaration", "Comment", "XmlDeclaration"]
    assert pairs(tokens[2]) == [("version", "1.0")]
