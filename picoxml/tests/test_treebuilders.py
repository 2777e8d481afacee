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
import xml.etree.ElementTree as ElementTree

import pytest

from picoxml import XMLParser, parse, DataLossWarning
from picoxml import treebuilders
from picoxml.treebuilders import simpletree

from .support import treeTypes


def test_get_tree_builder():
    assert treebuilders.getTreeBuilder("SimpleTree") is simpletree.TreeBuilder
    assert treebuilders.getTreeBuilder("etree") is treebuilders.getTreeBuilder("etree")
    with pytest.raises(ValueError):
        treebuilders.getTreeBuilder("dom")


@pytest.mark.parametrize("treeName", sorted(treeTypes))
def test_all_tree_types(treeName):
    document = XMLParser(tree=treeTypes[treeName]).parse("<a xmlns='urn:a'><b>x</b></a>")
    assert document is not None


class TestSimpleTree(object):

    def test_nodes_are_immutable(self):
        element = simpletree.Element("a")
        with pytest.raises(AttributeError):
            element.namespace = "urn:a"
        with pytest.raises(AttributeError):
            simpletree.Text("x").value = "y"

    def test_equality(self):
        assert parse("<a b='1'>x<c/></a>") == parse("<a b='1'>x<c/></a>")
        assert parse("<a b='1'/>") != parse("<a b='2'/>")
        assert simpletree.Text(" ") != simpletree.WhiteSpace(" ")
        assert hash(simpletree.Element("a")) == hash(simpletree.Element("a"))

    def test_element_name(self):
        element = simpletree.Element("p:a", namespace="urn:p")
        assert element.prefix == "p"
        assert element.localName == "a"
        assert element.nameTuple == ("urn:p", "a")

    def test_text_merging(self):
        root = parse("<a>x&amp;y <![CDATA[z]]> &lt;</a>").root
        assert list(root.children) == [
            simpletree.Text("x&y "),
            simpletree.CData("z"),
            simpletree.Text(" <")]

    def test_whitespace_run(self):
        root = parse("<a>\n  <b/>\n</a>").root
        assert list(root.children) == [
            simpletree.WhiteSpace("\n  "),
            simpletree.Element("b"),
            simpletree.WhiteSpace("\n")]

    def test_empty_children_shared(self):
        root = parse("<a><b/><c></c></a>").root
        for child in root.children:
            assert child.children is simpletree.Nodes.EMPTY

    def test_miscs(self):
        document = parse("<!-- before --><a/><?after?>")
        assert list(document.beforeMiscs) == [simpletree.Comment(" before ")]
        assert list(document.afterMiscs) == [simpletree.ProcessingInstruction("after")]
        assert document.prolog is None
        assert document.doctype is None

    def test_attributes(self):
        attributes = parse("<a x='1' xmlns:p='urn:p' p:y='2'/>").root.attributes
        assert len(attributes) == 3
        assert attributes.get("x") == "1"
        assert attributes.get("missing", "default") == "default"
        assert attributes.getNS("urn:p", "y") == "2"
        assert attributes.getNS(None, "y") is None
        assert [attr.isNamespaceDeclaration for attr in attributes] == [False, True, False]

    def test_repr(self):
        document = parse("<p:a xmlns:p='urn:p'><b/></p:a>")
        assert repr(document.root) == "<Element p:a>"
        assert repr(document.root.children) == "Nodes([<Element b>])"
        assert repr(document) == \
            "Document(None, Miscs([]), <Element p:a>, Miscs([]), None)"

    def test_char_ref(self):
        assert simpletree.CharRef(16, "263A").char == "☺"
        assert simpletree.CharRef(10, "65").char == "A"

    def test_declaration_defaults(self):
        declaration = parse("<?xml version='1.0' standalone='yes'?><a/>").prolog
        assert declaration.version == "1.0"
        assert declaration.encoding == "utf-8"
        assert declaration.standalone == "yes"


class TestETree(object):

    def parse(self, doc):
        return parse(doc, treebuilder="etree")

    def test_namespaced_names(self):
        tree = self.parse("<a xmlns='urn:a' xmlns:p='urn:p' x='1' p:y='2'><p:b/></a>")
        root = tree.getroot()
        assert isinstance(tree, ElementTree.ElementTree)
        assert root.tag == "{urn:a}a"
        assert root.attrib == {"x": "1", "{urn:p}y": "2"}
        assert root[0].tag == "{urn:p}b"

    def test_text_and_tail(self):
        root = self.parse("<a>x<b>y</b>z&#65;<![CDATA[<c>]]></a>").getroot()
        assert root.text == "x"
        assert root[0].text == "y"
        assert root[0].tail == "zA<c>"

    def test_comment_and_pi_inside_root(self):
        root = self.parse("<a><!--c--><?t d?></a>").getroot()
        assert root[0].tag is ElementTree.Comment
        assert root[0].text == "c"
        assert root[1].tag is ElementTree.ProcessingInstruction

    def test_whitespace_outside_root_is_dropped(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            tree = self.parse("<?xml version='1.0'?>\n<a/>\n")
        assert tree.getroot().tag == "a"

    @pytest.mark.parametrize("doc", [
        "<!DOCTYPE a><a/>",
        "<!--c--><a/>",
        "<a/><?t?>",
        "<a>&undeclared;</a>",
    ])
    def test_data_loss(self, doc):
        with pytest.warns(DataLossWarning):
            tree = self.parse(doc)
        assert tree.getroot().tag == "a"
