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

"""A collection of modules for building different kinds of tree from
XML documents.

To create a treebuilder for a new type of tree, you need to do
implement several things:

1) A set of classes for the node types that can appear outside of
elements: documentClass, xmlDeclarationClass, doctypeClass, commentClass,
processingInstructionClass, whiteSpaceClass, plus cdataClass,
entityRefClass and charRefClass for content. See treebuilders.base for
the signatures they are called with.

2) A treebuilder object (called TreeBuilder by convention) that
inherits from treebuilders.base.TreeBuilder and implements the four
element hooks: createElement, closeElement, appendChild and appendText.
"""

from .._utils import default_etree

treeBuilderCache = {}


def getTreeBuilder(treeType, implementation=None, **kwargs):
    """Get a TreeBuilder class for various types of tree with built-in support

    treeType - the name of the tree type required (case-insensitive). Supported
               values are:

               "simpletree" - The immutable node model of
                              picoxml.treebuilders.simpletree, which keeps
                              every construct needed to write the document
                              back out.
               "etree" - A generic builder for tree implementations exposing an
                         ElementTree-like interface, defaulting to
                         xml.etree.ElementTree.

    implementation - (Currently applies to the "etree" tree type only). A
                      module implementing the tree type e.g.
                      xml.etree.ElementTree."""

    treeType = treeType.lower()
    if treeType not in treeBuilderCache:
        if treeType == "simpletree":
            from . import simpletree
            treeBuilderCache[treeType] = simpletree.TreeBuilder
        elif treeType == "etree":
            from . import etree
            if implementation is None:
                implementation = default_etree
            # NEVER cache here, caching is done in the etree submodule
            return etree.getETreeModule(implementation, **kwargs).TreeBuilder
        else:
            raise ValueError("""Unrecognised treebuilder "%s" """ % treeType)
    return treeBuilderCache.get(treeType)
