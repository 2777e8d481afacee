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

"""
Permissive, non-validating XML 1.0 processing. Documents are checked for
well-formedness and namespaces are resolved; DTDs are read past but not
processed, so references to undeclared entities are reported rather than
expanded.

Example usage:

import picoxml
with open("my_document.xml", "rb") as f:
    document = picoxml.parse(f)

The returned tree is the immutable node model of
picoxml.treebuilders.simpletree, which keeps comments, CDATA sections,
processing instructions and references so that

picoxml.serialize(document)

writes the document back out. Pass treebuilder="etree" to get an
xml.etree.ElementTree instead, or use parseEvents to report the document
to a SAX ContentHandler without building a tree. XMLWriter writes
documents one call at a time.
"""

from .xmlparser import XMLParser, parse, parseEvents, iterparse
from .treebuilders import getTreeBuilder
from .treewalkers import getTreeWalker
from .serializer import serialize
from .xmlwriter import XMLWriter
from ._utils import Name, Attribute, escape, unescape
from .constants import (XMLError, InvalidSyntax, MalformedInput, InvalidState,
                        DataLossWarning)

__all__ = ["XMLParser", "parse", "parseEvents", "iterparse",
           "getTreeBuilder", "getTreeWalker", "serialize", "XMLWriter",
           "Name", "Attribute", "escape", "unescape",
           "XMLError", "InvalidSyntax", "MalformedInput", "InvalidState",
           "DataLossWarning"]

__version__ = "1.0.dev0"
