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

import os
import glob
from xml.sax.handler import ContentHandler

from picoxml import treebuilders

base_path = os.path.split(__file__)[0]
test_dir = os.path.join(base_path, "testdata")
del base_path

treeTypes = {"simpletree": treebuilders.getTreeBuilder("simpletree"),
             "ElementTree": treebuilders.getTreeBuilder("etree")}


def get_data_files(subdirectory, files="*.test"):
    return sorted(glob.glob(os.path.join(test_dir, subdirectory, files)))


class TracingSaxHandler(ContentHandler):
    """Records every call made on it in visited"""

    def __init__(self):
        ContentHandler.__init__(self)
        self.visited = []

    def startDocument(self):
        self.visited.append("startDocument")

    def endDocument(self):
        self.visited.append("endDocument")

    def startPrefixMapping(self, prefix, uri):
        self.visited.append(("startPrefixMapping", prefix, uri))

    def endPrefixMapping(self, prefix):
        self.visited.append(("endPrefixMapping", prefix))

    def startElement(self, name, attrs):
        self.visited.append(("startElement", name, dict(attrs)))

    def endElement(self, name):
        self.visited.append(("endElement", name))

    def startElementNS(self, name, qname, attrs):
        self.visited.append(("startElementNS", name, qname, dict(attrs)))

    def endElementNS(self, name, qname):
        self.visited.append(("endElementNS", name, qname))

    def characters(self, content):
        self.visited.append(("characters", content))

    def ignorableWhitespace(self, whitespace):
        self.visited.append(("ignorableWhitespace", whitespace))

    def processingInstruction(self, target, data):
        self.visited.append(("processingInstruction", target, data))

    def skippedEntity(self, name):
        self.visited.append(("skippedEntity", name))


def coalesceCharacters(visited):
    """visited with adjacent characters calls merged"""
    rv = []
    for call in visited:
        if (isinstance(call, tuple) and call[0] == "characters" and rv and
                isinstance(rv[-1], tuple) and rv[-1][0] == "characters"):
            rv[-1] = ("characters", rv[-1][1] + call[1])
        else:
            rv.append(call)
    return rv
