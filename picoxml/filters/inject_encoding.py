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

from . import base
from .._utils import Attribute


class Filter(base.Filter):
    """Makes the XML declaration name the encoding the output is written in

    An existing encoding pseudo-attribute is replaced. A declaration without
    one gets it after the version, and a document without a declaration gets
    a new one in front.
    """

    def __init__(self, source, encoding):
        base.Filter.__init__(self, source)
        self.encoding = encoding

    def __iter__(self):
        first = True
        for token in base.Filter.__iter__(self):
            if first and self.encoding is not None:
                if token["type"] == "XmlDeclaration":
                    token = dict(token, data=self.injectEncoding(token["data"]))
                else:
                    yield {"type": "XmlDeclaration",
                           "data": [Attribute(None, "version", "1.0"),
                                    Attribute(None, "encoding", self.encoding)]}
            first = False
            yield token

    def injectEncoding(self, attrs):
        rv = []
        found = False
        for attr in attrs:
            if attr.prefix is None and attr.localName == "encoding":
                attr = attr._replace(value=self.encoding)
                found = True
            rv.append(attr)
        if not found:
            # encoding goes between version and standalone
            index = 1 if rv and rv[0].localName == "version" else 0
            rv.insert(index, Attribute(None, "encoding", self.encoding))
        return rv
