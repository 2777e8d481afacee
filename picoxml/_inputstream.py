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

import codecs
import re
from io import BytesIO, StringIO

import webencodings

from .constants import EOF, E, InvalidSyntax, MalformedInput


# Cache for charsUntil()
charsUntilRegEx = {}

# Byte order marks, longest first so that UTF-8 is tried before UTF-16
byteOrderMarks = (
    (codecs.BOM_UTF8, "utf-8"),
    (codecs.BOM_UTF16_BE, "utf-16be"),
    (codecs.BOM_UTF16_LE, "utf-16le"),
)

# Unmarked UTF-16 recognised from the first '<' of the document
unmarkedUTF16 = {
    b"\x00<": "utf-16be",
    b"<\x00": "utf-16le",
}


class BufferedStream(object):
    """Buffering for streams that do not have buffering of their own

    The buffer is implemented as a list of chunks on the assumption that
    joining many strings will be slow since it is O(n**2)
    """

    def __init__(self, stream):
        self.stream = stream
        self.buffer = []
        self.position = [-1, 0]  # chunk number, offset

    def tell(self):
        pos = 0
        for chunk in self.buffer[:self.position[0]]:
            pos += len(chunk)
        pos += self.position[1]
        return pos

    def seek(self, pos):
        assert pos <= self._bufferedBytes()
        offset = pos
        i = 0
        while len(self.buffer[i]) < offset:
            offset -= len(self.buffer[i])
            i += 1
        self.position = [i, offset]

    def read(self, bytes):
        if not self.buffer:
            return self._readStream(bytes)
        elif (self.position[0] == len(self.buffer) - 1 and
              self.position[1] == len(self.buffer[-1])):
            return self._readStream(bytes)
        else:
            return self._readFromBuffer(bytes)

    def _bufferedBytes(self):
        return sum([len(item) for item in self.buffer])

    def _readStream(self, bytes):
        data = self.stream.read(bytes)
        self.buffer.append(data)
        self.position[0] += 1
        self.position[1] = len(data)
        return data

    def _readFromBuffer(self, bytes):
        remainingBytes = bytes
        rv = []
        bufferIndex = self.position[0]
        bufferOffset = self.position[1]
        while bufferIndex < len(self.buffer) and remainingBytes != 0:
            assert remainingBytes > 0
            bufferedData = self.buffer[bufferIndex]

            if remainingBytes <= len(bufferedData) - bufferOffset:
                bytesToRead = remainingBytes
                self.position = [bufferIndex, bufferOffset + bytesToRead]
            else:
                bytesToRead = len(bufferedData) - bufferOffset
                self.position = [bufferIndex, len(bufferedData)]
                bufferIndex += 1
            rv.append(bufferedData[bufferOffset:bufferOffset + bytesToRead])
            remainingBytes -= bytesToRead

            bufferOffset = 0

        if remainingBytes:
            rv.append(self._readStream(remainingBytes))

        return b"".join(rv)


def lookupEncoding(encoding):
    """Return the webencodings Encoding for a label, or None if it is unknown"""
    if isinstance(encoding, bytes):
        try:
            encoding = encoding.decode("ascii")
        except UnicodeDecodeError:
            return None

    if encoding is not None:
        try:
            return webencodings.lookup(encoding)
        except AttributeError:
            return None
    else:
        return None


def detectEncoding(rawStream, defaultEncoding="utf-8"):
    """Pick the encoding of rawStream from its first bytes

    A byte order mark is consumed; the unmarked UTF-16 forms are not. The
    stream is left positioned at the first byte of content. Returns a
    webencodings Encoding.
    """
    start = rawStream.read(3)
    assert isinstance(start, bytes)

    for bom, name in byteOrderMarks:
        if start.startswith(bom):
            rawStream.seek(len(bom))
            return lookupEncoding(name)
        if start and len(start) < len(bom) and bom.startswith(start):
            raise MalformedInput(1, 0, E["truncated-byte-order-mark"])

    rawStream.seek(0)
    encoding = unmarkedUTF16.get(start[:2])
    if encoding is not None:
        return lookupEncoding(encoding)

    return lookupEncoding(defaultEncoding) or lookupEncoding("utf-8")


def XMLInputStream(source, **kwargs):
    """Open source for reading by the tokenizer

    source may be a str, bytes or a file object opened in either mode.
    Text sources are used as they are; byte sources go through encoding
    detection.
    """
    if (hasattr(source, "read") and not isinstance(source, BufferedStream)):
        isUnicode = isinstance(source.read(0), str)
    else:
        isUnicode = isinstance(source, str)

    if isUnicode:
        if kwargs.get("encoding") is not None:
            raise TypeError("Cannot set an encoding with a unicode input")
        return XMLUnicodeInputStream(source)
    else:
        return XMLBinaryInputStream(source, **kwargs)


class XMLUnicodeInputStream(object):
    """Provides a unicode stream of characters to the XMLTokenizer.

    This class takes care of line end normalisation and provides column
    and line tracking, pushback and the small lookahead vocabulary used by
    the tokenizer (peek, lookahead, attempt, expect, take).

    """

    _defaultChunkSize = 10240

    # Characters of the previous chunk kept around so that unget can
    # always go back at least this far
    _maxPushback = 16

    def __init__(self, source):
        """Initialises the XMLInputStream.

        XMLInputStream(source) -> Normalized stream from source
        for use by picoxml.

        source can be either a file-object or a string.

        """
        self.charEncoding = (lookupEncoding("utf-8"), "certain")
        self.dataStream = self.openStream(source)

        self.reset()

    def reset(self):
        self.chunk = ""
        self.chunkSize = 0
        self.chunkOffset = 0

        # number of (complete) lines before the start of the chunk
        self.prevNumLines = 0
        # number of columns in the last line before the start of the chunk
        self.prevNumCols = 0

        # Deal with CR LF split over chunk boundaries
        self._bufferedCharacter = None
        self._atStart = True

    def openStream(self, source):
        """Produces a file object from source.

        source can be either a file object or a string.

        """
        # Already a file object
        if hasattr(source, "read"):
            stream = source
        else:
            stream = StringIO(source)

        return stream

    def _position(self, offset):
        chunk = self.chunk
        nLines = chunk.count("\n", 0, offset)
        positionLine = self.prevNumLines + nLines
        lastLinePos = chunk.rfind("\n", 0, offset)
        if lastLinePos == -1:
            positionColumn = self.prevNumCols + offset
        else:
            positionColumn = offset - (lastLinePos + 1)
        return (positionLine, positionColumn)

    def position(self):
        """Returns (line, col) of the current position in the stream."""
        line, col = self._position(self.chunkOffset)
        return (line + 1, col)

    def char(self):
        """ Read one character from the stream or queue if available. Return
            EOF when EOF is reached.
        """
        # Read a new chunk from the input stream if necessary
        if self.chunkOffset >= self.chunkSize:
            if not self.readChunk():
                return EOF

        chunkOffset = self.chunkOffset
        char = self.chunk[chunkOffset]
        self.chunkOffset = chunkOffset + 1

        return char

    def readChunk(self, chunkSize=None):
        if chunkSize is None:
            chunkSize = self._defaultChunkSize

        data = self.dataStream.read(chunkSize)

        # Deal with CR LF broken across chunks
        if self._bufferedCharacter:
            data = self._bufferedCharacter + data
            self._bufferedCharacter = None
        elif not data:
            # We have no more data, bye-bye stream
            return False

        if self._atStart:
            self._atStart = False
            if data.startswith("\ufeff"):
                data = data[1:]

        if len(data) > 1 and data[-1] == "\r":
            self._bufferedCharacter = data[-1]
            data = data[:-1]

        data = data.replace("\r\n", "\n")
        data = data.replace("\r", "\n")

        # Keep the tail of the consumed chunk so unget can cross the boundary
        keep = min(self.chunkOffset, self._maxPushback)
        self.prevNumLines, self.prevNumCols = self._position(self.chunkOffset - keep)
        self.chunk = self.chunk[self.chunkOffset - keep:self.chunkOffset] + data
        self.chunkSize = len(self.chunk)
        self.chunkOffset = keep

        return True

    def charsUntil(self, characters, opposite=False):
        """ Returns a string of characters from the stream up to but not
        including any character in 'characters' or EOF. 'characters' must be
        a container that supports the 'in' method and iteration over its
        characters.
        """

        # Use a cache of regexps to find the required characters
        try:
            chars = charsUntilRegEx[(characters, opposite)]
        except KeyError:
            if __debug__:
                for c in characters:
                    assert(ord(c) < 128)
            regex = "".join(["\\x%02x" % ord(c) for c in characters])
            if not opposite:
                regex = "^%s" % regex
            chars = charsUntilRegEx[(characters, opposite)] = re.compile("[%s]+" % regex)

        rv = []

        while True:
            # Find the longest matching prefix
            m = chars.match(self.chunk, self.chunkOffset)
            if m is None:
                # If nothing matched, and it wasn't because we ran out of chunk,
                # then stop
                if self.chunkOffset != self.chunkSize:
                    break
            else:
                end = m.end()
                # If not the whole chunk matched, return everything
                # up to the part that didn't match
                if end != self.chunkSize:
                    rv.append(self.chunk[self.chunkOffset:end])
                    self.chunkOffset = end
                    break
            # If the whole remainder of the chunk matched,
            # use it all and read the next chunk
            rv.append(self.chunk[self.chunkOffset:])
            self.chunkOffset = self.chunkSize
            if not self.readChunk():
                # Reached EOF
                break

        r = "".join(rv)
        return r

    def unget(self, chars):
        """Push chars, the most recently read characters, back onto the stream"""
        if chars is EOF or not chars:
            return
        assert self.chunkOffset >= len(chars), "pushback limit exceeded"
        self.chunkOffset -= len(chars)
        assert self.chunk.startswith(chars, self.chunkOffset)

    def peek(self, n=1):
        """Return the next n characters without consuming them

        Fewer are returned near the end of the stream and "" at EOF.
        """
        if self.chunkOffset + n <= self.chunkSize:
            return self.chunk[self.chunkOffset:self.chunkOffset + n]
        rv = []
        for i in range(n):
            c = self.char()
            if c is EOF:
                break
            rv.append(c)
        rv = "".join(rv)
        self.unget(rv)
        return rv

    def lookahead(self, s):
        return self.peek(len(s)) == s

    def attempt(self, s):
        """Consume s if the stream continues with it"""
        if self.lookahead(s):
            self.chunkOffset += len(s)
            return True
        return False

    def take(self, predicate):
        """Consume the longest run of characters satisfying predicate"""
        rv = []
        while True:
            c = self.char()
            if c is EOF:
                break
            if not predicate(c):
                self.unget(c)
                break
            rv.append(c)
        return "".join(rv)

    def expect(self, expected, description=None):
        """Consume expected, a string or a one-character predicate

        Raises InvalidSyntax at the current position when the stream does not
        continue with it. Returns what was consumed.
        """
        if callable(expected):
            c = self.char()
            if c is not EOF and expected(c):
                return c
            self.unget(c)
            got = c
        else:
            if self.attempt(expected):
                return expected
            got = self.peek(len(expected))
        if description is None:
            description = repr(expected)
        self.syntaxError("expected", {"expected": description,
                                      "got": repr(got) if got else "end of file"})

    def syntaxError(self, errorcode, datavars=None, position=None):
        if position is None:
            position = self.position()
        raise InvalidSyntax(position[0], position[1],
                            E[errorcode] % (datavars or {}))


class XMLBinaryInputStream(XMLUnicodeInputStream):
    """Provides a unicode stream of characters to the XMLTokenizer.

    This class takes care of character encoding and removing or replacing
    incorrect byte-sequences and also provides column and line tracking.

    """

    def __init__(self, source, encoding=None, defaultEncoding="utf-8"):
        """Initialises the XMLInputStream.

        XMLInputStream(source, [encoding]) -> Normalized stream from source
        for use by picoxml.

        source can be either a file-object or a byte string.

        The optional encoding parameter must be a string that indicates
        the encoding.  If specified, that encoding will be used,
        regardless of any byte order mark or XML declaration.

        defaultEncoding is used when the first bytes say nothing about the
        encoding.

        """
        # Raw Stream - for unicode objects this will encode to utf-8 and set
        #              self.charEncoding as appropriate
        self.rawStream = self.openStream(source)

        XMLUnicodeInputStream.__init__(self, self.rawStream)

        # Encoding Information
        self.defaultEncoding = defaultEncoding

        # Determine encoding
        self.charEncoding = self.determineEncoding(encoding)
        assert self.charEncoding[0] is not None

        # Call superclass
        self.reset()

    def reset(self):
        self.dataStream = self.charEncoding[0].codec_info.streamreader(self.rawStream, "replace")
        XMLUnicodeInputStream.reset(self)

    def openStream(self, source):
        """Produces a file object from source.

        source can be either a file object or a byte string.

        """
        # Already a file object
        if hasattr(source, "read"):
            stream = source
        else:
            stream = BytesIO(source)

        try:
            stream.seek(stream.tell())
        except Exception:
            stream = BufferedStream(stream)

        return stream

    def determineEncoding(self, transportEncoding=None):
        # An explicit encoding wins, a byte order mark is still skipped
        if transportEncoding is not None:
            encoding = lookupEncoding(transportEncoding)
            if encoding is None:
                raise LookupError("Unknown encoding %r" % transportEncoding)
            start = self.rawStream.read(3)
            for bom, name in byteOrderMarks:
                if start.startswith(bom) and lookupEncoding(name) == encoding:
                    self.rawStream.seek(len(bom))
                    break
            else:
                self.rawStream.seek(0)
            return encoding, "certain"

        return detectEncoding(self.rawStream, self.defaultEncoding), "tentative"
