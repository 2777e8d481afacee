#!/usr/bin/env python
"""usage: %prog [options] filename

Parse a document to a tree, with optional timing
"""

import sys
import traceback
from optparse import OptionParser
from xml.sax.saxutils import XMLGenerator

from picoxml import XMLParser, XMLError
from picoxml import treebuilders, serializer, treewalkers


def parse():
    optParser = getOptParser()
    opts, args = optParser.parse_args()
    encoding = opts.encoding

    try:
        f = args[-1]
    except IndexError:
        sys.stderr.write("No filename provided. Use -h for help\n")
        sys.exit(1)

    if f == "-":
        f = sys.stdin.buffer
    else:
        try:
            # Try opening from file system
            f = open(f, "rb")
        except IOError as e:
            sys.stderr.write("Unable to open file: %s\n" % e)
            sys.exit(1)

    treebuilder = treebuilders.getTreeBuilder(opts.treebuilder)
    p = XMLParser(tree=treebuilder, strictNamespaces=opts.strict,
                  matchEndTags=not opts.lenient, debug=opts.log)

    kwargs = {}
    if encoding is not None:
        kwargs["encoding"] = encoding

    try:
        if opts.sax:
            run(p.parseEvents, opts, f, XMLGenerator(sys.stdout), **kwargs)
            sys.stdout.write("\n")
        elif opts.time:
            import time
            t0 = time.time()
            document = run(p.parse, opts, f, **kwargs)
            t1 = time.time()
            printOutput(p, document, opts)
            t2 = time.time()
            sys.stderr.write("\n\nRun took: %fs (plus %fs to print the output)" %
                             (t1 - t0, t2 - t1))
        else:
            document = run(p.parse, opts, f, **kwargs)
            printOutput(p, document, opts)
    finally:
        if f is not sys.stdin.buffer:
            f.close()


def run(parseMethod, opts, *args, **kwargs):
    try:
        return parseMethod(*args, **kwargs)
    except XMLError as e:
        sys.stderr.write("%s: %s\n" % (type(e).__name__, e))
        if opts.traceback:
            traceback.print_exc()
        sys.exit(1)


def printOutput(parser, document, opts):
    if opts.encoding:
        print("Encoding:", parser.documentEncoding)

    if opts.xml:
        if opts.treebuilder == "etree":
            document.write(sys.stdout.buffer, encoding="utf-8")
        else:
            sys.stdout.buffer.write(serializer.serialize(document, encoding="utf-8"))
    elif opts.treebuilder == "etree":
        from xml.etree import ElementTree
        sys.stdout.write(ElementTree.tostring(document.getroot(), encoding="unicode"))
    else:
        sys.stdout.write(treewalkers.pprint(treewalkers.getTreeWalker("simpletree")(document)))
    sys.stdout.write("\n")

    if opts.error:
        errList = []
        for pos, errorcode, datavars in parser.errors:
            errList.append("Line %i Col %i" % pos + " " + errorcode + repr(datavars))
        sys.stdout.write("\nParse errors:\n" + "\n".join(errList) + "\n")

    if opts.log:
        sys.stdout.write("\nParse log:\n")
        for phase, method, info in parser.log:
            sys.stdout.write("%s %s %r\n" % (phase, method, info))


def getOptParser():
    parser = OptionParser(usage=__doc__)

    parser.add_option("-t", "--time",
                      action="store_true", default=False, dest="time",
                      help="Time the run using time.time (may not be accurate on all platforms, especially for short runs)")

    parser.add_option("-b", "--treebuilder", action="store", type="choice",
                      choices=["simpletree", "etree"], default="simpletree",
                      dest="treebuilder")

    parser.add_option("-e", "--error", action="store_true", default=False,
                      dest="error", help="Print a list of recoverable errors")

    parser.add_option("-x", "--xml", action="store_true", default=False,
                      dest="xml", help="Output as xml")

    parser.add_option("-s", "--sax", action="store_true", default=False,
                      dest="sax", help="Stream the document through a SAX "
                      "XMLGenerator instead of building a tree")

    parser.add_option("-c", "--encoding", action="store", default=None,
                      dest="encoding", help="Decode the input with this encoding "
                      "and print the encoding used")

    parser.add_option("", "--strict-namespaces", action="store_true",
                      default=False, dest="strict",
                      help="Reject prefixes that are not bound")

    parser.add_option("", "--lenient-end-tags", action="store_true",
                      default=False, dest="lenient",
                      help="Record mismatched end tags instead of failing")

    parser.add_option("-l", "--log", action="store_true", default=False,
                      dest="log", help="Print the per token parse log")

    parser.add_option("", "--traceback", action="store_true", default=False,
                      dest="traceback", help="Print a traceback for syntax errors")

    return parser


if __name__ == "__main__":
    parse()
