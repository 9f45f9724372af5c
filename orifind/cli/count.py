#!/usr/bin/env python3
# This file is subject to the terms and conditions of the GPLv3 (see file 'LICENSE' as part of this source code package)

u"""
Count the (possibly overlapping) occurrences of a pattern in a nucleotide sequence.

Usage:
  count  (--help | --version)
  count  (--pattern <seq>) [--sequence <file>] [--logfile <file>]

  -h, --help                        Show this screen
  -v, --version                     Show version
  -p <seq>, --pattern <seq>         Pattern to count
  -s <file>, --sequence <file>      Sequence file, plain or single FASTA record; default standard input
  -l <file>, --logfile <file>       File for logging
"""

import sys

from . import session, read_sequence
from .. import common, kmers, __version__

__author__ = "code@fungs.de"


def main(argv):
    from docopt import docopt
    argument = docopt(__doc__, argv=argv, version=__version__)
    common.handle_broken_pipe()

    with session("count", argument["--logfile"]):
        text = read_sequence(argument["--sequence"])
        pattern = argument["--pattern"].upper()
        common.log("count", "searching pattern of length %i in sequence of length %i" % (len(pattern), len(text)))
        sys.stdout.write("%i\n" % kmers.count_occurrences(text, pattern))


if __name__ == "__main__":
    main(sys.argv[1:])
