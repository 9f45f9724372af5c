#!/usr/bin/env python3
# This file is subject to the terms and conditions of the GPLv3 (see file 'LICENSE' as part of this source code package)

u"""
Print the reverse complement of a nucleotide sequence.

Usage:
  revcomp  (--help | --version)
  revcomp  [--sequence <file>] [--logfile <file>]

  -h, --help                        Show this screen
  -v, --version                     Show version
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

    with session("revcomp", argument["--logfile"]):
        strand = read_sequence(argument["--sequence"])
        common.log("revcomp", "reverse complementing sequence of length %i" % len(strand))
        sys.stdout.write(kmers.reverse_complement(strand))
        sys.stdout.write("\n")


if __name__ == "__main__":
    main(sys.argv[1:])
