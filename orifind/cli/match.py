#!/usr/bin/env python3
# This file is subject to the terms and conditions of the GPLv3 (see file 'LICENSE' as part of this source code package)

u"""
Print all zero-based start positions of a pattern in a nucleotide sequence, separated by single spaces. Use the
reverse complement of the pattern to search the other strand.

Usage:
  match  (--help | --version)
  match  (--pattern <seq>) [--sequence <file>] [--logfile <file>]

  -h, --help                        Show this screen
  -v, --version                     Show version
  -p <seq>, --pattern <seq>         Pattern to search
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

    with session("match", argument["--logfile"]):
        genome = read_sequence(argument["--sequence"])
        positions = kmers.find_positions(genome, argument["--pattern"].upper())
        common.log("match", "found %i matches in sequence of length %i" % (len(positions), len(genome)))
        common.write_vector(positions, file=sys.stdout)


if __name__ == "__main__":
    main(sys.argv[1:])
