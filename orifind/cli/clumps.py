#!/usr/bin/env python3
# This file is subject to the terms and conditions of the GPLv3 (see file 'LICENSE' as part of this source code package)

u"""
Find all k-mers forming (k, L, t)-clumps, i.e. which appear at least t times within some window of length L of the
genome. The result is written one k-mer per line in lexicographic order.

Usage:
  clumps  (--help | --version)
  clumps  (--kmer <int>) (--window <int>) (--threshold <int>) [--sequence <file>] [--sliding] [--logfile <file>]

  -h, --help                        Show this screen
  -v, --version                     Show version
  -k <int>, --kmer <int>            k-mer length
  -L <int>, --window <int>          Window length
  -t <int>, --threshold <int>       Minimum number of occurrences within a window
  -S, --sliding                     Update counts incrementally instead of recounting each window
  -s <file>, --sequence <file>      Sequence file, plain or single FASTA record; default standard input
  -l <file>, --logfile <file>       File for logging
"""

import sys

from . import session, read_sequence, to_int
from .. import common, clumps, __version__

__author__ = "code@fungs.de"


def main(argv):
    from docopt import docopt
    argument = docopt(__doc__, argv=argv, version=__version__)
    common.handle_broken_pipe()

    with session("clumps", argument["--logfile"]):
        k = to_int(argument, "--kmer")
        window = to_int(argument, "--window")
        threshold = to_int(argument, "--threshold")
        genome = read_sequence(argument["--sequence"])

        result = clumps.find_clumps(genome, k, window, threshold, sliding=argument["--sliding"])
        common.log("clumps", "%i clump %i-mers (L=%i, t=%i) in sequence of length %i"
                   % (len(result), k, window, threshold, len(genome)))
        common.write_lines(sorted(result), file=sys.stdout)


if __name__ == "__main__":
    main(sys.argv[1:])
