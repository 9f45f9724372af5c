#!/usr/bin/env python3
# This file is subject to the terms and conditions of the GPLv3 (see file 'LICENSE' as part of this source code package)

u"""
Estimate how surprising a frequent k-mer is. Prints the probability that a given k-mer appears at least t
times in a random sequence of the given length (an approximation, capped at 1) and the expected number of k-mers doing
so, tab-separated.

Usage:
  probability  (--help | --version)
  probability  (--length <int>) (--kmer <int>) (--threshold <int>) [--logfile <file>]

  -h, --help                        Show this screen
  -v, --version                     Show version
  -n <int>, --length <int>          Length of the random sequence
  -k <int>, --kmer <int>            k-mer length
  -t <int>, --threshold <int>       Minimum number of occurrences
  -l <file>, --logfile <file>       File for logging
"""

import sys

from . import session, to_int
from .. import common, stats, __version__

__author__ = "code@fungs.de"


def main(argv):
    from docopt import docopt
    argument = docopt(__doc__, argv=argv, version=__version__)

    with session("probability", argument["--logfile"]):
        n = to_int(argument, "--length")
        k = to_int(argument, "--kmer")
        t = to_int(argument, "--threshold")
        p = stats.pattern_probability(n, k, t)
        expected = stats.expected_kmer_count(n, k, t)
        common.log("probability", "n=%i, k=%i, t=%i: estimate %.6g, expected %.6g k-mers" % (n, k, t, p, expected))
        sys.stdout.write("%.6g\t%.6g\n" % (p, expected))


if __name__ == "__main__":
    main(sys.argv[1:])
