#!/usr/bin/env python3
# This file is subject to the terms and conditions of the GPLv3 (see file 'LICENSE' as part of this source code package)

u"""
Print the most frequent k-mers of a nucleotide sequence, one per line in lexicographic order. With --table, the complete
k-mer frequency table is written as tab-separated k-mer and count, sorted by decreasing count.

Usage:
  frequent  (--help | --version)
  frequent  (--kmer <int>) [--sequence <file>] [--table] [--logfile <file>]

  -h, --help                        Show this screen
  -v, --version                     Show version
  -k <int>, --kmer <int>            k-mer length
  -t, --table                       Write the full frequency table
  -s <file>, --sequence <file>      Sequence file, plain or single FASTA record; default standard input
  -l <file>, --logfile <file>       File for logging
"""

import sys

from . import session, read_sequence, to_int
from .. import common, kmers, __version__

__author__ = "code@fungs.de"


def main(argv):
    from docopt import docopt
    argument = docopt(__doc__, argv=argv, version=__version__)
    common.handle_broken_pipe()

    with session("frequent", argument["--logfile"]):
        k = to_int(argument, "--kmer")
        text = read_sequence(argument["--sequence"])

        if argument["--table"]:
            table = kmers.frequency_table(text, k)
            common.log("frequent", "%i distinct %i-mers in sequence of length %i" % (len(table), k, len(text)))
            common.write_table(table, file=sys.stdout)
        else:
            result = sorted(kmers.most_frequent_kmers(text, k))
            common.log("frequent", "%i most frequent %i-mers in sequence of length %i" % (len(result), k, len(text)))
            common.write_lines(result, file=sys.stdout)


if __name__ == "__main__":
    main(sys.argv[1:])
