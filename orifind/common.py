# This file is subject to the terms and conditions of the GPLv3 (see file 'LICENSE' as part of this source code package)

u"""
This file contains helper functions and types: the error hierarchy, precondition checks, sequence input and the log
sink shared by library and command line.
"""

__author__ = "code@fungs.de"

import sys
from scipy.special import gammaln

alphabet = "ACGT"
alphabet_set = frozenset(alphabet)
MAX_ARRAY_K = 12  # 4**12 counters, 64 MiB with uint32


class OrifindError(ValueError):
    """Base class for all errors raised on malformed input"""


class InvalidLengthError(OrifindError):
    pass


class EmptyInputError(InvalidLengthError):
    pass


class InvalidAlphabetError(OrifindError):
    def __init__(self, symbol, position):
        self.symbol = symbol
        self.position = position
        super().__init__("invalid nucleotide %r at position %i" % (symbol, position))


class SequenceFormatError(OrifindError):
    pass


def check_nonempty(seq, name):
    if not len(seq):
        raise EmptyInputError("%s must not be empty" % name)


def check_positive(value, name):
    if value <= 0:
        raise InvalidLengthError("%s must be positive, got %i" % (name, value))


def check_fits(length, seq, name):
    """Raise unless a substring of the given length fits into the sequence"""
    check_nonempty(seq, "sequence")
    check_positive(length, name)
    if length > len(seq):
        raise InvalidLengthError("%s (%i) exceeds sequence length (%i)" % (name, length, len(seq)))


def check_alphabet(seq):
    for i, c in enumerate(seq):
        if c not in alphabet_set:
            raise InvalidAlphabetError(c, i)


def logbinom(n, k):
    return gammaln(n+1) - gammaln(k+1) - gammaln(n-k+1)


# logging

_logfile = None  # None means the current sys.stderr


def set_logfile(filename):
    global _logfile
    if _logfile is not None:
        _logfile.close()
    _logfile = open(filename, "a") if filename else None


def log(name, message):
    sink = sys.stderr if _logfile is None else _logfile
    sink.write("LOG %s: %s\n" % (name, message))
    sink.flush()


def error(name, message):
    sys.stderr.write("ERROR %s: %s\n" % (name, message))


# sequence input

def parse_lines(lines):
    for line in lines:
        if not line or line[0] == "#":  # skip empty lines and comments
            continue
        line = line.strip()
        if line:
            yield line


def load_sequence(lines):
    """Join a plain or single-record FASTA sequence into one uppercase string"""
    parts = []
    headers = 0
    try:
        for line in parse_lines(lines):
            if line[0] == ">":
                headers += 1
                if headers > 1:
                    raise SequenceFormatError("more than one FASTA record in input")
                if parts:
                    raise SequenceFormatError("FASTA header after sequence data")
                continue
            parts.append(line)
    except UnicodeDecodeError as e:
        raise SequenceFormatError("input is not a text file: %s" % e) from e
    return "".join(parts).upper()


def load_sequence_file(filename):
    with open(filename, "r", encoding="utf-8") as f:
        return load_sequence(f)


# output

def write_lines(items, file=sys.stdout):
    for item in items:
        file.write("%s\n" % item)


def write_vector(vec, file=sys.stdout, sep=" "):
    file.write(sep.join(("%s" % i for i in vec)))
    file.write("\n")


def write_table(table, file=sys.stdout):
    for kmer, count in sorted(table.items(), key=lambda item: (-item[1], item[0])):
        file.write("%s\t%i\n" % (kmer, count))


def handle_broken_pipe():
    import signal
    signal.signal(signal.SIGPIPE, signal.SIG_DFL)
