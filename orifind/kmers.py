# This file is subject to the terms and conditions of the GPLv3 (see file 'LICENSE' as part of this source code package)

u"""
This file holds the basic k-mer operations on nucleotide strings: counting and locating a pattern, building k-mer
frequency tables, extracting the most frequent k-mers and reverse complementing a strand.
"""

__author__ = "code@fungs.de"

from . import common, types
from collections import defaultdict
import numpy as np

_complement = str.maketrans("ACGT", "TGCA")

_codes = np.full(256, 255, dtype=np.uint8)  # ASCII -> 0..3, 255 for anything else
for _i, _c in enumerate(common.alphabet):
    _codes[ord(_c)] = _i


def _scan(text, pattern):
    common.check_nonempty(pattern, "pattern")
    common.check_fits(len(pattern), text, "pattern length")
    m = len(pattern)
    for i in range(len(text) - m + 1):
        if text[i:i+m] == pattern:
            yield i


def count_occurrences(text, pattern):
    """Number of (possibly overlapping) occurrences of pattern in text"""
    return sum(1 for _ in _scan(text, pattern))


def find_positions(genome, pattern):
    """Ascending start positions of all exact matches of pattern in genome"""
    return list(_scan(genome, pattern))


def frequency_table(text, k):
    """
    Map every k-mer in text to its number of occurrences, built in a single pass over the start positions. The
    returned dictionary is a fresh object owned by the caller.
    """
    common.check_fits(k, text, "k")
    table = defaultdict(int)
    for i in range(len(text) - k + 1):
        table[text[i:i+k]] += 1
    return dict(table)


def most_frequent_kmers(text, k):
    table = frequency_table(text, k)
    top = max(table.values())
    return {kmer for kmer, count in table.items() if count == top}


def reverse_complement(strand):
    common.check_alphabet(strand)
    return strand.translate(_complement)[::-1]


# dense representation over all 4**k k-mers

def pattern_to_number(pattern):
    common.check_nonempty(pattern, "pattern")
    common.check_alphabet(pattern)
    h = 0
    for c in pattern:
        h = 4*h + common.alphabet.index(c)
    return h


def number_to_pattern(index, k):
    common.check_positive(k, "k")
    if not 0 <= index < 4**k:
        raise common.InvalidLengthError("index %i out of range for k=%i" % (index, k))
    symbols = []
    for _ in range(k):
        index, r = divmod(index, 4)
        symbols.append(common.alphabet[r])
    return "".join(reversed(symbols))


def encode(seq):
    """Numeric codes 0..3 for a nucleotide string as a numpy vector"""
    codes = _codes[np.frombuffer(seq.encode("ascii", errors="replace"), dtype=np.uint8)]
    invalid = np.flatnonzero(codes == 255)
    if invalid.size:
        i = int(invalid[0])
        raise common.InvalidAlphabetError(seq[i], i)
    return codes


def frequency_array(text, k):
    """
    Count vector over all 4**k k-mers in lexicographic order; entry pattern_to_number(kmer) holds the count of kmer.
    """
    common.check_fits(k, text, "k")
    if k > common.MAX_ARRAY_K:
        raise common.InvalidLengthError("k=%i too large for a frequency array (maximum %i)" % (k, common.MAX_ARRAY_K))

    codes = encode(text).astype(np.int64)
    num = len(text) - k + 1
    index = np.zeros(num, dtype=np.int64)
    for j in range(k):  # rolling base-4 number of each window
        index = 4*index + codes[j:j+num]
    return np.bincount(index, minlength=4**k).astype(types.count_type)
