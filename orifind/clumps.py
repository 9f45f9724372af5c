# This file is subject to the terms and conditions of the GPLv3 (see file 'LICENSE' as part of this source code package)

u"""
Clump finding: collect every k-mer which occurs at least t times inside some window of length L of a genome. A k-mer
qualifies if ANY window satisfies the threshold, so the result is the union of the qualifying k-mers over all windows.
"""

__author__ = "code@fungs.de"

from . import common, kmers
from collections import defaultdict


def check_parameters(genome, k, window, threshold):
    common.check_positive(threshold, "threshold")
    common.check_fits(window, genome, "window length")
    common.check_positive(k, "k")
    if k > window:
        raise common.InvalidLengthError("k (%i) exceeds window length (%i)" % (k, window))


def find_clumps(genome, k, window, threshold, sliding=False):
    """(k, L, t)-clumps by recomputing a frequency table for each window"""
    if sliding:
        return find_clumps_sliding(genome, k, window, threshold)

    check_parameters(genome, k, window, threshold)
    clumps = set()
    for i in range(len(genome) - window + 1):
        table = kmers.frequency_table(genome[i:i+window], k)
        clumps.update(kmer for kmer, count in table.items() if count >= threshold)
    return clumps


def find_clumps_sliding(genome, k, window, threshold):
    """
    Same result as find_clumps() but the table is updated incrementally: when the window moves by one position, the
    leftmost k-mer leaves and one new k-mer enters, which is the only count that can grow.
    """
    check_parameters(genome, k, window, threshold)
    table = defaultdict(int, kmers.frequency_table(genome[:window], k))
    clumps = {kmer for kmer, count in table.items() if count >= threshold}

    for i in range(1, len(genome) - window + 1):
        first = genome[i-1:i-1+k]
        table[first] -= 1
        if not table[first]:
            del table[first]

        last = genome[i+window-k:i+window]
        table[last] += 1
        if table[last] >= threshold:
            clumps.add(last)

    return clumps
