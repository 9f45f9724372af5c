# This file is subject to the terms and conditions of the GPLv3 (see file 'LICENSE' as part of this source code package)

u"""
Rough significance estimates for frequent and clumped k-mers. For a random string of length n over four equiprobable
letters, the probability that a fixed k-mer occurs at least t times is approximated by
C(n - t*(k-1), t) / 4**(t*k), which ignores overlapping occurrences. For t = 1 this is (n - k + 1) / 4**k, an expected
count rather than a probability, so pattern_probability() caps the estimate at 1.
"""

__author__ = "code@fungs.de"

from . import common, types
import numpy as np


def log_pattern_probability(n, k, t):
    common.check_positive(n, "sequence length")
    common.check_positive(k, "k")
    common.check_positive(t, "threshold")
    if k > n:
        raise common.InvalidLengthError("k (%i) exceeds sequence length (%i)" % (k, n))

    slots = n - t*(k-1)
    if slots < t:  # t occurrences do not fit
        return types.logprob_type(-np.inf)
    return types.logprob_type(common.logbinom(slots, t) - t*k*np.log(4.))


def pattern_probability(n, k, t):
    """Approximate probability, capped at 1 where the approximation overshoots for small t"""
    return min(1., float(np.exp(log_pattern_probability(n, k, t))))


def expected_kmer_count(n, k, t):
    """Expected number of distinct k-mers which appear at least t times, 4**k times the uncapped estimate"""
    return float(np.exp(log_pattern_probability(n, k, t) + k*np.log(4.)))
