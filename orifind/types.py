# This file is subject to the terms and conditions of the GPLv3 (see file 'LICENSE' as part of this source code package)

u"""
Submodule with all type definitions.
"""

import numpy as np

count_type = np.uint32
logprob_type = np.float64
