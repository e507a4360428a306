## directional greedy convex hull walk for yappath

## Copyright (c) 2026 yappath contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""
Convex hull extraction over *ordered* samples.

The samples are assumed to trace a rough cyclic boundary already, so
the hull is found by walking forward from the first sample.  At each
step the reference heading is the circular mean of the headings from
the current hull point to every remaining sample, and the remaining
sample at the greatest signed angle from that reference (ties going to
the farther sample) is taken next.  Every sample up to and including
the chosen one is consumed.

The signed angle is counter-clockwise in a y-up frame, so a convex
polygon listed counter-clockwise in screen coordinates (y down) comes
through unchanged.  This is not a general convex hull of an unordered
point set.
"""

import logging
from functools import cmp_to_key

from yappath.geom import *

logger = logging.getLogger(__name__)


def _compare_candidates(a,b):
    # greater angle first, then greater distance
    if abs(b[1] - a[1]) > fepsilon:
        d = b[1] - a[1]
    else:
        d = b[2] - a[2]
    return -1 if d < 0 else (1 if d > 0 else 0)


def calc_convex_hull(samples):
    """
    Walk the ordered ``samples`` and return the list of hull points.
    The input is copied and not modified.  Empty input returns an
    empty list.
    """
    remaining = [vertex(s) for s in samples]
    if not remaining:
        logger.debug('convex hull requested for an empty sample list')
        return []
    hull = [remaining.pop(0)]
    while len(remaining) > 1:
        last = hull[-1]
        ref = from_angle(wrapped_average([heading(sub(s,last)) for s in remaining],pi2))
        candidates = []
        for i,s in enumerate(remaining):
            diff = sub(s,last)
            candidates.append((i,angle_between(ref,norm(diff)),mag(diff)))
        arg = sorted(candidates,key=cmp_to_key(_compare_candidates))[0][0]
        hull.append(remaining[arg])
        del remaining[:arg+1]
    if remaining:
        hull.append(remaining.pop(0))
    return hull
