## segment and path intersection for yappath

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

"""planar segment intersection tests, and intersection counting and
extraction over sets of paths

All tests here work in the XY plane.  The orientation predicate is
evaluated with ``mpmath`` at a working precision sized from the binary
exponents of the coordinates, wide enough that no intermediate result
is rounded.  The sign of the orientation determinant is therefore exact
for any finite double inputs, and touching or colinear configurations
are classified consistently.
"""

import logging
from enum import IntEnum
from math import frexp

import mpmath as mpm

from yappath.geom import *
from yappath.path import CurveLocation

logger = logging.getLogger(__name__)


class Orientation(IntEnum):
    COLINEAR = 0
    CLOCKWISE = 1
    COUNTERCLOCKWISE = 2


## smallest binary exponent of a nonzero double: subnormals bottom
## out at 2**-1074
MIN_EXPONENT = -1074


def _diff_exponents(a,b):
    """``(lo, hi)`` such that ``a - b`` is an exact multiple of ``2**lo``
    smaller than ``2**hi`` in magnitude"""
    exps = [frexp(float(x))[1] for x in (a,b) if x != 0]
    if not exps:
        return 0, 0
    lo = min(max(e - 53, MIN_EXPONENT) for e in exps)
    return lo, max(exps) + 1

def orientation_prec(p,q,r):
    """
    Working precision, in bits, at which the orientation determinant of
    ``p``, ``q``, ``r`` is evaluated without rounding.  Coordinates with
    widely different exponents (*e.g.* ``1e200`` against ``1e-200``)
    need far more than the 106 bits of a product of two doubles.
    """
    d1 = _diff_exponents(q[1],p[1])
    d2 = _diff_exponents(r[0],q[0])
    d3 = _diff_exponents(q[0],p[0])
    d4 = _diff_exponents(r[1],q[1])
    lo = min(d1[0]+d2[0], d3[0]+d4[0])
    hi = max(d1[1]+d2[1], d3[1]+d4[1]) + 1
    return max(hi - lo, 53)

def triplet_orientation(p,q,r):
    """orientation of the ordered triplet ``p``, ``q``, ``r``"""
    with mpm.workprec(orientation_prec(p,q,r)):
        px, py = mpm.mpf(p[0]), mpm.mpf(p[1])
        qx, qy = mpm.mpf(q[0]), mpm.mpf(q[1])
        rx, ry = mpm.mpf(r[0]), mpm.mpf(r[1])
        val = (qy - py)*(rx - qx) - (qx - px)*(ry - qy)
    if val == 0:
        return Orientation.COLINEAR
    return Orientation.CLOCKWISE if val > 0 else Orientation.COUNTERCLOCKWISE

def point_on_segment(p,q,r):
    """for colinear ``p``, ``q``, ``r``: does ``q`` lie on segment ``pr``?"""
    return min(p[0],r[0]) <= q[0] <= max(p[0],r[0]) and \
        min(p[1],r[1]) <= q[1] <= max(p[1],r[1])

def segments_intersect(p1,q1,p2,q2):
    """
    Classify the intersection of segments ``p1q1`` and ``p2q2``:

    -  ``1``: the segments cross at a point interior to both
    -  ``0``: an endpoint of one lies on the other (touching, shared
       endpoints, colinear overlap)
    - ``-1``: they do not intersect
    """
    o1 = triplet_orientation(p1,q1,p2)
    o2 = triplet_orientation(p1,q1,q2)
    o3 = triplet_orientation(p2,q2,p1)
    o4 = triplet_orientation(p2,q2,q1)

    if o1 != o2 and o3 != o4 and Orientation.COLINEAR not in (o1,o2,o3,o4):
        return 1

    if (o1 == Orientation.COLINEAR and point_on_segment(p1,p2,q1)) or \
       (o2 == Orientation.COLINEAR and point_on_segment(p1,q2,q1)) or \
       (o3 == Orientation.COLINEAR and point_on_segment(p2,p1,q2)) or \
       (o4 == Orientation.COLINEAR and point_on_segment(p2,q1,q2)):
        return 0

    return -1

def get_segments_intersection(a,b,p,q):
    """
    Intersection point of segments ``ab`` and ``pq``, or ``None`` if
    either segment has zero length, the lines are exactly parallel, or
    the crossing lies outside either segment.  The z coordinate is
    interpolated along ``ab``.
    """
    if (a[0] == b[0] and a[1] == b[1]) or (p[0] == q[0] and p[1] == q[1]):
        return None
    denom = (q[1]-p[1])*(b[0]-a[0]) - (q[0]-p[0])*(b[1]-a[1])
    if denom == 0:
        return None
    ua = ((q[0]-p[0])*(a[1]-p[1]) - (q[1]-p[1])*(a[0]-p[0])) / denom
    ub = ((b[0]-a[0])*(a[1]-p[1]) - (b[1]-a[1])*(a[0]-p[0])) / denom
    if ua < 0 or ua > 1 or ub < 0 or ub > 1:
        return None
    return lerp(a,b,ua)


## path-level operations.  Each path is tested against itself, skipping
## pairs of segments that are identical or neighbours (circularly),
## and against every other path.  Pairs are visited in both orders.

def _segment_pairs(paths):
    for pa in paths:
        sa = pa.line_segments
        n = len(sa)
        for i,s0 in enumerate(sa):
            for j,s1 in enumerate(sa):
                if abs_wrapped_diff(i,j,n) > 1:
                    yield pa,pa,i,j,s0,s1
        for pb in paths:
            if pb is pa:
                continue
            sb = pb.line_segments
            for i,s0 in enumerate(sa):
                for j,s1 in enumerate(sb):
                    yield pa,pb,i,j,s0,s1

def count_path_intersections(paths):
    """
    Number of intersections among ``paths``, counting
    self-intersections and touching contacts.  Meant for closed paths.
    """
    count = 0
    for _,_,_,_,s0,s1 in _segment_pairs(paths):
        if segments_intersect(s0[0],s0[1],s1[0],s1[1]) >= 0:
            count += 1
    return count // 2

def get_paths_intersections(paths):
    """
    List of intersections among ``paths``, in discovery order.  Each
    intersection is a pair of ``CurveLocation`` instances, one for each
    contributing path, referring to each other through ``paired``.
    Intersections are identified by their coordinates rounded to six
    fractional digits; the first discovery of a point wins.
    """
    found = {}
    for pa,pb,i,j,s0,s1 in _segment_pairs(paths):
        x = get_segments_intersection(s0[0],s0[1],s1[0],s1[1])
        if x is None:
            continue
        key = point_key(x)
        if key in found:
            continue
        la = CurveLocation(point=list(x),segment_index=i,
                           offset=pa.offsets[i] + dist(x,s0[0]),path=pa)
        lb = CurveLocation(point=list(x),segment_index=j,
                           offset=pb.offsets[j] + dist(x,s1[0]),path=pb)
        la.paired = lb
        lb.paired = la
        found[key] = (la,lb)
    logger.debug('found %d intersections among %d paths',len(found),len(paths))
    return list(found.values())
