## point-to-segment and point-to-path queries for yappath

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

import logging
from functools import cmp_to_key

from yappath.geom import *
from yappath.path import Path, CurveLocation

logger = logging.getLogger(__name__)


## a segment is given either by its endpoints ``start`` and ``end``,
## or by an ``origin`` point and a ``vector`` from the origin to the
## far end.  A point "falls within" a segment if its projection onto
## the segment's line lies between the endpoints, with a tolerance of
## machine epsilon.

def _within_segment(p,origin,vector):
    return dot(sub(p,origin),vector) >= -fepsilon and \
        dot(sub(p,add(origin,vector)),scale3(vector,-1.0)) >= -fepsilon

def project_point_to_segment(p,origin,vector):
    """
    If the projection of ``p`` falls within the segment from ``origin``
    along ``vector``, return the distance from ``p`` to the segment's
    line, otherwise ``None``.
    """
    if _within_segment(p,origin,vector):
        return mag(project(sub(p,origin),vector,remainder=True))
    return None

def query_point_to_segment(p,start,end):
    """
    Nearest location on the segment from ``start`` to ``end`` to point
    ``p``.  Returns a ``CurveLocation`` with ``segment_index`` 0; the
    caller fills in the index and offset.  If the projection falls
    outside the segment the closer endpoint is used, with ties going to
    ``start``.
    """
    vector = sub(end,start)
    if _within_segment(p,start,vector):
        q = add(project(sub(p,start),vector),start)
        return CurveLocation(point=q,segment_index=0,distance=dist(p,q))
    ds = dist(p,start)
    de = dist(p,end)
    if de < ds:
        return CurveLocation(point=list(end),segment_index=0,distance=de)
    return CurveLocation(point=list(start),segment_index=0,distance=ds)

def nearest_location_on_path(path,p):
    """
    Nearest ``CurveLocation`` on ``path`` to point-like ``p``.  Every
    segment is evaluated; the smallest distance wins, with ties going
    to the lowest segment index.  The arclength offset is measured from
    the start of the winning segment under the path's length metric.
    Returns ``None`` for a path with no segments.
    """
    p = vertex(p)
    nseg = path.n_segments
    if nseg == 0:
        logger.debug('nearest location requested from a path with no segments')
        return None
    verts = path.vertices
    best = None
    for i in range(nseg):
        loc = query_point_to_segment(p,verts[i],at(verts,i+1))
        if best is None or loc.distance < best.distance:
            loc.segment_index = i
            best = loc
    m = path.metrics()
    best.offset = clamp(m.offsets[best.segment_index] +
                        dist(best.point,verts[best.segment_index],path.length_metric),
                        0.0,m.length)
    best.path = path
    return best

def calc_signed_distance(samples,path_points):
    """signed distance of each of ``samples`` from the open path through
    ``path_points``"""
    return Path(path_points).calc_signed_distance(samples)

def order_points_along_path(samples,path_points):
    """
    Return ``samples`` sorted by the arclength offset of their nearest
    location on the open path through ``path_points``.  Samples that
    project to the same offset are ordered by the signed angle between
    their displacement from the path and the reversed planar normal.
    """
    path = Path(path_points)
    keyed = []
    for s in samples:
        s = vertex(s)
        loc = path.get_nearest_location(s)
        if loc is None:
            raise ValueError('cannot order points along a path with fewer than two points')
        n = path.get_normal_at(loc.offset)
        flipped = [-n[0],-n[1],0.0,1.0]
        keyed.append((s,loc.offset,angle_between(sub(s,loc.point),flipped)))

    def compare(a,b):
        d = a[1] - b[1]
        if abs(d) < fepsilon:
            d = a[2] - b[2]
        return -1 if d < 0 else (1 if d > 0 else 0)

    return [k[0] for k in sorted(keyed,key=cmp_to_key(compare))]

def point_in_polygon(p,polygon):
    """
    Even-odd ray casting test for ``p`` inside the polygon whose
    vertices are ``polygon``, in the XY plane.  The result for points
    lying exactly on an edge is not defined.
    """
    x, y = p[0], p[1]
    inside = False
    n = len(polygon)
    j = n - 1
    for i in range(n):
        xi, yi = polygon[i][0], polygon[i][1]
        xj, yj = polygon[j][0], polygon[j][1]
        if (yi > y) != (yj > y) and x < (xj-xi)*(y-yi)/(yj-yi) + xi:
            inside = not inside
        j = i
    return inside
