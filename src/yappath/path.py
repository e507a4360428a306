## lazily-evaluated parametric polyline paths for yappath

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

"""arclength-parameterized polyline paths for **yappath**

A ``Path`` is an ordered list of vertices, open or closed, that can be
queried by arclength offset: the point, tangent, and normal at any
offset, the nearest location to an arbitrary point, and the signed
distance of points from the path.

Derived quantities (length, per-segment lengths, cumulative offsets,
bounding box) are computed lazily by the pure ``compute_metrics()``
function and cached in a frozen ``PathMetrics`` record stamped with the
path's version.  Every mutation bumps the version, and a cached record
whose version differs is recomputed before it is read, so no query can
observe metrics computed against an earlier vertex set.

"""

import logging
from dataclasses import dataclass, field
from math import floor, ceil, pi
from typing import Any, Optional, Tuple

from yappath.geom import *

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathMetrics:
    """cached derived quantities of a path, valid for one path version"""

    version: int
    length: float
    segment_lengths: Tuple[float, ...]
    offsets: Tuple[float, ...]
    bbox: Optional[list]

    @property
    def n_segments(self) -> int:
        return len(self.segment_lengths)


@dataclass
class CurveLocation:
    """a location on a path, as returned by nearest-point and
    intersection queries"""

    point: list
    segment_index: int
    distance: float = 0.0
    offset: float = 0.0
    path: Any = field(default=None, repr=False, compare=False)
    paired: Any = field(default=None, repr=False, compare=False)


def check_length_metric(metric):
    """validate a length metric string such as ``'xy'``, returning it
    in lower case, or ``None``"""
    if metric is None:
        return None
    if not isinstance(metric,str) or not metric:
        raise ValueError('length metric must be a non-empty string of axis letters: {!r}'.format(metric))
    m = metric.lower()
    if any(c not in 'xyz' for c in m) or len(set(m)) != len(m):
        raise ValueError('length metric must use distinct letters drawn from "xyz": {!r}'.format(metric))
    return m


def _segment_count(n,closed):
    return max(0, n - (0 if closed else 1))


def calc_path_length(samples,closed=False,length_metric=None,return_all=False):
    """
    Length of the polyline through ``samples``, including the closing
    segment if ``closed`` is true.  If ``return_all`` is true, return
    ``(length, segment_lengths)``.
    """
    metric = check_length_metric(length_metric)
    seglens = [dist(samples[i],at(samples,i+1),metric)
               for i in range(_segment_count(len(samples),closed))]
    total = sum(seglens)
    if return_all:
        return total, seglens
    return total


def compute_metrics(vertices,closed=False,length_metric=None,version=0):
    """
    Pure computation of the derived quantities of a path with the given
    ``vertices``, returning a ``PathMetrics`` record stamped with
    ``version``.
    """
    total, seglens = calc_path_length(vertices,closed,length_metric,True)
    offsets = ([0.0] + cumulative_sum(seglens))[:len(vertices)]
    bbox = pointsbbox(vertices) if vertices else None
    return PathMetrics(version=version,
                       length=total,
                       segment_lengths=tuple(seglens),
                       offsets=tuple(offsets),
                       bbox=bbox)


def remove_duplicate_points(samples,closed=False):
    """
    Return a copy of ``samples`` with neighbouring points closer than
    machine epsilon collapsed.  For closed paths a last point that
    duplicates the first is dropped too.
    """
    result = []
    for s in samples:
        if not result or dist(s,result[-1]) > fepsilon:
            result.append(list(s))
    if closed and len(result) >= 2 and dist(result[0],result[-1]) <= fepsilon:
        result.pop()
    return result


def remove_colinear_points(samples,closed=False):
    """
    Return a copy of ``samples`` without the points that lie on a
    straight run between their neighbours.  Endpoints of open paths
    are always kept.  Duplicates should be removed first.
    """
    result = []
    n = len(samples)
    for i,s in enumerate(samples):
        if not closed and (i == 0 or i == n-1):
            result.append(list(s))
            continue
        lo_dir = norm(sub(s,at(samples,i-1)))
        hi_dir = norm(sub(at(samples,i+1),s))
        if abs(dot(lo_dir,hi_dir) - 1.0) > fepsilon:
            result.append(list(s))
    return result


class Path:
    """
    Ordered vertex sequence queried by arclength offset.

    ``Path(vertices=None, closed=False, length_metric=None, use_z=False)``

    ``vertices`` is a list of point-like values (see
    ``yappath.geom.vertex``); they are copied on the way in and on the
    way out.  When ``use_z`` is false the z component is dropped when
    vertices are read.  ``length_metric`` optionally restricts distance
    computations to a subset of axes, *e.g.* ``'xy'``.
    """

    def __repr__(self):
        return 'Path({}, closed={}, length_metric={!r}, use_z={})'.format(
            vstr(self.vertices),self.__closed,self.__length_metric,self.__use_z)

    def __init__(self,vertices=None,closed=False,length_metric=None,use_z=False):
        self.__version = 0
        self.__metrics = None
        self.__vertices_dirty = True
        self.__filtered = []
        self.__original = []
        self.__closed = bool(closed)
        self.__use_z = bool(use_z)
        self.__length_metric = check_length_metric(length_metric)
        if vertices is not None:
            self.set_vertices(vertices)

    def _bump(self,vertices_changed=False):
        self.__version += 1
        if vertices_changed:
            self.__vertices_dirty = True

    @property
    def version(self):
        """monotonic counter, incremented on every mutation"""
        return self.__version

    ## mutable state
    ## -------------

    @property
    def closed(self):
        return self.__closed

    @closed.setter
    def closed(self,value):
        self.__closed = bool(value)
        self._bump()

    @property
    def use_z(self):
        return self.__use_z

    @use_z.setter
    def use_z(self,value):
        self.__use_z = bool(value)
        self._bump(vertices_changed=True)

    @property
    def length_metric(self):
        return self.__length_metric

    @length_metric.setter
    def length_metric(self,value):
        self.__length_metric = check_length_metric(value)
        self._bump()

    def set_vertices(self,vertices):
        """replace the vertex set with copies of ``vertices``"""
        vertices = list(vertices)
        verts = [vertex(v) for v in vertices]
        dims = set(coorddim(v) for v in vertices) - {None}
        if len(dims) > 1:
            raise ValueError('mismatched dimensionality in path vertices: {}'.format(sorted(dims)))
        self.__original = verts
        self._bump(vertices_changed=True)

    @property
    def vertices(self):
        """copy of the vertex list, with z dropped unless ``use_z``"""
        return [list(v) for v in self._verts()]

    @vertices.setter
    def vertices(self,vertices):
        self.set_vertices(vertices)

    def _verts(self):
        if self.__vertices_dirty:
            self.__vertices_dirty = False
            if self.__use_z:
                self.__filtered = [list(v) for v in self.__original]
            else:
                self.__filtered = [flatten(v) for v in self.__original]
        return self.__filtered

    def clear_vertices(self):
        """remove all vertices, keeping the closed flag"""
        self.set_vertices([])

    def copy(self):
        """independent clone of this path with the same flags"""
        p = Path(closed=self.__closed,length_metric=self.__length_metric,
                 use_z=self.__use_z)
        p.set_vertices(self.__original)
        return p

    ## cached metrics
    ## --------------

    def metrics(self):
        """the ``PathMetrics`` for the current version of this path"""
        m = self.__metrics
        if m is None or m.version != self.__version:
            m = compute_metrics(self._verts(),self.__closed,
                                self.__length_metric,self.__version)
            self.__metrics = m
        return m

    @property
    def length(self):
        return self.metrics().length

    @property
    def segment_lengths(self):
        return list(self.metrics().segment_lengths)

    @property
    def offsets(self):
        """arclength offset of each vertex"""
        return list(self.metrics().offsets)

    @property
    def times(self):
        """vertex offsets normalized to [0, 1]"""
        m = self.metrics()
        return [safe_divide(o,m.length) for o in m.offsets]

    @property
    def bbox(self):
        bbox = self.metrics().bbox
        return [list(p) for p in bbox] if bbox else None

    @property
    def n_segments(self):
        return _segment_count(len(self._verts()),self.__closed)

    @property
    def line_segments(self):
        verts = self._verts()
        return [[list(verts[i]),list(at(verts,i+1))] for i in range(self.n_segments)]

    @property
    def tangents(self):
        return [self.get_tangent_at(o) for o in self.metrics().offsets]

    @property
    def normals(self):
        return [self.get_normal_at(o) for o in self.metrics().offsets]

    ## arclength queries
    ## -----------------

    def _index_at(self,offset):
        """fractional segment index of arclength ``offset``"""
        m = self.metrics()
        nseg = m.n_segments
        table = [0.0] + cumulative_sum(m.segment_lengths)
        ii = clamp(index_interpolated(table,clamp(offset,0.0,m.length)),0,nseg)
        if self.__closed and nseg > 0:
            ii = ii % nseg
        return ii

    def get_point_at(self,offset):
        """point at arclength ``offset``, clamped to the path"""
        verts = self._verts()
        if not verts:
            logger.debug('point requested from an empty path')
            return point(0.0,0.0,0.0)
        if len(verts) == 1:
            return list(verts[0])
        ii = self._index_at(offset)
        lo = floor(ii)
        hi = ceil(ii)
        return lerp(at(verts,lo),at(verts,hi),ii-lo)

    def _next_unique_vertex(self,ii,direction,key):
        verts = self._verts()
        n = len(verts)
        last = ii
        for _ in range(self.n_segments+1):
            if last == round(last):
                index = int(round(last)) + direction
            else:
                index = ceil(last) if direction >= 0 else floor(last)
            if self.__closed:
                index = index % n
            else:
                index = int(clamp(index,0,n-1))
            if index == last:
                return None
            if point_key(verts[index]) != key:
                return verts[index]
            last = index
        return None

    def get_tangent_at(self,offset,confine_to_plane=True,return_ortho=False):
        """
        Unit tangent at arclength ``offset``.  At a vertex the tangent
        bisects the incoming and outgoing directions, found by skipping
        over coincident neighbours.  With ``confine_to_plane`` the
        directions are measured in the XY plane.  With ``return_ortho``
        a ``(tangent, ortho)`` pair is returned, where ``ortho`` is a
        unit vector orthogonal to both directions.
        """
        zero = point(0.0,0.0,0.0)
        if not self._verts():
            return (zero,zero) if return_ortho else zero
        ii = self._index_at(offset)
        if abs(ii - round(ii)) < fepsilon:
            ii = round(ii)
        mi = self.get_point_at(offset)
        key = point_key(mi)

        lo = self._next_unique_vertex(ii,-1,key)
        hi = self._next_unique_vertex(ii,1,key)
        if lo is None and hi is None:
            return (zero,zero) if return_ortho else zero

        def direction(a,b):
            if confine_to_plane:
                return norm(sub(flatten(b),flatten(a)))
            return norm(sub(b,a))

        lo_dir = direction(lo,mi) if lo is not None else None
        hi_dir = direction(mi,hi) if hi is not None else None
        if lo_dir is not None and hi_dir is not None:
            tangent = norm(slerp(lo_dir,hi_dir,0.5))
        else:
            tangent = norm(lo_dir if lo_dir is not None else hi_dir)

        if return_ortho:
            a = lo_dir if lo_dir is not None else hi_dir
            b = hi_dir if lo_dir is not None else None
            return tangent, ortho(a,b)
        return tangent

    def get_normal_at(self,offset,confine_to_plane=True):
        """
        Unit normal at arclength ``offset``.  Planar paths rotate the
        tangent by -90 degrees.  Paths that use z cross the planar
        tangent with +z, or, when not confined to the plane, take the
        vector orthogonal to the tangent and its ortho vector.
        """
        if not self.__use_z:
            return rotate(self.get_tangent_at(offset),-pi/2)
        if confine_to_plane:
            return cross(norm(flatten(self.get_tangent_at(offset))),[0.0,0.0,1.0,1.0])
        tangent, orth = self.get_tangent_at(offset,False,True)
        return ortho(tangent,orth)

    def get_nearest_location(self,p):
        """nearest ``CurveLocation`` on this path to point-like ``p``,
        or ``None`` if the path has no segments"""
        from yappath.query import nearest_location_on_path
        return nearest_location_on_path(self,p)

    def calc_signed_distance(self,points):
        """
        Distance from each of ``points`` to the path, positive on the
        side the path normal points to and negative on the other.
        Entries are ``None`` when the path has no segments.
        """
        result = []
        for p in points:
            p = vertex(p)
            loc = self.get_nearest_location(p)
            if loc is None:
                result.append(None)
                continue
            normal = self.get_normal_at(loc.offset)
            sign = 1.0 if dot(norm(sub(p,loc.point)),normal) >= 0 else -1.0
            result.append(loc.distance*sign)
        return result

    def reduce(self):
        """remove duplicate then colinear vertices, repeating until no
        vertex is removed; returns the path"""
        closed = self.__closed
        verts = self._verts()
        while True:
            reduced = remove_colinear_points(
                remove_duplicate_points(verts,closed),closed)
            if len(reduced) == len(verts):
                break
            verts = reduced
        self.set_vertices(reduced)
        return self
