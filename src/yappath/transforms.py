## shape-preserving path transformations for yappath

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

"""resampling, smoothing, fitting, and offsetting of paths

``subdivide_path``, ``smooth_path`` and ``fit_path_inside_rect``
replace the vertex set of the ``Path`` they are given and return that
same path.  ``offset_convex_path`` works on a plain list of points and
returns a new list.
"""

import logging
from math import ceil, pi

import numpy as np

from yappath.geom import *
from yappath.path import Path, calc_path_length, remove_duplicate_points
from yappath.hull import calc_convex_hull
from yappath import xform

logger = logging.getLogger(__name__)


def subdivide_path(path,n_segments):
    """resample ``path`` at ``n_segments`` evenly spaced arclength
    offsets"""
    if not isinstance(n_segments,int) or isinstance(n_segments,bool) or n_segments < 1:
        raise ValueError('number of subdivision segments must be a positive integer: {!r}'.format(n_segments))
    denom = n_segments - (0 if path.closed else 1)
    length = path.length
    samples = []
    for i in range(n_segments):
        param = i/denom if denom > 0 else 0.0
        samples.append(path.get_point_at(param*length))
    path.set_vertices(samples)
    return path


def _kernel(radius):
    offs = [0]
    for r in range(1,radius+1):
        offs += [-r,r]
    offs = np.array(offs,dtype=int)
    w = np.array([logistic(1.0 - abs(k/(radius+1))) for k in offs],dtype=float)
    return offs, w


def smooth_path(path,radius,iterations,weights=None):
    """
    Smooth ``path`` ``iterations`` times with a cosine-tapered kernel
    spanning ``radius`` neighbours on each side.  Neighbours are taken
    circularly, for open and closed paths alike.  Optional per-vertex
    ``weights`` scale each neighbour's contribution.
    """
    for name,v in (('radius',radius),('iterations',iterations)):
        if not isinstance(v,int) or isinstance(v,bool) or v < 0:
            raise ValueError('smoothing {} must be a non-negative integer: {!r}'.format(name,v))
    verts = path.vertices
    n = len(verts)
    if weights is not None and len(weights) != n:
        raise ValueError('smoothing weights must match the vertex count: {} != {}'.format(len(weights),n))
    if n == 0 or iterations == 0:
        return path

    offs, kw = _kernel(radius)
    idx = (np.arange(n)[:,None] + offs[None,:]) % n
    w = np.tile(kw,(n,1))
    if weights is not None:
        w = w * np.asarray(weights,dtype=float)[idx]
    wsum = w.sum(axis=1)

    pts = np.array([v[:3] for v in verts],dtype=float)
    for _ in range(iterations):
        acc = np.einsum('ij,ijk->ik',w,pts[idx])
        pts = np.array([[safe_divide(float(acc[i,k]),float(wsum[i])) for k in range(3)]
                        for i in range(n)])
    path.set_vertices([[float(x),float(y),float(z)] for x,y,z in pts])
    return path


def fit_path_inside_rect(path,bbox_from,bbox_to):
    """
    Scale and move ``path`` so that the square spanned by the larger
    side of ``bbox_from`` fits the smaller side of ``bbox_to``, with the
    box centers brought together.  Bounding boxes are in the form
    returned by ``yappath.geom.pointsbbox``.
    """
    if not (isbbox(bbox_from) and isbbox(bbox_to)):
        raise ValueError('bad bounding box passed to fit_path_inside_rect')
    dfrom = bboxdims(bbox_from)
    dto = bboxdims(bbox_to)
    range_from = max(dfrom[0],dfrom[1])
    range_to = min(dto[0],dto[1])
    if range_from < fepsilon:
        logger.debug('fitting a path from a zero-size box collapses it to a point')
    s = safe_divide(range_to,range_from)
    cfrom = flatten(bboxcenter(bbox_from))
    cto = flatten(bboxcenter(bbox_to))
    m = xform.Translation(cto).mul(xform.Scale(s,s,1.0)).mul(
        xform.Translation(cfrom,inverse=True))
    path.set_vertices(m.apply(path.vertices))
    return path


def _space_samples(samples,min_spacing):
    if min_spacing is None:
        return [list(s) for s in samples]
    if min_spacing <= 0:
        raise ValueError('minimum spacing must be positive: {!r}'.format(min_spacing))
    spaced = []
    for i,s in enumerate(samples):
        spaced.append(list(s))
        if i < len(samples)-1:
            nxt = samples[i+1]
            nsub = int(ceil(dist(s,nxt)/min_spacing))
            for k in range(1,nsub):
                spaced.append(lerp(s,nxt,k/nsub))
    return spaced


def _momentums(path,spaced,target,factor,margin):
    n = len(spaced)
    offsets = path.offsets
    length = path.length
    result = []
    for i in range(n):
        mi = spaced[i]
        lomi = rotate(norm(sub(mi,spaced[i-1])),pi/2) if i > 0 else None
        mihi = rotate(norm(sub(spaced[i+1],mi)),pi/2) if i < n-1 else None
        if lomi is None:
            lomi = mihi
        if mihi is None:
            mihi = lomi
        momentum = slerp(slerp(lomi,mihi,0.5),target,factor)
        if margin is not None:
            span = min(margin,length/2)
            if span > fepsilon:
                edge = abs_wrapped_diff(offsets[i],0,length)
                momentum = scale3(momentum,map_value(edge,0,span,0,1))
        result.append(momentum)
    return result


def offset_convex_path(samples,target_direction,target_direction_factor,
                       margin=None,min_spacing=None,offset_amt=None,
                       target_length=None):
    """
    Offset the ordered, convex ``samples`` outward, biased toward
    ``target_direction``, and return the convex hull of the result.

    Each sample moves along a momentum vector: the bisector of the
    normals of its adjacent edges, slerped toward the unit target
    direction by ``target_direction_factor``.  If ``margin`` is given
    the momentum fades to zero within ``margin`` arclength of either
    end.  If ``min_spacing`` is given long edges are subsampled first.

    The displacement is ``offset_amt``, or, when ``target_length`` is
    given instead, an amount estimated to bring the path to that
    length.  With neither the spaced samples are used as they are.
    Fewer than two distinct samples produce one zero vector per
    remaining sample.
    """
    if offset_amt is not None and target_length is not None:
        raise ValueError('offset_amt and target_length are mutually exclusive')
    nodup = remove_duplicate_points([vertex(s) for s in samples])
    if len(nodup) <= 1:
        logger.debug('offsetting %d distinct samples yields zero vectors',len(nodup))
        return [point(0.0,0.0,0.0) for _ in nodup]

    spaced = _space_samples(nodup,min_spacing)
    path = Path(spaced)
    target = norm(vertex(target_direction))
    momentums = _momentums(path,spaced,target,target_direction_factor,margin)

    def displaced(amt):
        return [add(s,scale3(m,amt)) for s,m in zip(spaced,momentums)]

    result = spaced
    if offset_amt is not None:
        result = displaced(offset_amt)
    elif target_length is not None:
        if target_length <= path.length:
            logger.debug('path length %g already reaches target %g',path.length,target_length)
            result = nodup
        else:
            trial = calc_path_length(displaced(1.0))
            result = displaced(safe_divide(target_length**2,trial**2))
    return calc_convex_hull(result)
