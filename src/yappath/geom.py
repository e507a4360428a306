## foundational vector and scalar library for yappath
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

"""foundational vector, scalar, and sequence operations for **yappath**

====================
OVERVIEW
====================

The ``yappath.geom`` module provides the pure functions that the path
engine is built on: scalar helpers (clamping, wrapping, mapping),
three-dimensional vector algebra over homogeneous points, a handful
of sequence helpers (circular indexing, cumulative sums, interpolated
indexing), and bounding boxes.

points
======

Points are Python lists of four numbers, ``[x, y, z, w]``, with
``w == 1`` for ordinary coordinates.  All vector operations in this
module ignore ``w`` and return points in the ``w == 1`` hyperplane.
Points are values: every operation returns a fresh list and never
modifies its arguments.

The ``vertex()`` function is the single entry point for turning
caller-supplied data into a point.  It accepts exactly two forms:

- a structured point ``[x, y, z, w]`` with ``w > 0``, as produced by
  ``point()``, which is homogenized;
- a flat coordinate list or tuple of two or three numbers, with a
  missing ``z`` set to zero.

Anything else raises ``ValueError``.

tolerances
==========

``epsilon`` (5E-6) is the empirically chosen tolerance used for
geometric closeness tests such as ``close()`` and ``vclose()``.
``fepsilon`` is machine epsilon for doubles, and is used by the path
predicates that must distinguish exact degeneracies (duplicate
vertices, colinear runs, snapped indices).

bounding boxes
==============

A bounding box is a pair of points spanning the "lower bottom left"
to the "upper top right" of a figure, *e.g.* ``[[xmin,ymin,zmin,1],
[xmax,ymax,zmax,1]]``.

"""

from math import *
import sys

import numpy as np

## constants
epsilon=0.000005
fepsilon=sys.float_info.epsilon
pi2 = 2.0*pi

## operations on scalars
## -----------------------

## utility function to determine if argument is a "real" python
## number, since booleans are considered ints (True=1 and False=0 for
## integer arithmetic) but 1 and 0 are not considered boolean

def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n,bool)) and isinstance(n,(int,float))

def close(a,b):
    """ are two scalars the same within epsilon
    """
    return abs(a-b) < epsilon

def clamp(a,lo=0.0,hi=1.0):
    """clamp ``a`` to the interval between ``lo`` and ``hi``, in either order"""
    if hi < lo:
        lo,hi = hi,lo
    return max(min(a,hi),lo)

def minmax(*a):
    return [min(a),max(a)]

def wrap(a,r):
    """wrap ``a`` into the half-open interval ``[0, r)``"""
    return (a + ceil(abs(a/r))*r) % r

def safe_divide(a,b):
    """divide ``a`` by ``b``, returning zero when ``b`` is smaller than
    machine epsilon"""
    if b < fepsilon:
        return 0.0
    return a/b

def map_value(n,start1,stop1=1.0,start2=0.0,stop2=1.0,within_bounds=True):
    """
    Linearly map ``n`` from the interval ``[start1, stop1]`` onto
    ``[start2, stop2]``.  If ``within_bounds`` is true the result is
    clamped to the target interval.  A zero-width source interval is
    a caller error and raises ``ValueError``.
    """
    if stop1 == start1:
        raise ValueError('zero-width source interval passed to map_value: {}'.format(start1))
    newval = (n-start1)/(stop1-start1)*(stop2-start2)+start2
    if not within_bounds:
        return newval
    return clamp(newval,*minmax(start2,stop2))

def logistic(a,lo=0.0,hi=1.0):
    """map ``a`` through a smooth cosine falloff that is 0 at or below
    ``lo`` and 1 at or above ``hi``"""
    a = map_value(a,lo,hi,0.0,1.0)
    if a <= 0:
        return 0.0
    if a >= 1:
        return 1.0
    return (1.0-cos(pi*a))/2.0

## wrapped (circular) comparisons.  Values are compared modulo the
## range ``r``, so that, e.g., 0 and 350 are 10 apart in a 360 range.

def _prepare_wrapped_comparison(a,b,r):
    a = wrap(a,r)
    b = wrap(b,r)
    c,d = minmax(a,b)
    q = d - c > r/2
    flip = (a == d) != q
    return (d - r if q else c), (c if q else d), flip

def min_wrapped_diff(a,b,r):
    """minimum signed wrapped difference ``a - b`` in range ``r``"""
    c,d,flip = _prepare_wrapped_comparison(a,b,r)
    return (c-d)*(-1 if flip else 1)

def abs_wrapped_diff(a,b,r):
    """absolute wrapped difference between ``a`` and ``b`` in range ``r``"""
    return abs(min_wrapped_diff(a,b,r))

def wrapped_average(values,r,weights=None):
    """
    Circular mean of ``values`` that live in a range ``r`` (e.g. angles
    in ``[0, 2*pi)``), optionally weighted.  Returns a value in
    ``[0, r)``.  An empty or perfectly balanced input averages to 0.
    """
    if len(values) == 0:
        return 0.0
    vals = np.array([wrap(v,r) for v in values],dtype=float)/r*pi2
    w = np.ones(len(vals)) if weights is None else np.asarray(weights,dtype=float)
    if w.shape != vals.shape:
        raise ValueError('weights passed to wrapped_average must match values')
    ang = atan2(float(np.sum(np.sin(vals)*w)),float(np.sum(np.cos(vals)*w)))
    if isnan(ang):
        ang = 0.0
    return wrap(ang,pi2)/pi2*r


## operations on sequences
## -----------------------

def at(seq,i):
    """circular indexing: return ``seq[i mod len(seq)]``, or ``None`` for
    an empty sequence"""
    l = len(seq)
    if l == 0:
        return None
    return seq[wrap(int(i),l)]

def cumulative_sum(seq):
    """running totals of ``seq``, same length as ``seq``"""
    return [float(x) for x in np.cumsum(np.asarray(seq,dtype=float))]

def index_interpolated(seq,v):
    """
    Given a non-decreasing sequence ``seq``, return the fractional index
    at which ``v`` falls, linearly interpolating between the bracketing
    entries.  The result is clamped to the span of the bracketing pair;
    sequences shorter than two entries return 0.  Repeated entries
    (zero-width brackets) resolve to the lower index of the bracket.
    """
    l = len(seq)
    if l < 2:
        return 0.0
    i = 0
    while i+2 < l and seq[i+1] < v:
        i += 1
    return i + clamp(safe_divide(v-seq[i],seq[i+1]-seq[i]))


## operations on vectors
## ------------------------

def point(x=0.0,y=0.0,z=0.0):
    """make a homogeneous point from scalar coordinates"""
    for c in (x,y,z):
        if not isgoodnum(c):
            raise ValueError('bad coordinate passed to point(): {}'.format(c))
    return [x,y,z,1.0]

def ispoint(x):
    """is ``x`` a structured homogeneous point with ``w > 0``?"""
    return isinstance(x,(list,tuple)) and len(x) == 4 and \
        all(isgoodnum(c) for c in x) and x[3] > 0

def vertex(p):
    """
    Coerce a point-like argument into a fresh homogeneous point.

    Two forms are accepted, and only these two:

    - a structured point ``[x, y, z, w]`` with ``w > 0``; the result is
      homogenized to ``w == 1``;
    - a flat coordinate list or tuple of 2 or 3 numbers; a missing
      ``z`` is zero.

    Non-numeric or non-finite components, booleans, other lengths, and
    ``w <= 0`` raise ``ValueError``.
    """
    if not isinstance(p,(list,tuple)):
        raise ValueError('point-like argument must be a list or tuple, got {!r}'.format(p))
    for c in p:
        if not isgoodnum(c):
            raise ValueError('non-numeric component in point-like argument: {!r}'.format(p))
        if not isfinite(c):
            raise ValueError('non-finite component in point-like argument: {!r}'.format(p))
    if len(p) == 4:
        if p[3] <= 0:
            raise ValueError('structured point must have w > 0: {!r}'.format(p))
        w = p[3]
        return [float(p[0])/w,float(p[1])/w,float(p[2])/w,1.0]
    if len(p) == 3:
        return [float(p[0]),float(p[1]),float(p[2]),1.0]
    if len(p) == 2:
        return [float(p[0]),float(p[1]),0.0,1.0]
    raise ValueError('point-like argument must have 2, 3 or 4 components: {!r}'.format(p))

def coorddim(p):
    """dimensionality of a flat coordinate list, or ``None`` for a
    structured point"""
    if len(p) == 4:
        return None
    return len(p)

def pattern(a,axes):
    """
    Project point ``a`` onto the axes named in ``axes`` (a string such
    as ``'xy'`` or ``'xz'``).  The selected components are packed into
    the leading slots of the result, which is how length metrics are
    applied before measuring distances.
    """
    r = [0.0,0.0,0.0,1.0]
    for i,c in enumerate(axes[:3]):
        r[i] = a['xyz'.index(c.lower())]
    return r

def add(a,b):
    """ 3 vector, `a + b`"""
    return [a[0]+b[0],a[1]+b[1],a[2]+b[2],1.0]

def sub(a,b):
    """ 3 vector, `a - b`"""
    return [a[0]-b[0],a[1]-b[1],a[2]-b[2],1.0]

def scale3(a,c):
    """ 3 vector, vector ''a'' times scalar ``c``, `a * c`"""
    return [a[0]*c,a[1]*c,a[2]*c,1.0]

def cross(a,b):
    """Compute the cross product of a x b, assuming that both
    fall into the w=1 hyperplane
    """
    return [ a[1]*b[2] - a[2]*b[1],
             a[2]*b[0] - a[0]*b[2],
             a[0]*b[1] - a[1]*b[0],
             1.0 ]

def dot(a,b):
    """ 3 vector ``a`` dot ``b`` """
    return a[0]*b[0]+a[1]*b[1]+a[2]*b[2]

def mag(a):
    """ compute the magnitude of 3 vector ``a``"""
    return sqrt(a[0]*a[0]+a[1]*a[1]+a[2]*a[2])

def dist(a,b,axes=None):
    """ compute the euclidean distance between two points ``a`` and
    ``b``, optionally restricted to the axes named in ``axes``"""
    if axes:
        return mag(sub(pattern(a,axes),pattern(b,axes)))
    return mag(sub(a,b))

def norm(a):
    """unit vector in the direction of ``a``; the zero vector stays zero"""
    m = mag(a)
    if m == 0:
        return [a[0],a[1],a[2],1.0]
    return scale3(a,1.0/m)

def setmag(a,m):
    return scale3(norm(a),m)

def flatten(a):
    """copy of ``a`` with the z component dropped"""
    return [a[0],a[1],0.0,1.0]

def lerp(a,b,t):
    """linear interpolation between points ``a`` and ``b``"""
    return [a[0]+(b[0]-a[0])*t,
            a[1]+(b[1]-a[1])*t,
            a[2]+(b[2]-a[2])*t,
            1.0]

def heading(a):
    """planar heading of ``a`` in radians"""
    return atan2(a[1],a[0])

def from_angle(angle,length=1.0):
    return [length*cos(angle),length*sin(angle),0.0,1.0]

def rotate(a,angle):
    """rotate ``a`` about the z axis by ``angle`` radians, keeping z"""
    h = heading(a) + angle
    m = sqrt(a[0]*a[0]+a[1]*a[1])
    return [cos(h)*m,sin(h)*m,a[2],1.0]

def rotate3d(a,axis,angle):
    """rotate ``a`` about the unit vector ``axis`` by ``angle`` radians
    (right-handed, Rodrigues' formula)"""
    c = cos(angle)
    s = sin(angle)
    kxa = cross(axis,a)
    kda = dot(axis,a)
    return [a[i]*c + kxa[i]*s + axis[i]*kda*(1.0-c) for i in range(3)] + [1.0]

def angle_between(a,b):
    """
    Signed angle from ``a`` to ``b`` in radians.  The sign follows the z
    component of ``a x b`` (positive when it is zero).  If either vector
    has zero length the angle is zero.
    """
    ma = mag(a)
    mb = mag(b)
    if ma <= fepsilon or mb <= fepsilon:
        return 0.0
    ang = acos(clamp(dot(a,b)/(ma*mb),-1.0,1.0))
    z = cross(a,b)[2]
    return -ang if z < 0 else ang

def project(a,b,remainder=False):
    """
    Project ``a`` onto the direction of ``b``.  If ``remainder`` is
    true, return the component of ``a`` orthogonal to ``b`` instead.
    """
    u = norm(b)
    j = scale3(u,dot(u,a))
    if remainder:
        return sub(a,j)
    return j

def ortho(a,b=None):
    """
    Unit vector orthogonal to ``a``, and to ``b`` if ``b`` is given and
    is neither zero-length nor parallel to ``a``.  Otherwise a fixed
    fallback direction is crossed with ``a``.
    """
    if b is not None and mag(b) > fepsilon and \
       (1.0 - abs(dot(norm(a),norm(b)))) > fepsilon:
        return norm(cross(a,b))
    z = 1.0
    if a[2] != 0:
        z = (-a[0]-a[1])/a[2]
    return norm(cross(a,[1.0,1.0,z,1.0]))

def slerp(a,b,t):
    """
    Spherical interpolation from ``a`` to ``b`` at parameter ``t``.  The
    direction is rotated about the axis orthogonal to both, and the
    magnitude is interpolated linearly.  Zero-length vectors are
    allowed.
    """
    if mag(a) <= fepsilon:
        c,d,q = b,a,1.0-t
    else:
        c,d,q = a,b,t
    cn = norm(c)
    axis = ortho(cn,d)
    ang = abs(angle_between(norm(d),cn))*q
    m = q*(mag(d)-mag(c))+mag(c)
    return setmag(rotate3d(c,axis,ang),m)

def vclose(a,b):
    """ are two points the same within epsilon"""
    return close(mag(sub(a,b)),0)

def point_key(a,digits=6):
    """hashable key for ``a`` with coordinates rounded to ``digits``
    fractional digits, used to identify coincident points"""
    return tuple(float('{:.{}f}'.format(a[i],digits)) + 0.0 for i in range(3))

def vstr(a):
    """ compact string formatting for points and lists of points
    """
    if ispoint(a):
        if abs(a[2]) > epsilon:
            return "[{}, {}, {}]".format(a[0],a[1],a[2])
        return "[{}, {}]".format(a[0],a[1])
    if isinstance(a,list) and a and all(ispoint(p) for p in a):
        return "[" + ", ".join(vstr(p) for p in a) + "]"
    return str(a)


## bounding boxes
## --------------

def pointsbbox(points):
    """three-dimensional bounding box of a list of points"""
    if not points:
        raise ValueError('cannot compute the bounding box of an empty point list')
    lo = [min(p[i] for p in points) for i in range(3)] + [1.0]
    hi = [max(p[i] for p in points) for i in range(3)] + [1.0]
    return [lo,hi]

def isbbox(b):
    return isinstance(b,(list,tuple)) and len(b) == 2 and \
        ispoint(b[0]) and ispoint(b[1])

def bboxdims(b):
    """extent of bounding box ``b`` along each axis"""
    return sub(b[1],b[0])

def bboxcenter(b):
    return scale3(add(b[0],b[1]),0.5)
