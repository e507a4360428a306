## affine matrix transformations for 3D homogeneous points in yappath

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

import yappath.geom as geom

## a matrix is represented as a list of four rows.  Points are
## treated as column vectors, so ``M.mul(p)`` computes Mp and
## ``A.mul(B)`` composes B first, then A.  Transforms are built by
## composition, right to left:
##
##    M = Translation(to).mul(Scale(s)).mul(Translation(frm,inverse=True))
##
## moves a figure so that ``frm`` lands at the origin, scales it, and
## then moves the origin to ``to``.


def _dot4(a,b):
    return a[0]*b[0]+a[1]*b[1]+a[2]*b[2]+a[3]*b[3]


class Matrix:
    """4x4 transformation matrix for homogeneous 3D points"""

    def __init__(self,a=None):
        self.m = [[1,0,0,0],
                  [0,1,0,0],
                  [0,0,1,0],
                  [0,0,0,1]]

        if isinstance(a,Matrix):
            self.m = [list(r) for r in a.m]
        elif isinstance(a,(tuple,list)):
            if len(a) != 4 or any(len(r) != 4 for r in a):
                raise ValueError('matrix must be initialized with four rows of four values: {}'.format(a))
            for i in range(4):
                for j in range(4):
                    x = a[i][j]
                    if not geom.isgoodnum(x):
                        raise ValueError('bad element in matrix initialization: {}'.format(x))
                    self.m[i][j] = x
        elif a is not None:
            raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))

    def __repr__(self):
        return "Matrix({},{},{},{})".format(*self.m)

    def getrow(self,i):
        if i < 0 or i > 3:
            raise ValueError('bad row passed to getrow: {}'.format(i))
        return list(self.m[i])

    def getcol(self,j):
        if j < 0 or j > 3:
            raise ValueError('bad column passed to getcol: {}'.format(j))
        return [self.m[0][j],self.m[1][j],self.m[2][j],self.m[3][j]]

    # matrix multiply.  If x is a matrix, compute MX.  If x is a
    # point, compute Mx and project back to the w=1 hyperplane.
    def mul(self,x):
        if isinstance(x,Matrix):
            return Matrix([[_dot4(self.m[i],x.getcol(j)) for j in range(4)]
                           for i in range(4)])
        if geom.ispoint(x):
            r = [_dot4(self.m[i],x) for i in range(4)]
            return [r[0]/r[3],r[1]/r[3],r[2]/r[3],1.0]
        raise ValueError('bad thing passed to mul(): {}'.format(x))

    def apply(self,points):
        """transform every point in ``points``, returning a new list"""
        return [self.mul(p) for p in points]


def Translation(delta,inverse=False):
    if inverse:
        delta = geom.scale3(delta,-1.0)
    return Matrix([[1,0,0,delta[0]],
                   [0,1,0,delta[1]],
                   [0,0,1,delta[2]],
                   [0,0,0,1]])

def Scale(x,y=None,z=None):
    """axis scaling matrix; a single factor scales uniformly"""
    if not geom.isgoodnum(x):
        raise ValueError('bad scaling values passed to Scale: {}'.format(x))
    if y is None and z is None:
        y = z = x
    elif not (geom.isgoodnum(y) and geom.isgoodnum(z)):
        raise ValueError('bad scaling values passed to Scale: {},{},{}'.format(x,y,z))
    return Matrix([[x,0,0,0],
                   [0,y,0,0],
                   [0,0,z,0],
                   [0,0,0,1.0]])
