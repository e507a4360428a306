import pytest
from yappath.geom import *
from yappath.path import *

"""test functions for the yappath.path module"""

SQUARE = [(0,0),(10,0),(10,10),(0,10)]


class TestPathMetrics:
    """length, offsets and caching"""

    def test_single_segment(self):
        p = Path([(0,0),(3,4)])
        assert p.length == dist(point(0,0),point(3,4))
        assert p.length == 5.0
        assert p.n_segments == 1

    def test_square_closed(self):
        p = Path(SQUARE,closed=True)
        assert p.length == 40
        assert p.n_segments == 4
        assert p.segment_lengths == [10,10,10,10]
        assert p.offsets == [0,10,20,30]
        assert p.offsets[-1] + p.segment_lengths[-1] == p.length
        assert len(p.line_segments) == 4
        assert vclose(p.line_segments[-1][1],point(0,0))

    def test_square_open(self):
        p = Path(SQUARE)
        assert p.length == 30
        assert p.n_segments == 3
        assert p.offsets == [0,10,20,30]
        assert p.times == pytest.approx([0,1/3,2/3,1])

    def test_offsets_nondecreasing(self):
        p = Path([(0,0),(1,0),(1,0),(4,4),(-2,3)],closed=True)
        offs = p.offsets
        assert offs[0] == 0
        assert all(b >= a for a,b in zip(offs,offs[1:]))
        for i in range(len(offs)-1):
            assert close(offs[i+1]-offs[i],p.segment_lengths[i])

    def test_metrics_record(self):
        p = Path(SQUARE,closed=True)
        m = p.metrics()
        assert isinstance(m,PathMetrics)
        assert m.version == p.version
        assert p.metrics() is m
        with pytest.raises(AttributeError):
            m.length = 3
        assert compute_metrics(p.vertices,True).length == m.length

    def test_invalidation(self):
        p = Path(SQUARE)
        m = p.metrics()
        v = p.version
        p.closed = True
        assert p.version == v+1
        assert p.metrics() is not m
        assert p.length == 40
        p.vertices = [(0,0),(1,0)]
        assert p.length == 2
        p.closed = False
        assert p.length == 1
        assert p.bbox == [point(0,0),point(1,0)]
        box = p.bbox
        box[0][0] = -5
        assert p.bbox == [point(0,0),point(1,0)]

    def test_length_metric(self):
        p = Path([(0,0,0),(3,4,12)],use_z=True)
        assert close(p.length,13)
        p.length_metric = 'z'
        assert close(p.length,12)
        p.length_metric = 'XY'
        assert p.length_metric == 'xy'
        assert close(p.length,5)
        p.length_metric = None
        assert close(p.length,13)
        for bad in ('xw','xx','',5):
            with pytest.raises(ValueError):
                Path(SQUARE,length_metric=bad)

    def test_use_z(self):
        p = Path([(0,0,5),(3,4,5)])
        assert p.vertices == [[0,0,0,1],[3,4,0,1]]
        p.use_z = True
        assert p.vertices == [[0,0,5,1],[3,4,5,1]]
        assert vclose(p.bbox[1],point(3,4,5))

    def test_bad_vertices(self):
        with pytest.raises(ValueError):
            Path([(0,0),(1,1,1)])
        with pytest.raises(ValueError):
            Path([(0,0),"xy"])
        Path([point(0,0),(1,1,1)])

    def test_no_aliasing(self):
        verts = [[0,0],[1,0]]
        p = Path(verts)
        verts[0][0] = 5
        assert p.vertices[0][0] == 0
        p.vertices[0][0] = 9
        assert p.vertices[0][0] == 0

    def test_empty_and_single(self):
        p = Path()
        assert p.length == 0
        assert p.offsets == []
        assert p.bbox is None
        assert p.n_segments == 0
        assert p.get_point_at(3) == point(0.0,0.0,0.0)
        assert p.get_nearest_location((1,1)) is None
        assert p.calc_signed_distance([(1,1)]) == [None]
        assert p.tangents == []

        p = Path([(2,3)])
        assert p.length == 0
        assert p.n_segments == 0
        assert p.get_point_at(5) == [2,3,0,1]
        assert p.get_nearest_location((1,1)) is None
        p.closed = True
        assert p.n_segments == 1
        assert p.get_point_at(0) == [2,3,0,1]

    def test_copy_and_clear(self):
        p = Path(SQUARE,closed=True,length_metric='xy')
        q = p.copy()
        assert q.closed and q.length_metric == 'xy'
        q.clear_vertices()
        assert q.closed
        assert q.vertices == []
        assert p.length == 40


class TestPathQueries:
    """point, tangent and normal at arclength offsets"""

    def test_point_at_closed(self):
        p = Path(SQUARE,closed=True)
        assert vclose(p.get_point_at(0),point(0,0))
        assert vclose(p.get_point_at(5),point(5,0))
        assert vclose(p.get_point_at(20),point(10,10))
        assert vclose(p.get_point_at(35),point(0,5))
        assert vclose(p.get_point_at(p.length),point(0,0))
        assert vclose(p.get_point_at(-5),point(0,0))

    def test_point_at_open(self):
        p = Path(SQUARE)
        assert vclose(p.get_point_at(0),p.vertices[0])
        assert vclose(p.get_point_at(p.length),p.vertices[-1])
        assert vclose(p.get_point_at(100),point(0,10))
        assert vclose(p.get_point_at(25),point(5,10))

    def test_tangent(self):
        p = Path(SQUARE,closed=True)
        assert vclose(p.get_tangent_at(5),point(1,0))
        assert vclose(p.get_tangent_at(0),point(sqrt(0.5),-sqrt(0.5)))
        assert vclose(p.get_tangent_at(10),point(sqrt(0.5),sqrt(0.5)))
        q = Path(SQUARE)
        assert vclose(q.get_tangent_at(30),point(-1,0))
        assert vclose(q.get_tangent_at(0),point(1,0))

    def test_tangent_skips_duplicates(self):
        p = Path([(0,0),(0,0),(10,0)])
        assert vclose(p.get_tangent_at(0),point(1,0))
        p = Path([(0,0),(0,0)])
        assert p.get_tangent_at(0) == point(0.0,0.0,0.0)

    def test_normal_2d(self):
        p = Path(SQUARE,closed=True)
        assert vclose(p.get_normal_at(5),point(0,-1))
        assert vclose(p.get_normal_at(0),point(-sqrt(0.5),-sqrt(0.5)))
        assert vclose(p.normals[1],point(sqrt(0.5),-sqrt(0.5)))
        assert len(p.tangents) == 4

    def test_normal_3d(self):
        p = Path([(0,0,0),(10,0,10)],use_z=True)
        assert vclose(p.get_normal_at(5),point(0,-1,0))
        t, o = p.get_tangent_at(5,confine_to_plane=False,return_ortho=True)
        assert vclose(t,point(sqrt(0.5),0,sqrt(0.5)))
        assert close(dot(t,o),0)
        n = p.get_normal_at(5,confine_to_plane=False)
        assert close(mag(n),1)
        assert close(dot(n,t),0)

    def test_signed_distance(self):
        p = Path(SQUARE,closed=True)
        d = p.calc_signed_distance([(5,-3),(5,3)])
        assert d == pytest.approx([3,-3])

    def test_nearest_location(self):
        p = Path(SQUARE,closed=True)
        loc = p.get_nearest_location((5,-3))
        assert isinstance(loc,CurveLocation)
        assert loc.segment_index == 0
        assert close(loc.distance,3)
        assert close(loc.offset,5)
        assert vclose(loc.point,point(5,0))
        assert loc.path is p

    def test_nearest_location_tie(self):
        p = Path(SQUARE,closed=True)
        loc = p.get_nearest_location((12,-2))
        assert loc.segment_index == 0
        assert close(loc.offset,10)
        assert close(loc.distance,sqrt(8))

    @pytest.mark.parametrize("q",[(5,-3),(12,-2),(3,7),(-4,20),(5,5)])
    def test_nearest_not_farther_than_vertices(self,q):
        p = Path(SQUARE,closed=True)
        loc = p.get_nearest_location(q)
        for v in p.vertices:
            assert loc.distance <= dist(vertex(q),v) + epsilon


class TestReduce:
    def test_reduce_open(self):
        p = Path([(0,0),(0,0),(5,0),(10,0),(10,10)])
        p.reduce()
        assert p.vertices == [[0,0,0,1],[10,0,0,1],[10,10,0,1]]
        v = p.version
        p.reduce()
        assert p.version > v
        assert p.vertices == [[0,0,0,1],[10,0,0,1],[10,10,0,1]]

    def test_reduce_closed(self):
        p = Path([(0,0),(5,0),(10,0),(10,10),(0,10),(0,0)],closed=True)
        assert p.reduce() is p
        assert p.vertices == [[0,0,0,1],[10,0,0,1],[10,10,0,1],[0,10,0,1]]
        assert p.length == 40

    def test_reduce_idempotent(self):
        p = Path([(0,0),(1,1),(2,2),(2,2),(3,1),(4,0),(4,0)],closed=True)
        once = p.reduce().vertices
        assert p.reduce().vertices == once

    def test_reduce_idempotent_inexact(self):
        # colinear only up to rounding, so some vertices just miss the
        # colinearity test until their neighbours are gone
        pts = [(0.12697,-0.11132),(0.16929,-0.14843),(0.21161,-0.18554),
               (0.21161,-0.18554),(0.67716,-0.59373),(0.97341,-0.85349),(5,7)]
        for closed in (False,True):
            p = Path(pts,closed=closed)
            once = p.reduce().vertices
            assert p.reduce().vertices == once
        once = Path(pts).reduce().vertices
        assert once[0] == vertex(pts[0])
        assert once[-1] == vertex(pts[-1])
        assert len(once) < len(pts)

    def test_reduce_colinear_runs(self):
        for dx,dy in ((0.1,0.3),(-0.7,0.2),(1/3,-1/7),(0.42311,0.91)):
            x, y = 0.12697, -0.11132
            pts = [(x,y)]
            for step in (0.1,0.3,0.7,1.1,0):
                x, y = x + dx*step, y + dy*step
                pts.append((x,y))
            pts.append((5,7))
            for closed in (False,True):
                p = Path(pts,closed=closed)
                once = p.reduce().vertices
                assert p.reduce().vertices == once


def test_free_functions():
    pts = [point(0,0),point(3,4)]
    assert calc_path_length(pts) == 5
    assert calc_path_length(pts,closed=True) == 10
    assert calc_path_length(pts,True,return_all=True) == (10,[5,5])
    assert calc_path_length([]) == 0
    assert remove_duplicate_points([point(0,0),point(1,0),point(0,0)],closed=True) == \
        [point(0,0),point(1,0)]
    assert remove_colinear_points([point(0,0),point(1,0),point(2,0)]) == \
        [point(0,0),point(2,0)]
    assert remove_colinear_points([point(0,0),point(1,0),point(0,0)]) == \
        [point(0,0),point(1,0),point(0,0)]
