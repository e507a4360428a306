import pytest
from yappath.geom import *
from yappath.path import Path, calc_path_length
from yappath.hull import calc_convex_hull
from yappath.transforms import *

"""test functions for the yappath.transforms module"""

SQUARE = [(0,0),(10,0),(10,10),(0,10)]
## convex, wound the way the hull walk preserves it
SAMPLES = [point(0,0),point(0,10),point(10,10),point(10,0)]


def assert_points(a,b):
    assert len(a) == len(b)
    for p,q in zip(a,b):
        assert vclose(p,q), '{} != {}'.format(vstr(p),vstr(q))


class TestSubdivide:
    def test_closed(self):
        p = subdivide_path(Path(SQUARE,closed=True),8)
        assert_points(p.vertices,[point(0,0),point(5,0),point(10,0),point(10,5),
                                  point(10,10),point(5,10),point(0,10),point(0,5)])
        assert close(p.length,40)

    def test_open(self):
        p = Path([(0,0),(10,0)])
        assert subdivide_path(p,3) is p
        assert_points(p.vertices,[point(0,0),point(5,0),point(10,0)])

    def test_single(self):
        p = subdivide_path(Path([(0,0),(10,0)]),1)
        assert_points(p.vertices,[point(0,0)])
        p = subdivide_path(Path(SQUARE,closed=True),1)
        assert_points(p.vertices,[point(0,0)])

    def test_bad_count(self):
        for n in (0,-2,1.5,True):
            with pytest.raises(ValueError):
                subdivide_path(Path(SQUARE),n)


class TestSmooth:
    def test_identity(self):
        p = smooth_path(Path(SQUARE,closed=True),0,3)
        assert_points(p.vertices,[vertex(v) for v in SQUARE])
        p = smooth_path(Path(SQUARE,closed=True),2,0)
        assert_points(p.vertices,[vertex(v) for v in SQUARE])

    def test_square(self):
        p = smooth_path(Path(SQUARE,closed=True),1,1)
        assert_points(p.vertices,[point(2.5,2.5),point(7.5,2.5),
                                  point(7.5,7.5),point(2.5,7.5)])

    def test_open_wraps(self):
        p = smooth_path(Path([(0,0),(10,0),(20,0)]),1,1)
        assert vclose(p.vertices[0],point(7.5,0))
        assert vclose(p.vertices[1],point(10,0))

    def test_weights(self):
        p = smooth_path(Path(SQUARE,closed=True),0,1,weights=[1,1,1,0])
        assert vclose(p.vertices[3],point(0,0))
        p = smooth_path(Path(SQUARE,closed=True),1,1,weights=[1,0,1,1])
        assert vclose(p.vertices[0],point(0,10/3))

    def test_bad_arguments(self):
        with pytest.raises(ValueError):
            smooth_path(Path(SQUARE),-1,1)
        with pytest.raises(ValueError):
            smooth_path(Path(SQUARE),1,-1)
        with pytest.raises(ValueError):
            smooth_path(Path(SQUARE),1,1,weights=[1,1])

    def test_empty(self):
        p = smooth_path(Path(),2,2)
        assert p.vertices == []


class TestFit:
    def test_fit(self):
        p = Path(SQUARE,closed=True)
        fit_path_inside_rect(p,p.bbox,[point(100,100),point(120,140)])
        assert_points(p.vertices,[point(100,110),point(120,110),
                                  point(120,130),point(100,130)])

    def test_zero_box(self):
        p = Path(SQUARE)
        fit_path_inside_rect(p,[point(1,1),point(1,1)],[point(0,0),point(2,2)])
        for v in p.vertices:
            assert vclose(v,point(1,1))

    def test_bad_box(self):
        with pytest.raises(ValueError):
            fit_path_inside_rect(Path(SQUARE),[1,2],[point(0,0),point(1,1)])


class TestOffset:
    def test_zero_offset_is_hull(self):
        result = offset_convex_path(SAMPLES,(0,1),0.5,offset_amt=0)
        assert_points(result,calc_convex_hull(SAMPLES))

    def test_neither_amount(self):
        result = offset_convex_path(SAMPLES,(0,1),0.5)
        assert_points(result,calc_convex_hull(SAMPLES))

    def test_exclusive(self):
        with pytest.raises(ValueError):
            offset_convex_path(SAMPLES,(0,1),0,offset_amt=1,target_length=50)

    def test_degenerate(self):
        assert offset_convex_path([],(0,1),0,offset_amt=1) == []
        assert offset_convex_path([point(1,1)],(0,1),0,offset_amt=1) == [point(0.0,0.0,0.0)]
        assert offset_convex_path([point(1,1),point(1,1)],(0,1),0,offset_amt=1) == \
            [point(0.0,0.0,0.0)]

    def test_outward(self):
        result = offset_convex_path(SAMPLES,(0,1),0,offset_amt=1)
        h = sqrt(0.5)
        assert_points(result,[point(-1,0),point(-h,10+h),point(10+h,10+h),point(11,0)])
        assert calc_path_length(result) > calc_path_length(SAMPLES)

    def test_margin(self):
        result = offset_convex_path(SAMPLES,(0,1),0,margin=5,offset_amt=1)
        h = sqrt(0.5)
        assert_points(result,[point(0,0),point(-h,10+h),point(10+h,10+h),point(10,0)])

    def test_min_spacing(self):
        result = offset_convex_path(SAMPLES,(0,1),0,min_spacing=5,offset_amt=0)
        assert_points(result,SAMPLES)
        with pytest.raises(ValueError):
            offset_convex_path(SAMPLES,(0,1),0,min_spacing=0)

    def test_target_length(self):
        result = offset_convex_path(SAMPLES,(0,1),0,target_length=5)
        assert_points(result,calc_convex_hull(SAMPLES))
        result = offset_convex_path(SAMPLES,(0,1),0,target_length=60)
        assert calc_path_length(result) > 30

    def test_target_direction(self):
        # pulling fully toward +y moves every sample straight up
        result = offset_convex_path(SAMPLES,(0,1),1.0,offset_amt=2)
        assert_points(result,[point(0,2),point(0,12),point(10,12),point(10,2)])
