from raytracer.hit import Intersection, hit, intersections
from raytracer.surfaces.sphere import sphere


def test_intersection_encapsulates_t_and_object():
    s = sphere()
    i = Intersection(3.5, s)
    assert i.t == 3.5
    assert i.object is s


def test_aggregating_intersections_sorts_by_t():
    s = sphere()
    xs = intersections(Intersection(2, s), Intersection(1, s))
    assert [x.t for x in xs] == [1, 2]


def test_hit_when_all_intersections_positive():
    s = sphere()
    i1, i2 = Intersection(1, s), Intersection(2, s)
    assert hit(intersections(i2, i1)) is i1


def test_hit_when_some_intersections_negative():
    s = sphere()
    i1, i2 = Intersection(-1, s), Intersection(1, s)
    assert hit([i2, i1]) is i2


def test_hit_when_all_intersections_negative():
    s = sphere()
    assert hit([Intersection(-2, s), Intersection(-1, s)]) is None


def test_hit_ignores_intersection_at_origin():
    s = sphere()
    assert hit([Intersection(0, s)]) is None


def test_hit_is_lowest_nonnegative_intersection():
    s = sphere()
    i1, i2, i3, i4 = Intersection(5, s), Intersection(7, s), Intersection(-3, s), Intersection(2, s)
    assert hit([i1, i2, i3, i4]) is i4


def test_no_intersections_means_no_hit():
    assert hit([]) is None
