import math

from points_api.services.point_gen.point import GridPoint, Point, get_distance, image_to_grid


def test_empty_point_is_invalid():
    p = Point.empty()
    assert p.valid is False
    assert Point(0.2, 0.3).valid is True


def test_rectangle_membership_is_inclusive():
    assert Point(0.0, 0.0).is_in_rectangle()
    assert Point(1.0, 1.0).is_in_rectangle()
    assert not Point(-0.01, 0.5).is_in_rectangle()
    assert not Point(0.5, 1.01).is_in_rectangle()


def test_circle_membership():
    assert Point(0.5, 0.5).is_in_circle()
    # boundary points of the inscribed disk are inside
    assert Point(1.0, 0.5).is_in_circle()
    assert Point(0.5, 0.0).is_in_circle()
    # corners of the square are not
    assert not Point(0.0, 0.0).is_in_circle()
    assert not Point(0.95, 0.95).is_in_circle()


def test_get_distance():
    assert math.isclose(get_distance(Point(0.0, 0.0), Point(0.3, 0.4)), 0.5)
    assert math.isclose(get_distance(Point(0.1, 0.1), Point(0.2, 0.2)), math.sqrt(0.02))


def test_image_to_grid_truncates():
    assert image_to_grid(Point(0.55, 0.05), 0.1) == GridPoint(5, 0)
    assert image_to_grid(Point(0.999, 0.25), 0.25) == GridPoint(3, 1)
    # truncation toward zero, not floor
    assert image_to_grid(Point(-0.05, 0.0), 0.1) == GridPoint(0, 0)
