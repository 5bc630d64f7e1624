import math
import logging

import numpy as np
import pytest

from points_api.services.point_gen.poisson import (
    SamplingError,
    default_min_dist,
    generate_poisson_points,
    generate_random_point_around,
    pop_random,
)
from points_api.services.point_gen.point import Point
from points_api.services.point_gen.prng import DefaultPRNG


class FixedPRNG:
    """Replays fixed floats and integers, recording ``random_int`` calls."""

    def __init__(self, floats=(0.0,), ints=(0,)):
        self.floats = list(floats)
        self.ints = list(ints)
        self.int_calls = []
        self._f = 0
        self._i = 0

    def random_float(self):
        value = self.floats[self._f % len(self.floats)]
        self._f += 1
        return value

    def random_int(self, max_value):
        self.int_calls.append(max_value)
        value = self.ints[self._i % len(self.ints)]
        self._i += 1
        return min(value, max_value)


def _min_pairwise_distance(points):
    arr = np.array([[p.x, p.y] for p in points])
    diff = arr[:, None, :] - arr[None, :, :]
    dists = np.sqrt((diff ** 2).sum(axis=-1))
    np.fill_diagonal(dists, np.inf)
    return dists.min()


def test_default_min_dist():
    assert default_min_dist(100) == 0.1
    assert math.isclose(default_min_dist(20000), math.sqrt(20000) / 20000)


def test_pop_random_removes_chosen_index():
    points = [Point(0.1, 0.1), Point(0.2, 0.2), Point(0.3, 0.3)]
    prng = FixedPRNG(ints=[1])
    popped = pop_random(points, prng)
    assert popped == Point(0.2, 0.2)
    assert points == [Point(0.1, 0.1), Point(0.3, 0.3)]
    assert prng.int_calls == [2]


def test_random_point_around_stays_in_annulus():
    prng = FixedPRNG(floats=[0.0, 0.0])
    p = generate_random_point_around(Point(0.5, 0.5), 0.1, prng)
    assert math.isclose(p.x, 0.6)
    assert math.isclose(p.y, 0.5)
    assert p.valid

    prng = DefaultPRNG(seed=7)
    centre = Point(0.5, 0.5)
    for _ in range(200):
        child = generate_random_point_around(centre, 0.05, prng)
        d = math.hypot(child.x - centre.x, child.y - centre.y)
        assert 0.05 - 1e-12 <= d < 0.1 + 1e-12


@pytest.mark.parametrize("fill_circle", [True, False])
def test_min_distance_respected(fill_circle):
    points = generate_poisson_points(400, DefaultPRNG(seed=11), fill_circle=fill_circle)
    assert len(points) > 1
    assert _min_pairwise_distance(points) >= default_min_dist(400) - 1e-9


def test_explicit_min_distance_respected():
    points = generate_poisson_points(300, DefaultPRNG(seed=5), min_dist=0.04)
    assert _min_pairwise_distance(points) >= 0.04 - 1e-9


def test_circle_fill_stays_in_disk():
    points = generate_poisson_points(500, DefaultPRNG(seed=3), fill_circle=True)
    assert all(p.is_in_circle() for p in points)
    assert all(p.valid for p in points)


def test_square_fill_stays_in_square():
    points = generate_poisson_points(500, DefaultPRNG(seed=3), fill_circle=False)
    assert all(0.0 <= p.x <= 1.0 and 0.0 <= p.y <= 1.0 for p in points)


def test_count_bounded_by_last_expansion():
    k = 30
    points = generate_poisson_points(100, DefaultPRNG(seed=21), new_points_per_sample=k, fill_circle=False)
    assert len(points) <= 100 + k - 1


def test_single_point_request():
    points = generate_poisson_points(1, DefaultPRNG(seed=9))
    assert len(points) == 1
    assert points[0].is_in_circle()


def test_active_list_exhaustion_terminates():
    # no two points of the unit square are 2 apart
    points = generate_poisson_points(50, DefaultPRNG(seed=4), fill_circle=False, min_dist=2.0)
    assert len(points) == 1

    points = generate_poisson_points(50, DefaultPRNG(seed=4), fill_circle=False, min_dist=0.9)
    assert 1 <= len(points) <= 4
    if len(points) > 1:
        assert _min_pairwise_distance(points) >= 0.9 - 1e-9


def test_same_seed_same_points():
    a = generate_poisson_points(300, DefaultPRNG(seed=42))
    b = generate_poisson_points(300, DefaultPRNG(seed=42))
    assert a == b
    c = generate_poisson_points(300, DefaultPRNG(seed=43))
    assert a != c


def test_first_point_drawn_from_prng():
    # x=0.5, y=0.5 accepted immediately, then every child falls out of the disk
    prng = FixedPRNG(floats=[0.5, 0.5, 0.99, 0.0], ints=[0])
    points = generate_poisson_points(5, prng, new_points_per_sample=3, min_dist=0.4)
    assert points[0] == Point(0.5, 0.5)
    assert len(points) == 1


def test_draw_sequence_gives_known_points():
    # first point (x, y), then radius and angle draws for each candidate
    floats = [0.5, 0.5, 0.5, 0.0, 0.5, 0.25, 0.5, 0.5, 0.5, 0.75]
    prng = FixedPRNG(floats=floats, ints=[0])
    points = generate_poisson_points(
        5, prng, new_points_per_sample=4, fill_circle=False, min_dist=0.2
    )

    expected = [(0.5, 0.5), (0.8, 0.5), (0.5, 0.8), (0.2, 0.5), (0.5, 0.2)]
    assert [(p.x, p.y) for p in points] == [pytest.approx(xy) for xy in expected]
    assert prng.int_calls == [0]
    assert prng._f == len(floats)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"num_points": 0},
        {"num_points": -3},
        {"num_points": 10, "min_dist": 0.0},
        {"num_points": 10, "min_dist": float("nan")},
        {"num_points": 10, "min_dist": float("inf")},
        {"num_points": 10, "min_dist": 1e-6},
        {"num_points": 10, "new_points_per_sample": 0},
    ],
)
def test_invalid_configuration_rejected(kwargs):
    with pytest.raises(ValueError):
        generate_poisson_points(prng=DefaultPRNG(seed=1), **kwargs)


def test_unreachable_shape_fails_loudly():
    # (0, 0) is never inside the inscribed disk
    prng = FixedPRNG(floats=[0.0])
    with pytest.raises(SamplingError):
        generate_poisson_points(10, prng, fill_circle=True, max_seed_attempts=10)


def test_progress_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="points_api.services.point_gen.poisson"):
        generate_poisson_points(250, DefaultPRNG(seed=8), fill_circle=False)
    assert "min_dist" in caplog.text
    assert "generated" in caplog.text
