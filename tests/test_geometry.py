import math

import pygame
import pytest

from stealth.errors import InvalidInputError
from stealth.geometry import (
    Line,
    LineSegment,
    PolygonWithHoles,
    points_equal,
    signed_angle,
    to_point,
)


def test_to_point_rejects_non_finite():
    assert to_point((1, 2)) == pygame.Vector2(1, 2)
    with pytest.raises(InvalidInputError):
        to_point((math.nan, 0))
    with pytest.raises(InvalidInputError):
        to_point((0, math.inf))


def test_points_equal_uses_epsilon():
    assert points_equal((0, 0), (0, 5e-6))
    assert not points_equal((0, 0), (0, 1e-3))
    assert points_equal((0, 0), (0, 1e-3), epsilon=1e-2)


def test_signed_angle_is_counter_clockwise_positive():
    assert signed_angle((1, 0), (0, 1)) == pytest.approx(90)
    assert signed_angle((1, 0), (0, -1)) == pytest.approx(-90)
    assert signed_angle((1, 0), (1, 1)) == pytest.approx(45)


def test_line_from_angle():
    line = Line.from_angle((2, 3), 90)
    assert line.point1 == pygame.Vector2(2, 3)
    assert line.direction.x == pytest.approx(0, abs=1e-9)
    assert line.direction.y == pytest.approx(1)


def test_line_needs_distinct_points():
    with pytest.raises(InvalidInputError):
        Line((1, 1), (1, 1))


def test_zero_length_segment_is_rejected():
    with pytest.raises(InvalidInputError):
        LineSegment((3, 4), (3, 4))


def test_segments_compare_by_identity():
    a = LineSegment((0, 0), (1, 0))
    b = LineSegment((0, 0), (1, 0))
    assert a != b
    assert a == a
    assert len({a, b}) == 2


def test_segment_properties():
    seg = LineSegment((0, 0), (3, 4))
    assert seg.magnitude == pytest.approx(5)
    assert seg.midpoint == pygame.Vector2(1.5, 2)
    assert seg.is_endpoint((3, 4))
    assert seg.is_endpoint((3, 4 + 1e-7))
    assert not seg.is_endpoint((1.5, 2))
    assert seg.other_endpoint((0, 0)) == pygame.Vector2(3, 4)
    assert seg.other_endpoint((3, 4)) == pygame.Vector2(0, 0)


def test_side_of():
    seg = LineSegment((0, 0), (10, 0))
    assert seg.side_of((5, 1)) == 1
    assert seg.side_of((5, -1)) == -1
    assert seg.side_of((20, 0)) == 0
    assert seg.side_of((5, 1e-7)) == 0


def test_shorten_trims_both_ends():
    short = LineSegment((0, 0), (10, 0)).shorten(0.1)
    assert short.point1 == pygame.Vector2(0.5, 0)
    assert short.point2 == pygame.Vector2(9.5, 0)
    with pytest.raises(InvalidInputError):
        LineSegment((0, 0), (10, 0)).shorten(1)


def test_intersect_mid_segment():
    seg = LineSegment((5, -5), (5, 5))
    hit = seg.intersect(Line((0, 0), (1, 1)))
    assert hit.x == pytest.approx(5)
    assert hit.y == pytest.approx(5)


def test_intersect_uses_infinite_line():
    seg = LineSegment((-5, -5), (-5, 5))
    hit = seg.intersect(Line((0, 0), (1, 0)))
    assert hit == pygame.Vector2(-5, 0)


def test_intersect_misses_outside_segment():
    seg = LineSegment((5, 1), (5, 5))
    assert seg.intersect(Line((0, 0), (1, 0))) is None


def test_intersect_at_endpoint_lands_on_it():
    seg = LineSegment((4, 0), (7, -2))
    hit = seg.intersect(Line((0, 0), (4, 0)))
    assert hit == pygame.Vector2(4, 0)


def test_intersect_parallel():
    line = Line((0, 0), (1, 0))
    assert LineSegment((0, 1), (5, 1)).intersect(line) is None
    # Collinear: the endpoint nearest the line's origin
    assert LineSegment((6, 0), (3, 0)).intersect(line) == pygame.Vector2(3, 0)


def test_polygon_segments_outer_first():
    poly = PolygonWithHoles(
        [(0, 0), (10, 0), (10, 10), (0, 10)],
        [[(2, 2), (3, 2), (3, 3)]],
    )
    assert len(poly.segments) == 7
    assert poly.segments[0].point1 == pygame.Vector2(0, 0)
    # Loops close back to their first vertex
    assert poly.segments[3].point2 == pygame.Vector2(0, 0)
    assert poly.segments[4].point1 == pygame.Vector2(2, 2)
    assert poly.segments[6].point2 == pygame.Vector2(2, 2)
    assert len(poly.vertices) == 7


def test_polygon_rejects_malformed_loops():
    with pytest.raises(InvalidInputError):
        PolygonWithHoles([(0, 0), (1, 0)])
    with pytest.raises(InvalidInputError):
        PolygonWithHoles([(0, 0), (1, 0), (1, 0), (0, 1)])
    with pytest.raises(InvalidInputError):
        # Closing edge of zero length
        PolygonWithHoles([(0, 0), (1, 0), (0, 1), (0, 0)])
    with pytest.raises(InvalidInputError):
        PolygonWithHoles([(0, 0), (4, 0), (0, 4)], [[(1, 1), (2, 1)]])
