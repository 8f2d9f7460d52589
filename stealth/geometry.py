"""2-D primitives the vision sweep is built on.

Points are ``pygame.Vector2``. Angles are in degrees and counter-clockwise
in the usual maths orientation (+x towards +y); on a y-down screen this
reads as clockwise.
"""

import math

import pygame

from data.vision_stats import VISION_STATS
from stealth.errors import InvalidInputError

POINT_EPSILON = VISION_STATS["point_epsilon"]
PARALLEL_EPSILON = VISION_STATS["parallel_epsilon"]

# Slack on the segment parameter before an intersection counts as a miss.
_SEGMENT_SLACK = 1e-9


def to_point(value):
    """Copy any (x, y) pair into a fresh Vector2, rejecting NaN/inf."""
    point = pygame.Vector2(value)
    if not (math.isfinite(point.x) and math.isfinite(point.y)):
        raise InvalidInputError(f"Non-finite coordinate {tuple(value)!r}")
    return point


def points_equal(a, b, epsilon=POINT_EPSILON):
    return pygame.Vector2(a).distance_squared_to(b) < epsilon * epsilon


def signed_angle(a, b):
    """Angle in degrees from vector a to vector b, in (-180, 180]."""
    a = pygame.Vector2(a)
    return math.degrees(math.atan2(a.cross(b), a.dot(b)))


class Line:
    """Infinite line through point1 and point2, directed point1 -> point2."""

    def __init__(self, point1, point2):
        self.point1 = to_point(point1)
        self.point2 = to_point(point2)
        if self.point1.distance_squared_to(self.point2) == 0:
            raise InvalidInputError("A line needs two distinct points")

    @classmethod
    def from_angle(cls, origin, degrees):
        origin = to_point(origin)
        return cls(origin, origin + pygame.Vector2(1, 0).rotate(degrees))

    @property
    def direction(self):
        return self.point2 - self.point1

    def __repr__(self):
        return f"Line({tuple(self.point1)}, {tuple(self.point2)})"


class LineSegment:
    """A closed segment between point1 and point2.

    Segments compare by identity: two boundary edges with the same
    coordinates are still different segments to the sweep.
    """

    def __init__(self, point1, point2):
        self.point1 = to_point(point1)
        self.point2 = to_point(point2)
        if self.point1.distance_squared_to(self.point2) == 0:
            raise InvalidInputError(
                f"Zero-length segment at {tuple(self.point1)}"
            )

    @property
    def magnitude(self):
        return self.point1.distance_to(self.point2)

    @property
    def midpoint(self):
        return (self.point1 + self.point2) * 0.5

    def is_endpoint(self, point, epsilon=POINT_EPSILON):
        return (points_equal(point, self.point1, epsilon)
                or points_equal(point, self.point2, epsilon))

    def other_endpoint(self, point):
        """The endpoint that is not ``point`` (point must be an endpoint)."""
        if points_equal(point, self.point1):
            return pygame.Vector2(self.point2)
        return pygame.Vector2(self.point1)

    def side_of(self, point, epsilon=POINT_EPSILON):
        """Which side of point1 -> point2 the point is on.

        1 for left, -1 for right, 0 when within ``epsilon`` of the line.
        """
        edge = self.point2 - self.point1
        cross = edge.cross(pygame.Vector2(point) - self.point1)
        if abs(cross) <= epsilon * edge.length():
            return 0
        return 1 if cross > 0 else -1

    def shorten(self, amount):
        """Copy of this segment, ``amount`` of its length trimmed evenly
        off both ends towards the midpoint."""
        if not 0 < amount < 1:
            raise InvalidInputError("amount must lie strictly between 0 and 1")
        offset = (self.point2 - self.point1) * (0.5 * amount)
        return LineSegment(self.point1 + offset, self.point2 - offset)

    def intersect(self, line, parallel_epsilon=PARALLEL_EPSILON):
        """Point where the infinite ``line`` meets this segment, or None.

        A segment lying along the line meets it at the endpoint nearest
        ``line.point1``.
        """
        direction = line.direction
        edge = self.point2 - self.point1
        offset = self.point1 - line.point1

        denom = direction.cross(edge)
        if abs(denom) <= parallel_epsilon * direction.length() * edge.length():
            if abs(offset.cross(direction)) / direction.length() > POINT_EPSILON:
                return None
            return min(
                (pygame.Vector2(self.point1), pygame.Vector2(self.point2)),
                key=line.point1.distance_squared_to,
            )

        u = offset.cross(direction) / denom
        if u < -_SEGMENT_SLACK or u > 1 + _SEGMENT_SLACK:
            return None
        # Clamp so hits at the very ends land exactly on the endpoint.
        u = max(0.0, min(1.0, u))
        return self.point1 + edge * u

    def __repr__(self):
        return f"LineSegment({tuple(self.point1)}, {tuple(self.point2)})"


class PolygonWithHoles:
    """Outer boundary loop plus hole loops.

    ``segments`` lists every boundary edge, outer loop first, then each hole
    in order. Loops are closed implicitly.
    """

    def __init__(self, outside, holes=()):
        self.outside = self._loop(outside, "outer boundary")
        self.holes = [self._loop(hole, f"hole {i}") for i, hole in enumerate(holes)]
        self.segments = list(self._loop_segments(self.outside))
        for hole in self.holes:
            self.segments.extend(self._loop_segments(hole))

    @staticmethod
    def _loop(vertices, name):
        loop = [to_point(v) for v in vertices]
        if len(loop) < 3:
            raise InvalidInputError(
                f"The {name} needs at least 3 vertices, got {len(loop)}"
            )
        for i, vertex in enumerate(loop):
            if points_equal(vertex, loop[(i + 1) % len(loop)]):
                raise InvalidInputError(
                    f"The {name} repeats vertex {tuple(vertex)}"
                )
        return loop

    @staticmethod
    def _loop_segments(loop):
        for i, vertex in enumerate(loop):
            yield LineSegment(vertex, loop[(i + 1) % len(loop)])

    @property
    def vertices(self):
        result = list(self.outside)
        for hole in self.holes:
            result.extend(hole)
        return result

    def __repr__(self):
        return (f"PolygonWithHoles({len(self.outside)} outer vertices, "
                f"{len(self.holes)} holes)")
