import pygame

from data.vision_stats import VISION_STATS
from stealth.geometry import signed_angle

ANGLE_EPSILON = VISION_STATS["angle_epsilon"]


class Endpoint:
    """One end of a boundary segment, as an event of the angular sweep.

    ``angle`` is measured counter-clockwise from the camera's right boundary,
    in [0, 360). ``is_begin`` marks the end a counter-clockwise sweep reaches
    first. Events order by angle, and at equal angles a begin event comes
    before an end event.
    """

    def __init__(self, vertex, angle, segment, is_begin=False):
        self.vertex = pygame.Vector2(vertex)
        self.angle = angle
        self.segment = segment
        self.is_begin = is_begin

    def sort_key(self):
        return (self.angle, not self.is_begin)

    def __lt__(self, other):
        return self.sort_key() < other.sort_key()

    def __eq__(self, other):
        if not isinstance(other, Endpoint):
            return NotImplemented
        return (self.vertex == other.vertex
                and self.is_begin == other.is_begin
                and self.angle == other.angle
                and self.segment is other.segment)

    __hash__ = None

    def __repr__(self):
        role = "begin" if self.is_begin else "end"
        return (f"Endpoint({role} {tuple(self.vertex)} "
                f"@ {self.angle:.4f} deg, {self.segment!r})")


def counter_clockwise_angle(viewpoint, reference, vertex, epsilon=ANGLE_EPSILON):
    """Angle from the ``reference`` line's direction to ``vertex``, seen from
    ``viewpoint``, in [0, 360).

    Angles just below zero are rounding noise at the start of the cone and
    count as exactly zero.
    """
    angle = signed_angle(reference.direction, pygame.Vector2(vertex) - viewpoint)
    if -epsilon < angle < 0:
        angle = 0.0
    return angle if angle >= 0 else angle + 360.0


def is_edge_on(segment, viewpoint, epsilon=ANGLE_EPSILON):
    """True when ``segment`` lies along a ray from ``viewpoint``.

    Such a segment covers no angle of the sweep; the segments sharing its
    endpoints supply the events there.
    """
    viewpoint = pygame.Vector2(viewpoint)
    return abs(signed_angle(segment.point1 - viewpoint, segment.point2 - viewpoint)) < epsilon


def create_endpoints(polygon, viewpoint, right_boundary, epsilon=ANGLE_EPSILON):
    """Build and sort the begin/end events for every segment of ``polygon``
    that is not edge-on to the viewpoint."""
    viewpoint = pygame.Vector2(viewpoint)
    endpoints = []

    for segment in polygon.segments:
        if is_edge_on(segment, viewpoint, epsilon):
            continue

        first = Endpoint(
            segment.point1,
            counter_clockwise_angle(viewpoint, right_boundary, segment.point1, epsilon),
            segment,
        )
        second = Endpoint(
            segment.point2,
            counter_clockwise_angle(viewpoint, right_boundary, segment.point2, epsilon),
            segment,
        )

        # Follow the segment in the direction of the sweep, whatever order
        # its vertices were authored in.
        sweep = signed_angle(segment.point1 - viewpoint, segment.point2 - viewpoint)
        first.is_begin = sweep > 0
        second.is_begin = not first.is_begin

        endpoints.append(first)
        endpoints.append(second)

    # list.sort is stable, so equal events keep segment order.
    endpoints.sort()
    return endpoints


def filter_to_cone(endpoints, field_of_view, epsilon=ANGLE_EPSILON):
    """Drop the events that lie outside the vision cone."""
    limit = field_of_view + epsilon
    return [e for e in endpoints if e.angle <= limit]
