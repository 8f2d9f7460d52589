from data.vision_stats import VISION_STATS
from stealth.errors import GeometryError
from stealth.geometry import POINT_EPSILON


def _side_of_all(segment, points, epsilon):
    """Common side of ``segment`` that all points are on.

    1 or -1 for left or right, 0 when every point is on the line, None when
    the points straddle it.
    """
    sides = {segment.side_of(p, epsilon) for p in points} - {0}
    if len(sides) > 1:
        return None
    return sides.pop() if sides else 0


class SegmentComparer:
    """Orders two segments by which one the viewpoint sees first along the
    sweep line.

    Both segments must currently be crossed by the sweep line and must not
    cross each other. A negative result means ``a`` is nearer.
    """

    def __init__(self, viewpoint, shorten_amount=VISION_STATS["shorten_amount"],
                 epsilon=POINT_EPSILON):
        self.viewpoint = viewpoint
        self.shorten_amount = shorten_amount
        self.epsilon = epsilon
        self._shortened = {}

    def _shorten(self, segment):
        # Trimming both ends keeps a shared endpoint from counting as a
        # crossing.
        short = self._shortened.get(segment)
        if short is None:
            short = segment.shorten(self.shorten_amount)
            self._shortened[segment] = short
        return short

    def compare(self, a, b):
        if a is b:
            return 0

        short_a = self._shorten(a)
        short_b = self._shorten(b)

        a_side = _side_of_all(short_b, (short_a.point1, short_a.point2), self.epsilon)
        b_side = _side_of_all(short_a, (short_b.point1, short_b.point2), self.epsilon)

        if a_side is None and b_side is None:
            raise GeometryError(f"{a!r} intersects {b!r}")

        if a_side:
            # B's line separates A from the viewpoint: A is behind B.
            viewpoint_side = short_b.side_of(self.viewpoint, self.epsilon)
            return 1 if viewpoint_side != a_side else -1

        if b_side:
            viewpoint_side = short_a.side_of(self.viewpoint, self.epsilon)
            return -1 if viewpoint_side != b_side else 1

        # Collinear pieces; the one starting nearer the viewpoint goes first.
        near_a = self._nearest_distance(a)
        near_b = self._nearest_distance(b)
        if near_a == near_b:
            return 0
        return -1 if near_a < near_b else 1

    def _nearest_distance(self, segment):
        return min((segment.point1 - self.viewpoint).length_squared(),
                   (segment.point2 - self.viewpoint).length_squared())

    __call__ = compare
