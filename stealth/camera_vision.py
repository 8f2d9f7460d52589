"""Angular sweep computing the area a gallery camera can see.

The sweep starts on the camera's right boundary, turns counter-clockwise
through every segment endpoint inside the vision cone and stops on the left
boundary. The segments crossed by the sweep line are kept nearest first; the
visibility polygon gets a new vertex whenever the front segment changes.

The result is an open vertex list starting at the camera position. Closing it
back to the camera is left to whoever draws or triangulates it.
"""

import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum

import pygame

from data.vision_stats import VISION_STATS
from stealth.endpoint import create_endpoints, filter_to_cone, is_edge_on
from stealth.errors import (
    ComputationInProgressError,
    GeometryError,
    InvalidInputError,
    UsageError,
)
from stealth.geometry import Line, points_equal, signed_angle, to_point
from stealth.segment_order import SegmentComparer
from stealth.status import ActiveSet

logger = logging.getLogger(__name__)


class VisionState(Enum):
    IDLE = "idle"
    INITIALIZING = "initializing"
    SWEEPING = "sweeping"
    FINALIZING = "finalizing"
    DONE = "done"
    ABORTED = "aborted"


_RUNNING = (VisionState.INITIALIZING, VisionState.SWEEPING, VisionState.FINALIZING)


@dataclass(frozen=True)
class VisionSnapshot:
    """Read-only view of a stepwise computation, for drawing."""

    state: VisionState
    sweep_line: Line
    active_segments: tuple
    vertices: tuple
    pending_events: int


class CameraVision:
    """Computes the visibility polygon of one camera in one level.

    ``camera`` needs ``pos``, ``half_angle``, ``field_of_view`` and the two
    boundary lines (see ``GalleryCamera``). ``level`` is a
    ``PolygonWithHoles`` or anything with a ``polygon`` attribute holding
    one.

    An instance runs exactly one sweep, either all at once with
    ``compute()`` or one step per ``advance()`` after ``compute_stepwise()``.
    """

    def __init__(self, camera, level, stats=None):
        self.stats = dict(VISION_STATS)
        if stats:
            unknown = set(stats) - set(VISION_STATS)
            if unknown:
                raise InvalidInputError(f"Unknown vision stats: {sorted(unknown)}")
            self.stats.update(stats)
        if not 0 < self.stats["shorten_amount"] < 1:
            raise InvalidInputError("shorten_amount must lie strictly between 0 and 1")

        if not 0 < camera.half_angle <= 180:
            raise InvalidInputError(
                f"Half-angle must be in (0, 180] degrees, got {camera.half_angle}"
            )

        self.camera = camera
        self.level = getattr(level, "polygon", level)
        self.viewpoint = to_point(camera.pos)

        for vertex in self.level.vertices:
            if points_equal(vertex, self.viewpoint, self.stats["point_epsilon"]):
                raise InvalidInputError(
                    f"Camera at {tuple(self.viewpoint)} sits on a level vertex"
                )

        self.state = VisionState.IDLE
        self.vertices = []
        self.sweep_line = None
        self.event_queue = deque()
        self.events_total = 0
        self.intersected_segments = ActiveSet(
            SegmentComparer(
                self.viewpoint,
                self.stats["shorten_amount"],
                self.stats["point_epsilon"],
            )
        )

    # =====================================================
    # PUBLIC API
    # =====================================================

    @property
    def computation_in_progress(self):
        return self.state in _RUNNING

    @property
    def done(self):
        return self.state is VisionState.DONE

    @property
    def result(self):
        """The finished polygon as (x, y) tuples."""
        if not self.done:
            raise UsageError(f"No result yet, computation is {self.state.value}")
        return [(v.x, v.y) for v in self.vertices]

    def compute(self):
        """Run the whole sweep and return the polygon."""
        self._start()
        while not self._step():
            pass
        return self.result

    def compute_stepwise(self):
        """Prepare a sweep to be driven with ``advance()``. Returns self."""
        self._start()
        return self

    def advance(self):
        """Perform one step. Returns True once the computation is done.

        The first step sets up the event queue and the initial front, each
        following step handles one event, and the last one closes the
        polygon against the left boundary.
        """
        if not self.computation_in_progress:
            raise UsageError(f"Cannot advance a computation that is {self.state.value}")
        return self._step()

    def snapshot(self):
        if not self.computation_in_progress:
            raise UsageError("No computation in progress")
        return VisionSnapshot(
            state=self.state,
            sweep_line=self.sweep_line or self.camera.get_right_boundary(),
            active_segments=self.intersected_segments.snapshot(),
            vertices=tuple((v.x, v.y) for v in self.vertices),
            pending_events=len(self.event_queue),
        )

    # =====================================================
    # STATE MACHINE
    # =====================================================

    def _start(self):
        if self.state is not VisionState.IDLE:
            raise ComputationInProgressError(
                f"A computation is already {self.state.value}"
            )
        self.state = VisionState.INITIALIZING
        logger.info("Computing vision from %s, facing %s, field of view %s",
                    tuple(self.viewpoint), self.camera.facing,
                    self.camera.field_of_view)

    def _step(self):
        try:
            if self.state is VisionState.INITIALIZING:
                self._initialize()
                self.state = (VisionState.SWEEPING if self.event_queue
                              else VisionState.FINALIZING)
            elif self.state is VisionState.SWEEPING:
                self._handle_event(self.event_queue.popleft())
                if not self.event_queue:
                    self.state = VisionState.FINALIZING
            else:
                self._finalize()
                self.state = VisionState.DONE
                logger.info("Vision polygon has %d vertices after %d events",
                            len(self.vertices), self.events_total)
        except GeometryError as exc:
            self.state = VisionState.ABORTED
            logger.error("Vision computation aborted: %s", exc)
            raise
        return self.done

    # =====================================================
    # PHASES
    # =====================================================

    def _initialize(self):
        viewpoint = self.viewpoint
        self.vertices = [pygame.Vector2(viewpoint)]

        right_boundary = self.camera.get_right_boundary()
        endpoints = create_endpoints(
            self.level, viewpoint, right_boundary, self.stats["angle_epsilon"]
        )
        endpoints = filter_to_cone(
            endpoints, self.camera.field_of_view, self.stats["angle_epsilon"]
        )
        self.event_queue = deque(endpoints)
        self.events_total = len(endpoints)

        # Start sweeping from the right boundary, counter-clockwise
        self.sweep_line = right_boundary
        inserted_segment = False
        for segment, point in self._find_intersections(self.sweep_line):
            if segment.is_endpoint(point, self.stats["point_epsilon"]):
                # A begin endpoint on the boundary hides whatever lies behind
                # it; its own event will supply the first vertex.
                if not inserted_segment:
                    other = segment.other_endpoint(point)
                    if signed_angle(point - viewpoint, other - viewpoint) > 0:
                        inserted_segment = True
                continue

            if not inserted_segment:
                self._add_vertex(point)
                inserted_segment = True
            self.intersected_segments.insert(segment)

        logger.debug("Sweep starts with %d active segments and %d events",
                     len(self.intersected_segments), self.events_total)

    def _handle_event(self, event):
        self.sweep_line = Line(self.viewpoint, event.vertex)
        old_front = self.intersected_segments.find_min()

        if event.is_begin:
            self.intersected_segments.insert(event.segment)
            new_front = self.intersected_segments.find_min()

            if old_front is None:
                # The sweep started on a vertex with nothing crossed yet.
                self._add_vertex(event.vertex)
            elif old_front is not new_front:
                # The new segment hides the old front from here on.
                self._add_vertex(self._sweep_hit(old_front), skip=event.vertex)
                self._add_vertex(event.vertex)
        else:
            self.intersected_segments.delete(event.segment)
            new_front = self.intersected_segments.find_min()

            if old_front is not new_front:
                self._add_vertex(event.vertex)
                # An empty set is fine: a later outer-boundary event supplies
                # the next vertex.
                if new_front is not None:
                    self._add_vertex(self._sweep_hit(new_front), skip=event.vertex)

        logger.debug("%r: front %r -> %r, %d vertices", event, old_front,
                     new_front, len(self.vertices))

    def _finalize(self):
        self.sweep_line = self.camera.get_left_boundary()
        intersections = self._find_intersections(self.sweep_line)
        if intersections:
            segment, point = intersections[0]
            if not segment.is_endpoint(point, self.stats["point_epsilon"]):
                self._add_vertex(point)

        # A full circle ends on the ray it started from.
        if self.camera.field_of_view >= 360 and len(self.vertices) > 1:
            self._add_vertex(self.vertices[1])

    # =====================================================
    # HELPERS
    # =====================================================

    def _find_intersections(self, line):
        """Hits of ``line`` with every level segment in front of the camera,
        nearest first."""
        direction = line.direction
        hits = []
        for segment in self.level.segments:
            if is_edge_on(segment, self.viewpoint, self.stats["angle_epsilon"]):
                continue
            point = segment.intersect(line, self.stats["parallel_epsilon"])
            if point is None:
                continue
            # The sweep line is a ray from the camera; ignore hits behind it.
            if (point - line.point1).dot(direction) > 0:
                hits.append((segment, point))

        hits.sort(key=lambda hit: self.viewpoint.distance_squared_to(hit[1]))
        return hits

    def _sweep_hit(self, segment):
        point = segment.intersect(self.sweep_line, self.stats["parallel_epsilon"])
        if point is None:
            raise GeometryError(f"{self.sweep_line!r} doesn't intersect {segment!r}")
        return point

    def _add_vertex(self, point, skip=None):
        """Append point unless it repeats the last vertex (or ``skip``)."""
        epsilon = self.stats["point_epsilon"]
        if points_equal(point, self.vertices[-1], epsilon):
            return False
        if skip is not None and points_equal(point, skip, epsilon):
            return False
        self.vertices.append(pygame.Vector2(point))
        return True
