import pygame

from stealth.camera_vision import CameraVision
from stealth.geometry import Line
from stealth.visibility import point_in_polygon


class GalleryCamera:
    """A camera watching the level through a cone.

    ``facing`` is in degrees counter-clockwise from +x, ``half_angle`` is the
    angle between the facing direction and either edge of the cone.
    """

    def __init__(self, position, facing=0.0, half_angle=30.0,
                 color=(230, 200, 60), gizmo_length=1.0):
        self.pos = pygame.Vector2(position)
        self.facing = facing
        self.half_angle = half_angle
        self.color = color
        self.gizmo_length = gizmo_length

        self.disabled = False

        # Stepwise computation in progress, if any
        self.vision = None
        # Last finished polygon, world space
        self.vision_area = None

    @classmethod
    def from_stats(cls, position, facing, stats):
        return cls(
            position,
            facing=facing,
            half_angle=stats["half_angle"],
            color=stats["color"],
            gizmo_length=stats.get("gizmo_length", 1.0),
        )

    @property
    def field_of_view(self):
        """Full width of the cone in degrees."""
        return 2 * self.half_angle

    def get_right_boundary(self):
        return Line.from_angle(self.pos, self.facing - self.half_angle)

    def get_left_boundary(self):
        return Line.from_angle(self.pos, self.facing + self.half_angle)

    # =====================================================
    # VISION
    # =====================================================

    def compute_vision_area(self, level):
        self.vision = None
        self.vision_area = CameraVision(self, level).compute()
        return self.vision_area

    def compute_vision_area_stepwise(self, level):
        self.vision_area = None
        self.vision = CameraVision(self, level).compute_stepwise()
        return self.vision

    def advance_stepwise_computation(self):
        """Advance the running computation one step.

        Returns True when nothing is left to do. The finished polygon is
        stored in ``vision_area``.
        """
        if self.vision is None:
            return True
        if self.vision.advance():
            self.vision_area = self.vision.result
            self.vision = None
            return True
        return False

    def is_point_visible(self, point):
        if self.disabled or not self.vision_area:
            return False
        return point_in_polygon(point[0], point[1], self.vision_area)

    # =====================================================
    # DRAW
    # =====================================================

    def draw(self, screen, viewport):
        screen_pos = viewport.apply(self.pos)
        color = (110, 110, 110) if self.disabled else self.color

        if self.vision_area and len(self.vision_area) >= 3 and not self.disabled:
            overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
            points = [viewport.apply(v) for v in self.vision_area]
            pygame.draw.polygon(overlay, (*self.color, 70), points)
            screen.blit(overlay, (0, 0))

        # Cone edges
        for boundary in (self.get_right_boundary(), self.get_left_boundary()):
            tip = boundary.point1 + boundary.direction * self.gizmo_length
            pygame.draw.line(screen, color, screen_pos, viewport.apply(tip), 2)

        pygame.draw.circle(screen, color, screen_pos, 6)

        if self.vision is not None and self.vision.computation_in_progress:
            self._draw_progress(screen, viewport, self.vision.snapshot())

    def _draw_progress(self, screen, viewport, snapshot):
        for segment in snapshot.active_segments:
            pygame.draw.line(screen, (60, 120, 255),
                             viewport.apply(segment.point1),
                             viewport.apply(segment.point2), 3)

        ray = snapshot.sweep_line
        far = ray.point1 + ray.direction.normalize() * 1000
        pygame.draw.line(screen, (230, 40, 40),
                         viewport.apply(ray.point1), viewport.apply(far), 1)

        if len(snapshot.vertices) >= 2:
            points = [viewport.apply(v) for v in snapshot.vertices]
            pygame.draw.lines(screen, (60, 220, 90), False, points, 2)


def to_local_space(vertices, camera):
    """Express world-space vertices in the camera's frame: camera at the
    origin, facing along +x."""
    return [
        tuple((pygame.Vector2(v) - camera.pos).rotate(-camera.facing))
        for v in vertices
    ]
