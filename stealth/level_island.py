import pygame

from stealth.geometry import PolygonWithHoles


class LevelIsland:
    """The walkable floor of a level: one outer loop with holes cut out.

    Vertices are (x, y) pairs in world units. The polygon is validated when
    the island is created.
    """

    def __init__(self, outside_vertices, holes=(), color=(225, 220, 210),
                 hole_color=(70, 70, 80)):
        self.outside_vertices = [tuple(v) for v in outside_vertices]
        self.holes = [[tuple(v) for v in hole] for hole in holes]
        self.color = color
        self.hole_color = hole_color
        self.polygon = PolygonWithHoles(self.outside_vertices, self.holes)

    @classmethod
    def from_dict(cls, data):
        return cls(data["outside"], data.get("holes", []))

    def to_dict(self):
        return {
            "outside": [list(v) for v in self.outside_vertices],
            "holes": [[list(v) for v in hole] for hole in self.holes],
        }

    def bounds(self):
        """(min_x, min_y, max_x, max_y) of the outer loop."""
        xs = [v[0] for v in self.outside_vertices]
        ys = [v[1] for v in self.outside_vertices]
        return min(xs), min(ys), max(xs), max(ys)

    def draw(self, screen, viewport):
        pygame.draw.polygon(
            screen, self.color,
            [viewport.apply(v) for v in self.outside_vertices],
        )
        for hole in self.holes:
            pygame.draw.polygon(
                screen, self.hole_color,
                [viewport.apply(v) for v in hole],
            )
