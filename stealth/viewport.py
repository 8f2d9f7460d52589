import pygame

from settings import WIDTH, HEIGHT, WORLD_SCALE, VIEW_MARGIN


class Viewport:
    """Maps world coordinates (y up) to screen pixels (y down)."""

    def __init__(self, scale=WORLD_SCALE):
        self.scale = scale
        # Screen position of the world origin
        self.offset = pygame.Vector2(WIDTH / 2, HEIGHT / 2)

    # -------------------------
    # Public API
    # -------------------------

    def fit(self, bounds, margin=VIEW_MARGIN):
        """Scale and centre a (min_x, min_y, max_x, max_y) box on screen."""
        min_x, min_y, max_x, max_y = bounds
        width = max(max_x - min_x, 1e-9)
        height = max(max_y - min_y, 1e-9)

        self.scale = min((WIDTH - 2 * margin) / width,
                         (HEIGHT - 2 * margin) / height)

        centre_x = (min_x + max_x) / 2
        centre_y = (min_y + max_y) / 2
        self.offset.x = WIDTH / 2 - centre_x * self.scale
        self.offset.y = HEIGHT / 2 + centre_y * self.scale

    def apply(self, position):
        """World position to screen position."""
        return pygame.Vector2(
            self.offset.x + position[0] * self.scale,
            self.offset.y - position[1] * self.scale,
        )

    def to_world(self, screen_pos):
        return pygame.Vector2(
            (screen_pos[0] - self.offset.x) / self.scale,
            (self.offset.y - screen_pos[1]) / self.scale,
        )
