import pygame

from settings import WIDTH

# Rows of the diagnostics panel
LINE_HEIGHT = 22
PADDING = 10


class VisionHud:
    """Diagnostics panel for the stepping viewer.

    Shows the selected camera, the state of its computation and a bar of
    events handled so far, plus whether the mouse cursor is seen.
    """

    def __init__(self, level, font_size=22):
        self.level = level
        self._font = pygame.font.SysFont(None, font_size)
        self.bar_color = (60, 200, 90)
        self.bg_color = (0, 0, 0, 140)

    def _lines(self, camera_index, cursor_seen):
        camera = self.level.cameras[camera_index]
        manager = self.level.camera_manager
        limit = manager.disabled_limit
        lines = [
            f"Camera {camera_index + 1}/{len(self.level.cameras)}"
            f"  facing {camera.facing:g}  fov {camera.field_of_view:g}"
            + ("  (disabled)" if camera.disabled else ""),
            f"Disabled cameras: {manager.disabled_count} / "
            + ("-" if limit < 0 else str(limit)),
        ]

        vision = camera.vision
        if vision is not None and vision.computation_in_progress:
            snapshot = vision.snapshot()
            lines.append(
                f"Sweep: {snapshot.state.value}  active {len(snapshot.active_segments)}"
                f"  vertices {len(snapshot.vertices)}  pending {snapshot.pending_events}"
            )
        elif camera.vision_area is not None:
            lines.append(f"Vision polygon: {len(camera.vision_area)} vertices")
        else:
            lines.append("Vision polygon: not computed")

        lines.append("Cursor: SEEN" if cursor_seen else "Cursor: hidden")
        lines.append("SPACE step  RETURN run  P play  TAB camera  C toggle  R restart")
        return lines

    def draw(self, screen, camera_index, cursor_seen):
        lines = self._lines(camera_index, cursor_seen)
        height = PADDING * 2 + LINE_HEIGHT * len(lines) + 8

        panel = pygame.Surface((WIDTH, height), pygame.SRCALPHA)
        panel.fill(self.bg_color)
        screen.blit(panel, (0, 0))

        for i, text in enumerate(lines):
            color = (255, 90, 90) if text == "Cursor: SEEN" else (235, 235, 235)
            surface = self._font.render(text, True, color)
            screen.blit(surface, (PADDING, PADDING + i * LINE_HEIGHT))

        # Events handled so far
        vision = self.level.cameras[camera_index].vision
        if vision is not None and vision.events_total:
            done = vision.events_total - len(vision.event_queue)
            fill = int((WIDTH - 2 * PADDING) * done / vision.events_total)
            bar = pygame.Rect(PADDING, height - 8, fill, 4)
            pygame.draw.rect(screen, self.bar_color, bar)
