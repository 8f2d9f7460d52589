import argparse
import importlib
import logging
import sys

import pygame

from settings import WIDTH, HEIGHT, FPS, BACKGROUND_COLOR, STEPS_PER_TICK

from stealth.errors import GeometryError
from stealth.input_manager import InputManager
from stealth.viewport import Viewport

from maps import Gallery1Map, LevelMap
from hud import VisionHud


def load_level(name):
    """A built-in map module name (e.g. 'gallery1') or a path to a .json level."""
    if name is None:
        return Gallery1Map()
    if name.endswith(".json"):
        return LevelMap.from_json(name)
    mod = importlib.import_module(f"maps.{name}_map")
    # First LevelMap subclass in the module
    for attr_name in dir(mod):
        attr = getattr(mod, attr_name)
        if isinstance(attr, type) and issubclass(attr, LevelMap) and attr is not LevelMap:
            return attr()
    raise SystemExit(f"maps.{name}_map defines no LevelMap")


def start_vision(level, selected, stepwise=False):
    """Compute the opening vision; a camera whose sweep breaks starts blank."""
    if stepwise:
        level.cameras[selected].compute_vision_area_stepwise(level.island)
        return
    for camera in level.cameras:
        try:
            camera.compute_vision_area(level.island)
        except GeometryError:
            # Already logged by the sweep
            camera.vision_area = None


def main():
    parser = argparse.ArgumentParser(
        description="Step through the vision sweep of each gallery camera.")
    parser.add_argument("--map", type=str, default=None,
                        help="Map module name (e.g. 'gallery1' for maps/gallery1_map.py) "
                             "or a .json level file")
    parser.add_argument("--stepwise", action="store_true",
                        help="Start the selected camera's computation paused at step 0")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    level = load_level(args.map)

    pygame.init()

    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Gallery Vision")

    clock = pygame.time.Clock()

    viewport = Viewport()
    viewport.fit(level.island.bounds())
    input_manager = InputManager()
    hud = VisionHud(level)

    selected = 0
    playing = False

    start_vision(level, selected, args.stepwise)

    running = True

    while running:
        clock.tick(FPS)

        # -----------------------------
        # Events
        # -----------------------------
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

        # -----------------------------
        # Input
        # -----------------------------
        input_manager.update()
        camera = level.cameras[selected]

        if input_manager.is_pressed("quit"):
            running = False

        if input_manager.is_pressed("next_camera"):
            selected = (selected + 1) % len(level.cameras)
            camera = level.cameras[selected]
            playing = False

        if input_manager.is_pressed("toggle_camera"):
            level.camera_manager.toggle(camera)

        if input_manager.is_pressed("restart"):
            camera.compute_vision_area_stepwise(level.island)
            playing = False

        if input_manager.is_pressed("play"):
            if camera.vision is None:
                camera.compute_vision_area_stepwise(level.island)
            playing = not playing

        # -----------------------------
        # Update
        # -----------------------------
        try:
            if input_manager.is_repeated("step"):
                if camera.vision is None:
                    camera.compute_vision_area_stepwise(level.island)
                camera.advance_stepwise_computation()

            if input_manager.is_pressed("run"):
                camera.compute_vision_area(level.island)
                playing = False

            if playing:
                for _ in range(STEPS_PER_TICK):
                    if camera.advance_stepwise_computation():
                        playing = False
                        break
        except GeometryError:
            # Already logged by the sweep; drop the broken computation.
            camera.vision = None
            playing = False

        cursor = viewport.to_world(input_manager.get_mouse_pos())
        cursor_seen = level.is_point_visible(cursor)

        # -----------------------------
        # Draw
        # -----------------------------
        screen.fill(BACKGROUND_COLOR)
        level.draw(screen, viewport)

        # Highlight the selected camera
        pygame.draw.circle(screen, (255, 255, 255), viewport.apply(camera.pos), 10, 2)

        cursor_color = (230, 40, 40) if cursor_seen else (40, 40, 40)
        pygame.draw.circle(screen, cursor_color, input_manager.get_mouse_pos(), 5)

        hud.draw(screen, selected, cursor_seen)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
