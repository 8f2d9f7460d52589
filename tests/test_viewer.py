import logging
from collections import defaultdict

import pygame
import pytest

from main import start_vision
from maps import LevelMap
from settings import WIDTH, HEIGHT
from stealth.gallery_camera import GalleryCamera
from stealth.input_manager import REPEAT_DELAY, REPEAT_INTERVAL, InputManager
from stealth.level_island import LevelIsland
from stealth.viewport import Viewport


def fake_input(monkeypatch, down):
    keys = defaultdict(bool)
    monkeypatch.setattr(pygame.key, "get_pressed", lambda: keys)
    monkeypatch.setattr(pygame.mouse, "get_pos", lambda: (12, 34))
    for key in down:
        keys[key] = True
    return keys


def test_pressed_only_on_the_first_frame(monkeypatch):
    keys = fake_input(monkeypatch, [pygame.K_c])
    manager = InputManager()

    manager.update()
    assert manager.is_pressed("toggle_camera")
    manager.update()
    assert not manager.is_pressed("toggle_camera")

    keys[pygame.K_c] = False
    manager.update()
    keys[pygame.K_c] = True
    manager.update()
    assert manager.is_pressed("toggle_camera")
    assert not manager.is_pressed("quit")
    assert not manager.is_pressed("no_such_action")


def test_held_step_repeats(monkeypatch):
    fake_input(monkeypatch, [pygame.K_SPACE])
    manager = InputManager()

    fired = []
    for frame in range(1, REPEAT_DELAY + 2 * REPEAT_INTERVAL + 1):
        manager.update()
        if manager.is_repeated("step"):
            fired.append(frame)

    assert fired == [
        1,
        REPEAT_DELAY + REPEAT_INTERVAL,
        REPEAT_DELAY + 2 * REPEAT_INTERVAL,
    ]


def test_mouse_position(monkeypatch):
    fake_input(monkeypatch, [])
    manager = InputManager()
    manager.update()
    assert manager.get_mouse_pos() == pygame.Vector2(12, 34)


def test_viewport_fit():
    viewport = Viewport()
    viewport.fit((-5, -5, 5, 5), margin=0)

    centre = viewport.apply((0, 0))
    assert tuple(centre) == pytest.approx((WIDTH / 2, HEIGHT / 2))
    # World y points up, screen y points down
    top = viewport.apply((0, 5))
    assert top.y == pytest.approx(0)
    assert tuple(viewport.to_world(top)) == pytest.approx((0, 5))


def test_start_vision_leaves_a_broken_camera_blank(caplog):
    # Two overlapping pillars in front of the first camera
    island = LevelIsland(
        [(-10, -10), (10, -10), (10, 10), (-10, 10)],
        [[(3, -2), (5, -2), (5, 2), (3, 2)], [(4, -1), (6, -1), (6, 1), (4, 1)]],
    )
    level = LevelMap(island)
    broken = level.add_camera(GalleryCamera((0, 0), facing=0, half_angle=60))
    working = level.add_camera(GalleryCamera((-5, 0), facing=180, half_angle=30))

    with caplog.at_level(logging.ERROR, logger="stealth.camera_vision"):
        start_vision(level, 0)

    assert "aborted" in caplog.text
    assert broken.vision_area is None
    assert working.vision_area[0] == (-5, 0)
    assert working.is_point_visible((-9, 0))
