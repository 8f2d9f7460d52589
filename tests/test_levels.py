import json
import logging
from pathlib import Path

import pytest

from maps import Gallery1Map, LevelMap
from stealth.errors import InvalidInputError
from stealth.level_island import LevelIsland

LEVELS = Path(__file__).resolve().parents[1] / "maps" / "levels"


def write_level(tmp_path, data):
    path = tmp_path / "level.json"
    path.write_text(json.dumps(data))
    return str(path)


def test_island_round_trip():
    island = LevelIsland([(0, 0), (6, 0), (6, 4), (0, 4)], [[(1, 1), (2, 1), (2, 2)]])
    copy = LevelIsland.from_dict(island.to_dict())

    assert copy.outside_vertices == island.outside_vertices
    assert copy.holes == island.holes
    assert island.bounds() == (0, 0, 6, 4)
    assert len(island.polygon.segments) == 7


def test_island_validation():
    with pytest.raises(InvalidInputError):
        LevelIsland([(0, 0), (6, 0)])
    with pytest.raises(InvalidInputError):
        LevelIsland([(0, 0), (6, 0), (6, 4)], [[(1, 1), (1, 1), (2, 2)]])


def test_level_from_json(tmp_path, caplog):
    path = write_level(tmp_path, {
        "island": {
            "outside": [[0, 0], [10, 0], [10, 10], [0, 10]],
            "holes": [[[4, 4], [6, 4], [6, 6], [4, 6]]],
        },
        "disabled_limit": 2,
        "cameras": [
            {"x": 1, "y": 1.5, "facing": 45, "preset": "basic"},
            {"x": 9, "y": 8.5, "facing": 225, "preset": "wide", "half_angle": 20},
            {"x": 5, "y": 1, "preset": "mystery"},
        ],
    })

    with caplog.at_level(logging.WARNING, logger="maps.level_base"):
        level = LevelMap.from_json(path)

    assert "mystery" in caplog.text
    assert level.camera_manager.disabled_limit == 2
    assert len(level.island.holes) == 1
    assert len(level.cameras) == 2
    assert level.cameras[0].half_angle == 30
    assert level.cameras[1].half_angle == 20
    assert level.cameras[1].facing == 225

    level.update_vision()
    # Both cameras look across the room past the pillar
    assert level.is_point_visible((2, 2))
    assert level.is_point_visible((8, 8))
    assert not level.is_point_visible((8, 2))


def test_level_defaults(tmp_path):
    path = write_level(tmp_path, {
        "island": {"outside": [[0, 0], [4, 0], [4, 4], [0, 4]]},
    })
    level = LevelMap.from_json(path)

    assert level.cameras == []
    assert level.camera_manager.disabled_limit == -1
    assert level.island.holes == []


def test_bundled_level_loads():
    level = LevelMap.from_json(str(LEVELS / "corridors.json"))
    assert len(level.cameras) == 3
    assert level.camera_manager.disabled_limit == 1


def test_gallery_map():
    level = Gallery1Map()
    assert len(level.cameras) == 3
    assert len(level.island.holes) == 2

    camera = level.cameras[0]
    area = camera.compute_vision_area(level.island)
    assert area[0] == (1, 1.5)

    camera.compute_vision_area_stepwise(level.island)
    while not camera.advance_stepwise_computation():
        pass
    assert camera.vision_area == area

