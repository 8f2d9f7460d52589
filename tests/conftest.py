import sys
from pathlib import Path

import pytest

# Allow importing the top-level packages from the project root
sys.path.append(str(Path(__file__).resolve().parents[1]))

from stealth.geometry import PolygonWithHoles


ROOM = [(-10, -10), (10, -10), (10, 10), (-10, 10)]


@pytest.fixture
def empty_room():
    return PolygonWithHoles(ROOM)


@pytest.fixture
def occluded_room():
    """Square room with one small square pillar in front of the origin."""
    return PolygonWithHoles(ROOM, [[(4, -1), (5, -1), (5, 1), (4, 1)]])
