import json
import logging

from data.camera_stats import CAMERA_STATS
from stealth.camera_manager import CameraManager
from stealth.gallery_camera import GalleryCamera
from stealth.level_island import LevelIsland

logger = logging.getLogger(__name__)


class LevelMap:
    def __init__(self, island, disabled_limit=-1):
        self.island = island
        self.camera_manager = CameraManager(disabled_limit=disabled_limit)

    @classmethod
    def from_json(cls, path):
        """Construct a LevelMap from a JSON level file."""
        with open(path, "r") as f:
            data = json.load(f)

        level = cls(
            LevelIsland.from_dict(data["island"]),
            disabled_limit=data.get("disabled_limit", -1),
        )

        for cdata in data.get("cameras", []):
            preset = cdata.get("preset", "basic")
            stats = CAMERA_STATS.get(preset)
            if stats is None:
                logger.warning("Skipping camera with unknown preset %r", preset)
                continue
            camera = GalleryCamera.from_stats(
                (cdata["x"], cdata["y"]), cdata.get("facing", 0.0), stats
            )
            if "half_angle" in cdata:
                camera.half_angle = cdata["half_angle"]
            level.add_camera(camera)

        logger.info("Loaded %s: %d holes, %d cameras", path,
                    len(level.island.holes), len(level.cameras))
        return level

    @property
    def cameras(self):
        return self.camera_manager.cameras

    def add_camera(self, camera):
        return self.camera_manager.add(camera)

    def update_vision(self):
        """Recompute every camera's vision area."""
        self.camera_manager.update_vision(self.island)

    def is_point_visible(self, point):
        return self.camera_manager.is_point_visible(point)

    def draw(self, screen, viewport):
        self.island.draw(screen, viewport)
        for camera in self.cameras:
            camera.draw(screen, viewport)
