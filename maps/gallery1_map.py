from data.camera_stats import CAMERA_STATS
from maps.level_base import LevelMap
from stealth.gallery_camera import GalleryCamera
from stealth.level_island import LevelIsland


class Gallery1Map(LevelMap):
    def __init__(self):
        super().__init__(self._build_island(), disabled_limit=1)
        self._place_cameras()

    def _build_island(self):
        # Room with an alcove cut into the top wall
        outside = [
            (0, 0), (16, 0), (16, 10), (10, 10),
            (10, 7), (8, 7), (8, 10), (0, 10),
        ]
        holes = [
            # Square pillar
            [(3, 3), (5, 3), (5, 5), (3, 5)],
            # Triangular plinth
            [(11, 2), (13.5, 2.5), (12, 4)],
        ]
        return LevelIsland(outside, holes)

    def _place_cameras(self):
        self.add_camera(
            GalleryCamera.from_stats((1, 1.5), 40, CAMERA_STATS["basic"])
        )
        self.add_camera(
            GalleryCamera.from_stats((15, 1.2), 140, CAMERA_STATS["wide"])
        )
        self.add_camera(
            GalleryCamera.from_stats((6.5, 8.3), 270, CAMERA_STATS["dome"])
        )
