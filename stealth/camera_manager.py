import logging

logger = logging.getLogger(__name__)


class CameraManager:
    """The cameras of one level.

    At most ``disabled_limit`` cameras may be disabled at once; a negative
    limit means no limit.
    """

    def __init__(self, cameras=(), disabled_limit=-1):
        self.cameras = list(cameras)
        self.disabled_limit = disabled_limit

    def add(self, camera):
        self.cameras.append(camera)
        return camera

    @property
    def disabled_count(self):
        return sum(1 for camera in self.cameras if camera.disabled)

    def can_disable(self):
        return self.disabled_limit < 0 or self.disabled_count < self.disabled_limit

    def toggle(self, camera):
        """Flip a camera on or off. Returns False if the limit refused it."""
        if camera.disabled:
            camera.disabled = False
            return True
        if not self.can_disable():
            logger.warning("Camera at %s stays on: %d of %d cameras already disabled",
                           tuple(camera.pos), self.disabled_count, self.disabled_limit)
            return False
        camera.disabled = True
        return True

    def enable_all(self):
        for camera in self.cameras:
            camera.disabled = False

    def update_vision(self, level):
        for camera in self.cameras:
            camera.compute_vision_area(level)
        logger.info("Updated vision for %d cameras", len(self.cameras))

    def is_point_visible(self, point):
        return any(camera.is_point_visible(point) for camera in self.cameras)
