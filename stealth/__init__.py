from stealth.errors import (
    ComputationInProgressError,
    GeometryError,
    InvalidInputError,
    UsageError,
    VisionError,
)
from stealth.geometry import Line, LineSegment, PolygonWithHoles
from stealth.camera_vision import CameraVision, VisionState
from stealth.gallery_camera import GalleryCamera
from stealth.visibility import (
    advance,
    begin_visibility,
    compute_visibility,
    point_in_polygon,
)
