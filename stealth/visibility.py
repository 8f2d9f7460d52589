from stealth.camera_vision import CameraVision


def compute_visibility(region, viewpoint, stats=None):
    """Visibility polygon of ``viewpoint``'s cone inside ``region``.

    Returns (x, y) tuples starting at the viewpoint and running
    counter-clockwise around the visible area. The closing edge back to the
    viewpoint is implicit.
    """
    return CameraVision(viewpoint, region, stats).compute()


def begin_visibility(region, viewpoint, stats=None):
    """Start a computation to be driven one step at a time with ``advance``."""
    return CameraVision(viewpoint, region, stats).compute_stepwise()


def advance(handle):
    """Run one step of ``handle``. Returns True once ``handle.result`` is ready."""
    return handle.advance()


def point_in_polygon(x, y, polygon):
    """Ray-casting point-in-polygon test."""
    n = len(polygon)
    inside = False
    j = n - 1
    for i in range(n):
        xi, yi = polygon[i]
        xj, yj = polygon[j]
        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside
        j = i
    return inside
