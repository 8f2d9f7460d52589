# data/camera_stats.py

CAMERA_STATS = {
    "basic": {
        "half_angle": 30,
        "color": (230, 200, 60),
        "gizmo_length": 1.5,
    },
    "wide": {
        "half_angle": 60,
        "color": (90, 200, 230),
        "gizmo_length": 1.5,
    },
    "dome": {
        "half_angle": 180,
        "color": (200, 90, 230),
        "gizmo_length": 0.75,
    },
}
