# data/vision_stats.py

VISION_STATS = {
    # Degrees. Event angles in (-angle_epsilon, 0) snap to 0, and the cone
    # filter keeps events up to field_of_view + angle_epsilon.
    "angle_epsilon": 1e-3,
    # World units. Two points closer than this are the same point.
    "point_epsilon": 1e-5,
    # Fraction of its length a segment loses before occlusion side tests.
    "shorten_amount": 0.01,
    # Sine of the angle below which a line and a segment count as parallel.
    "parallel_epsilon": 1e-12,
}
