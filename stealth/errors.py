class VisionError(Exception):
    """Base class for everything the vision core raises."""


class UsageError(VisionError):
    """A computation was driven in the wrong order.

    For example advancing one that never started or has already finished,
    or asking for a diagnostic snapshot when nothing is in progress.
    """


class ComputationInProgressError(UsageError):
    """A computation was started again while it was not idle."""


class GeometryError(VisionError):
    """The level geometry broke an assumption of the sweep.

    Either two segments genuinely cross, or the sweep line failed to hit a
    segment it should be hitting. Retrying gives the same result.
    """


class InvalidInputError(VisionError, ValueError):
    """Input rejected before any sweep state was built."""
