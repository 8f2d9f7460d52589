class ActiveSet:
    """Segments currently crossed by the sweep line, nearest first.

    Order comes from a comparer looking at the segments' geometry relative
    to the viewpoint, so only membership is stored. Insertion binary-searches
    with the comparer; lookups and removal go by identity.
    """

    def __init__(self, comparer):
        self._comparer = comparer
        self._segments = []
        self._members = set()

    def __len__(self):
        return len(self._segments)

    def __iter__(self):
        return iter(list(self._segments))

    def __contains__(self, segment):
        return segment in self._members

    def insert(self, segment):
        """Insert segment in order. Returns False if it was already present."""
        if segment in self._members:
            return False

        lo, hi = 0, len(self._segments)
        while lo < hi:
            mid = (lo + hi) // 2
            if self._comparer(segment, self._segments[mid]) > 0:
                lo = mid + 1
            else:
                hi = mid

        self._segments.insert(lo, segment)
        self._members.add(segment)
        return True

    def delete(self, segment):
        """Remove segment. Returns False if it was not present."""
        if segment not in self._members:
            return False
        self._members.remove(segment)
        self._segments.remove(segment)
        return True

    def find_min(self):
        """The front segment, or None when nothing is crossed."""
        return self._segments[0] if self._segments else None

    def find_max(self):
        return self._segments[-1] if self._segments else None

    def snapshot(self):
        return tuple(self._segments)
