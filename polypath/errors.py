"""Exception types for polypath."""


class PolypathError(Exception):
    """Base class for polypath errors."""


class PathIndexError(PolypathError, IndexError):
    """Raised when a path index operation is given an out-of-range index.

    This is a caller bug, not an expected outcome. Lookups that may
    legitimately find nothing (``Path.get_at``, ``Path.pop``) return
    ``None`` instead.
    """

    def __init__(self, op: str, index: int, length: int):
        super().__init__(
            f"{op} index out of range, requested: {index}, length: {length}"
        )
        self.op = op
        self.index = index
        self.length = length


class PolylineDecodeError(PolypathError, ValueError):
    """Raised when an encoded polyline string is malformed."""

    def __init__(self, message: str, position: int):
        super().__init__(f"{message} (at position {position})")
        self.position = position
