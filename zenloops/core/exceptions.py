"""Exception hierarchy for board generation and persistence."""


class ZenLoopsError(Exception):
    """Base exception for puzzle failures."""


class GridDecodeError(ZenLoopsError, ValueError):
    """Raised when serialized grid data is malformed."""
