"""Exception types raised by streamta."""


class StreamTAError(Exception):
    """Base class for all streamta errors."""


class InvalidParameter(StreamTAError, ValueError):
    """An indicator was configured with an out-of-domain parameter (e.g. period 0)."""


class InvalidBar(StreamTAError, ValueError):
    """An observation violates low <= {open, close} <= high or volume >= 0."""


class SnapshotError(StreamTAError, ValueError):
    """A persisted indicator snapshot could not be decoded."""
