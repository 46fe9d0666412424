class Error(Exception):
    """Base error type for this module."""


class DeserializationError(Error):
    """Exception raised when rebuilding an accumulator from its flat fields."""


class UnsupportedError(Error):
    """Exception raised when an operation is not supported."""
