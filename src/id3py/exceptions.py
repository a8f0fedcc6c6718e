"""Exception hierarchy for id3py."""
from __future__ import annotations


class ID3Error(Exception):
    """Base exception for id3py."""
    pass


class ConfigurationError(ID3Error, ValueError):
    """Raised when training cannot proceed (empty data, unknown target...)."""
    pass


class DataError(ID3Error, ValueError):
    """Raised when tabular data cannot be loaded or is malformed."""
    pass


class NotFittedError(ID3Error, ValueError, AttributeError):
    """Raised when an estimator is used before ``fit``."""
    pass
