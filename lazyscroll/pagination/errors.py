"""Exceptions raised by the pagination and delivery layers.

Failures coming out of a caller-supplied ``fetch`` are never wrapped here;
they reach the caller as whatever the storage layer raised.
"""


class LazyScrollError(Exception):
    """Base exception for all lazyscroll errors."""


class MalformedPageIndex(LazyScrollError, ValueError):
    """Raised for a negative page index or a non-positive page size."""


class ConfigurationError(LazyScrollError):
    """Raised when a next page exists but no trigger can be built for it."""


class UnsupportedRequestMode(ConfigurationError):
    """Raised when a strategy is asked for a request flavor it cannot serve."""
