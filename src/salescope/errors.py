"""Exceptions raised by salescope."""


class SalescopeError(Exception):
    """Base class for every error salescope raises on purpose."""


class EmptyDatasetError(SalescopeError):
    """Raised when a dataset with zero records is loaded."""


class ParseError(SalescopeError):
    """Raised when the CSV parser rejects its input."""


class NoDataLoadedError(SalescopeError):
    """Raised when an analysis or export runs before a successful load."""

    def __init__(self, message: str = "Please load data first"):
        super().__init__(message)


class ConfigError(SalescopeError):
    """Raised for an unreadable or malformed analysis config."""
