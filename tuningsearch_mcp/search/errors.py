"""Error types raised by the TuningSearch adapter."""
from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Required configuration is missing at startup."""


class SearchError(Exception):
    """Base class for failures while serving a tool call."""


class ValidationError(SearchError):
    pass


class RequestFailure(SearchError):
    """The provider answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int, reason: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason


class TransportFailure(SearchError):
    """The provider could not be reached or returned an unreadable body."""
