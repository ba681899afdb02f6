"""Standardized exception hierarchy for the ride-hailing services."""

from typing import Any


class RideHailError(Exception):
    """Base exception for all ride-hailing errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class TransientError(RideHailError):
    """Errors that may succeed on retry."""

    pass


class UpstreamUnavailableError(TransientError):
    """Geocoding or dispatch backend temporarily unavailable."""

    pass


class PermanentError(RideHailError):
    """Errors that will not succeed on retry."""

    pass


class InvalidInputError(PermanentError):
    """Out-of-range coordinates or a malformed request."""

    pass


class NotFoundError(PermanentError):
    """Requested ride or driver does not exist."""

    pass


class StateError(PermanentError):
    """Invalid ride status transition."""

    pass


class ConfigurationError(PermanentError):
    """Missing or invalid configuration."""

    pass
