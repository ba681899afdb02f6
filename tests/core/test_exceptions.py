"""Tests for the exception hierarchy."""

import pytest

from ridehail.core.exceptions import (
    ConfigurationError,
    InvalidInputError,
    NotFoundError,
    PermanentError,
    RideHailError,
    StateError,
    TransientError,
    UpstreamUnavailableError,
)


@pytest.mark.unit
class TestExceptionHierarchy:
    def test_upstream_unavailable_is_transient(self):
        assert issubclass(UpstreamUnavailableError, TransientError)
        assert issubclass(TransientError, RideHailError)

    @pytest.mark.parametrize(
        "error_type", [InvalidInputError, NotFoundError, StateError, ConfigurationError]
    )
    def test_permanent_errors(self, error_type):
        assert issubclass(error_type, PermanentError)
        assert not issubclass(error_type, TransientError)

    def test_message_and_details(self):
        error = NotFoundError("ride not found", details={"ride_id": "ride-1"})
        assert str(error) == "ride not found"
        assert error.message == "ride not found"
        assert error.details == {"ride_id": "ride-1"}

    def test_details_default_to_empty(self):
        assert StateError("bad move").details == {}

    def test_domain_errors_are_not_value_errors(self):
        assert not issubclass(InvalidInputError, ValueError)
