"""
Tests for exception classes.
"""

import pytest

from kassa_connect.errors import (
    ApiError,
    KassaError,
    PaymentDecodeError,
    PaymentEncodeError,
    PaymentSubmittedError,
)


class TestHierarchy:
    """All library errors share one base."""

    @pytest.mark.parametrize(
        "exc",
        [
            ApiError(),
            PaymentDecodeError("x"),
            PaymentEncodeError("x"),
            PaymentSubmittedError("k"),
        ],
    )
    def test_is_kassa_error(self, exc):
        """Every error can be caught as KassaError."""
        assert isinstance(exc, KassaError)


class TestApiError:
    """Tests for ApiError."""

    def test_message_format(self):
        """Message names the description and the parameter."""
        exc = ApiError(
            type="error",
            id="x",
            code="invalid_request",
            description="bad field",
            parameter="amount.value",
        )
        assert str(exc) == "api returned error: bad field (in parameter amount.value)"

    def test_attributes(self):
        """Envelope fields are kept as attributes."""
        exc = ApiError(code="forbidden", description="no access")
        assert exc.type == "error"
        assert exc.code == "forbidden"
        assert exc.parameter == ""


class TestDecodeError:
    """Tests for PaymentDecodeError."""

    def test_attributes(self):
        """Status code and raw body are kept for diagnostics."""
        exc = PaymentDecodeError("body is not JSON", status_code=502, body=b"<html>")
        assert exc.status_code == 502
        assert exc.body == b"<html>"
        assert "502" in str(exc)
        assert "body is not JSON" in str(exc)


class TestSubmittedError:
    """Tests for PaymentSubmittedError."""

    def test_message(self):
        """Message names the idempotence key."""
        exc = PaymentSubmittedError("abc")
        assert exc.idempotence_key == "abc"
        assert "'abc'" in str(exc)
