"""
Tests for error classes
"""
import pytest

from linepay_online import (
    ErrorCategory,
    LinePayAPIError,
    LinePayBusinessError,
    LinePayConfigError,
    LinePayError,
    LinePayFormatError,
    LinePayHTTPError,
    LinePayParseError,
    LinePayTimeoutError,
    LinePayValidationError,
)


class TestLinePayError:
    """Tests for the base error."""

    def test_defaults(self):
        """Should default the code and details."""
        error = LinePayError("Something went wrong")
        assert error.message == "Something went wrong"
        assert error.code == "LINE_PAY_ERROR"
        assert error.details == {}
        assert str(error) == "[LINE_PAY_ERROR] Something went wrong"

    def test_to_dict(self):
        """Should serialize name, code, message and details."""
        error = LinePayValidationError("OrderId is required", field="orderId")
        assert error.to_dict() == {
            "error": {
                "name": "LinePayValidationError",
                "code": "VALIDATION_ERROR",
                "message": "OrderId is required",
                "details": {"field": "orderId"},
            }
        }

    @pytest.mark.parametrize(
        "error",
        [
            LinePayConfigError("bad"),
            LinePayValidationError("bad"),
            LinePayFormatError("123"),
            LinePayHTTPError("9000", "x", 500),
            LinePayBusinessError("1104", "x", 200),
            LinePayParseError(400, "Bad Request"),
            LinePayTimeoutError(1000),
        ],
    )
    def test_all_errors_share_base(self, error):
        """Should derive every SDK error from LinePayError."""
        assert isinstance(error, LinePayError)


class TestFormatError:
    """Tests for LinePayFormatError."""

    def test_names_the_value(self):
        """Should include the offending value in the message."""
        error = LinePayFormatError("12ab")
        assert error.value == "12ab"
        assert "'12ab'" in error.message
        assert error.code == "FORMAT_ERROR"


class TestAPIError:
    """Tests for LinePayAPIError."""

    def test_message(self):
        """Should render the return code and message."""
        error = LinePayBusinessError("1150", "Transaction record not found.", 200)
        assert error.message == "LINE Pay API Error [1150]: Transaction record not found."
        assert error.code == "1150"

    @pytest.mark.parametrize(
        "code, category",
        [
            ("1104", ErrorCategory.AUTH),
            ("2101", ErrorCategory.PAYMENT),
            ("9000", ErrorCategory.INTERNAL),
            ("0110", ErrorCategory.OTHER),
            ("", ErrorCategory.OTHER),
        ],
    )
    def test_category(self, code, category):
        """Should classify return codes by leading digit."""
        assert LinePayAPIError(code, "x", 200).category == category

    def test_to_dict_includes_response_fields(self):
        """Should extend the base dictionary with response fields."""
        data = LinePayHTTPError("9000", "Internal error.", 500, '{"returnCode":"9000"}').to_dict()["error"]
        assert data["name"] == "LinePayHTTPError"
        assert data["return_code"] == "9000"
        assert data["http_status"] == 500
        assert data["raw_response"] == '{"returnCode":"9000"}'
        assert data["category"] == "internal"

    def test_from_response_non_2xx(self):
        """Should build an HTTP error for non-2xx statuses."""
        error = LinePayAPIError.from_response(
            404, "Not Found", {"returnCode": "1150", "returnMessage": "Not found."}, "raw"
        )
        assert isinstance(error, LinePayHTTPError)
        assert error.return_code == "1150"
        assert error.raw_response == "raw"

    def test_from_response_fallbacks(self):
        """Should fall back to HTTP_ERROR and the reason phrase."""
        error = LinePayAPIError.from_response(500, "Internal Server Error", {})
        assert error.return_code == "HTTP_ERROR"
        assert error.return_message == "Internal Server Error"

    def test_from_response_2xx(self):
        """Should build a business error for 2xx statuses."""
        error = LinePayAPIError.from_response(200, "OK", {"returnCode": 1172, "returnMessage": "Duplicate"})
        assert isinstance(error, LinePayBusinessError)
        assert error.return_code == "1172"


class TestParseAndTimeoutErrors:
    """Tests for parse and timeout errors."""

    def test_parse_error(self):
        """Should keep the status and raw body."""
        error = LinePayParseError(400, "Bad Request")
        assert error.return_code == "PARSE_ERROR"
        assert error.http_status == 400
        assert error.raw_response == "Bad Request"
        assert isinstance(error, LinePayBusinessError)

    def test_timeout_error(self):
        """Should report the timeout in milliseconds."""
        error = LinePayTimeoutError(20000, "https://sandbox-api-pay.line.me/v4/payments/request")
        assert error.message == "Request timeout after 20000ms"
        assert error.timeout == 20000
        assert error.code == "TIMEOUT_ERROR"
        assert error.details["url"].endswith("/v4/payments/request")
