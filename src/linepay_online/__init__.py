"""
LINE Pay Online V4 Python SDK

Signed, validated access to the LINE Pay Online V4 payment API.
"""

from .client import LinePayClient
from .config import DEFAULT_TIMEOUT, LINE_PAY_API_BASE_URL, Environment, LinePaySettings, load_settings
from .draft import AMOUNT_TOLERANCE, PaymentDraft, validate_draft
from .models.enums import ConfirmUrlType, Currency, PayType
from .models.errors import (
    ErrorCategory,
    ErrorCode,
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
from .models.payment import (
    CapturePaymentRequest,
    ConfirmPaymentRequest,
    Package,
    PaymentDetailsParams,
    PaymentOptions,
    PaymentRequestBody,
    Product,
    RedirectUrls,
    RefundPaymentRequest,
)
from .models.response import (
    CapturePaymentResponse,
    CheckPaymentStatusResponse,
    CheckStatusInfo,
    ConfirmPaymentResponse,
    LinePayResponse,
    PaymentConfirmationInfo,
    PaymentDetailsInfo,
    PaymentDetailsResponse,
    PayInfo,
    RefundInfo,
    RefundPaymentResponse,
    RequestPaymentInfo,
    RequestPaymentResponse,
    VoidPaymentResponse,
)
from .resources.payments import PaymentsResource, RequestPayment
from .signing import build_query_string, generate_nonce, generate_signature, verify_signature
from .utils import ConfirmCallback, parse_confirm_query, parse_confirm_url, validate_transaction_id

__version__ = "0.1.0"

__all__ = [
    # Client
    "LinePayClient",
    "PaymentsResource",
    "RequestPayment",
    # Configuration
    "DEFAULT_TIMEOUT",
    "LINE_PAY_API_BASE_URL",
    "Environment",
    "LinePaySettings",
    "load_settings",
    # Drafts
    "AMOUNT_TOLERANCE",
    "PaymentDraft",
    "validate_draft",
    # Enums
    "ConfirmUrlType",
    "Currency",
    "PayType",
    # Errors
    "ErrorCategory",
    "ErrorCode",
    "LinePayError",
    "LinePayConfigError",
    "LinePayValidationError",
    "LinePayFormatError",
    "LinePayAPIError",
    "LinePayHTTPError",
    "LinePayBusinessError",
    "LinePayParseError",
    "LinePayTimeoutError",
    # Request models
    "CapturePaymentRequest",
    "ConfirmPaymentRequest",
    "Package",
    "PaymentDetailsParams",
    "PaymentOptions",
    "PaymentRequestBody",
    "Product",
    "RedirectUrls",
    "RefundPaymentRequest",
    # Response models
    "LinePayResponse",
    "RequestPaymentInfo",
    "PaymentConfirmationInfo",
    "PayInfo",
    "RefundInfo",
    "PaymentDetailsInfo",
    "CheckStatusInfo",
    "RequestPaymentResponse",
    "ConfirmPaymentResponse",
    "CapturePaymentResponse",
    "VoidPaymentResponse",
    "RefundPaymentResponse",
    "PaymentDetailsResponse",
    "CheckPaymentStatusResponse",
    # Signing and callbacks
    "generate_signature",
    "verify_signature",
    "generate_nonce",
    "build_query_string",
    "ConfirmCallback",
    "parse_confirm_query",
    "parse_confirm_url",
    "validate_transaction_id",
]
