"""LINE Pay SDK Models."""
from .base import LinePayModel
from .enums import ConfirmUrlType, Currency, PayType
from .errors import (
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
from .payment import (
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
from .response import (
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

__all__ = [
    "LinePayModel",
    "ConfirmUrlType",
    "Currency",
    "PayType",
    "ErrorCategory",
    "ErrorCode",
    "LinePayAPIError",
    "LinePayBusinessError",
    "LinePayConfigError",
    "LinePayError",
    "LinePayFormatError",
    "LinePayHTTPError",
    "LinePayParseError",
    "LinePayTimeoutError",
    "LinePayValidationError",
    "CapturePaymentRequest",
    "ConfirmPaymentRequest",
    "Package",
    "PaymentDetailsParams",
    "PaymentOptions",
    "PaymentRequestBody",
    "Product",
    "RedirectUrls",
    "RefundPaymentRequest",
    "CapturePaymentResponse",
    "CheckPaymentStatusResponse",
    "CheckStatusInfo",
    "ConfirmPaymentResponse",
    "LinePayResponse",
    "PaymentConfirmationInfo",
    "PaymentDetailsInfo",
    "PaymentDetailsResponse",
    "PayInfo",
    "RefundInfo",
    "RefundPaymentResponse",
    "RequestPaymentInfo",
    "RequestPaymentResponse",
    "VoidPaymentResponse",
]
