"""Response models for LINE Pay SDK.

Every endpoint answers with the same envelope::

    {"returnCode": "0000", "returnMessage": "Success.", "info": {...}}

Only ``returnCode == "0000"`` means success; the shape of ``info`` depends
on the endpoint. Info models are lenient: the API adds fields over time and
omits others depending on the payment method.
"""
from __future__ import annotations

from typing import Any, Generic, Optional, TypeVar

from .base import LinePayModel, Number, TransactionId
from .errors import SUCCESS_CODE

InfoT = TypeVar("InfoT")


class LinePayResponse(LinePayModel, Generic[InfoT]):
    """Response envelope shared by all endpoints."""

    return_code: str
    return_message: str = ""
    info: Optional[InfoT] = None

    @property
    def is_success(self) -> bool:
        return self.return_code == SUCCESS_CODE


class PaymentUrl(LinePayModel):
    web: str
    app: Optional[str] = None


class RequestPaymentInfo(LinePayModel):
    """Info of POST /v4/payments/request."""

    payment_url: PaymentUrl
    transaction_id: TransactionId
    payment_access_token: Optional[str] = None


class PayInfo(LinePayModel):
    method: Optional[str] = None
    amount: Optional[Number] = None
    credit_card_nickname: Optional[str] = None
    credit_card_brand: Optional[str] = None
    masked_credit_card_number: Optional[str] = None


class ProductInfo(LinePayModel):
    id: Optional[str] = None
    name: Optional[str] = None
    image_url: Optional[str] = None
    quantity: Optional[int] = None
    price: Optional[Number] = None
    original_price: Optional[Number] = None


class PackageInfo(LinePayModel):
    id: Optional[str] = None
    amount: Optional[Number] = None
    user_fee_amount: Optional[Number] = None
    name: Optional[str] = None
    products: list[ProductInfo] = []


class ShippingInfo(LinePayModel):
    method_id: Optional[str] = None
    fee_amount: Optional[Number] = None
    address: Optional[dict[str, Any]] = None


class PaymentConfirmationInfo(LinePayModel):
    """Info of the confirm and capture endpoints."""

    order_id: Optional[str] = None
    transaction_id: Optional[TransactionId] = None
    pay_info: list[PayInfo] = []
    packages: Optional[list[PackageInfo]] = None
    shipping: Optional[ShippingInfo] = None


class RefundInfo(LinePayModel):
    refund_transaction_id: Optional[TransactionId] = None
    refund_amount: Optional[Number] = None
    refund_date: Optional[str] = None


class PaymentDetailsInfo(LinePayModel):
    transaction_id: Optional[TransactionId] = None
    order_id: Optional[str] = None
    product_name: Optional[str] = None
    currency: Optional[str] = None
    amount: Optional[Number] = None
    pay_status: Optional[str] = None
    authorization_expire_date: Optional[str] = None
    reg_key: Optional[str] = None


class CheckStatusInfo(LinePayModel):
    shipping: Optional[ShippingInfo] = None


RequestPaymentResponse = LinePayResponse[RequestPaymentInfo]
ConfirmPaymentResponse = LinePayResponse[PaymentConfirmationInfo]
CapturePaymentResponse = LinePayResponse[PaymentConfirmationInfo]
VoidPaymentResponse = LinePayResponse[Any]
RefundPaymentResponse = LinePayResponse[RefundInfo]
PaymentDetailsResponse = LinePayResponse[list[PaymentDetailsInfo]]
CheckPaymentStatusResponse = LinePayResponse[CheckStatusInfo]
