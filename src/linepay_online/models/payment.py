"""Payment request models for LINE Pay SDK."""
from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import ConfigDict, Field

from .base import FiniteNumber, LinePayModel, NonNegativeNumber, Number
from .enums import ConfirmUrlType, Currency, PayType


class Product(LinePayModel):
    """A single product line inside a package."""

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    name: str
    image_url: Optional[str] = None
    quantity: int = Field(ge=0)
    price: FiniteNumber
    original_price: Optional[Number] = None

    @property
    def subtotal(self) -> Number:
        return self.quantity * self.price


class Package(LinePayModel):
    """A package of products. Its amount must equal the product subtotals."""

    model_config = ConfigDict(frozen=True)

    id: str
    amount: NonNegativeNumber
    user_fee: Optional[Number] = None
    name: Optional[str] = None
    products: tuple[Product, ...] = ()

    @property
    def products_total(self) -> Number:
        return sum(product.subtotal for product in self.products)


class RedirectUrls(LinePayModel):
    """Where the LINE Pay page sends the user after approval or cancellation."""

    model_config = ConfigDict(frozen=True)

    confirm_url: str
    cancel_url: str
    confirm_url_type: Optional[ConfirmUrlType] = None


class PaymentSettings(LinePayModel):
    capture: Optional[bool] = None
    pay_type: Optional[PayType] = None


class DisplaySettings(LinePayModel):
    locale: Optional[str] = None
    check_confirm_url_browser: Optional[bool] = None


class Recipient(LinePayModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    first_name_optional: Optional[str] = None
    last_name_optional: Optional[str] = None
    email: Optional[str] = None
    phone_no: Optional[str] = None


class ShippingAddress(LinePayModel):
    country: Optional[str] = None
    postal_code: Optional[str] = None
    state: Optional[str] = None
    city: Optional[str] = None
    detail: Optional[str] = None
    optional: Optional[str] = None
    recipient: Optional[Recipient] = None


class ShippingSettings(LinePayModel):
    type: Optional[str] = None
    fee_amount: Optional[Number] = None
    fee_inquiry_url: Optional[str] = None
    fee_inquiry_type: Optional[str] = None
    address: Optional[ShippingAddress] = None


class ExtraSettings(LinePayModel):
    branch_name: Optional[str] = None
    branch_id: Optional[str] = None


class PaymentOptions(LinePayModel):
    """Optional settings of a payment request."""

    model_config = ConfigDict(frozen=True)

    payment: Optional[PaymentSettings] = None
    display: Optional[DisplaySettings] = None
    shipping: Optional[ShippingSettings] = None
    extra: Optional[ExtraSettings] = None


class PaymentRequestBody(LinePayModel):
    """Body of POST /v4/payments/request."""

    model_config = ConfigDict(frozen=True)

    amount: NonNegativeNumber
    currency: Currency
    order_id: str = Field(min_length=1)
    packages: tuple[Package, ...] = Field(min_length=1)
    redirect_urls: RedirectUrls
    options: Optional[PaymentOptions] = None


class ConfirmPaymentRequest(LinePayModel):
    """Body of POST /v4/payments/{transactionId}/confirm."""

    amount: NonNegativeNumber
    currency: Currency


class CapturePaymentRequest(LinePayModel):
    """Body of POST /v4/payments/authorizations/{transactionId}/capture."""

    amount: NonNegativeNumber
    currency: Currency


class RefundPaymentRequest(LinePayModel):
    """Body of POST /v4/payments/{transactionId}/refund.

    Leaving ``refund_amount`` unset requests a full refund.
    """

    refund_amount: Optional[NonNegativeNumber] = None


class PaymentDetailsParams(LinePayModel):
    """Query of GET /v4/payments/requests."""

    fields: Optional[str] = None
    transaction_id: Optional[list[Union[str, int]]] = None
    order_id: Optional[list[str]] = None

    def to_query(self) -> dict[str, str]:
        """Comma-join list values and drop anything empty."""
        query: dict[str, Any] = {}
        if self.fields:
            query["fields"] = self.fields
        if self.transaction_id:
            query["transactionId"] = ",".join(str(v) for v in self.transaction_id)
        if self.order_id:
            query["orderId"] = ",".join(self.order_id)
        return query
