"""
Payments resource for LINE Pay SDK.

Covers the seven Online V4 payment endpoints and the fluent
:class:`RequestPayment` builder.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional, Sequence, Union
from urllib.parse import quote

from ..draft import PaymentDraft, validate_draft
from ..models.base import Number
from ..models.enums import ConfirmUrlType, Currency
from ..models.payment import (
    CapturePaymentRequest,
    ConfirmPaymentRequest,
    Package,
    PaymentDetailsParams,
    PaymentOptions,
    PaymentRequestBody,
    RefundPaymentRequest,
)
from ..models.response import (
    CapturePaymentResponse,
    CheckPaymentStatusResponse,
    ConfirmPaymentResponse,
    PaymentDetailsResponse,
    RefundPaymentResponse,
    RequestPaymentResponse,
    VoidPaymentResponse,
)
from ..utils import validate_transaction_id
from .base import AsyncBaseResource

if TYPE_CHECKING:
    from ..client import LinePayClient


def _path_id(transaction_id: str) -> str:
    return quote(validate_transaction_id(transaction_id), safe="")


def _as_list(values: Any) -> Optional[list[Any]]:
    # A single id is a str (or an int for transaction ids), never a sequence of ids.
    if values is None:
        return None
    if isinstance(values, (str, int)):
        return [values]
    return list(values)


class PaymentsResource(AsyncBaseResource):
    """Resource for payment operations.

    Example:
        ```python
        async with LinePayClient(channel_id="...", channel_secret="...") as client:
            response = await client.payments.request(body)
            transaction_id = response.info.transaction_id

            # After the user approves the payment
            await client.payments.confirm(transaction_id, amount=100, currency=Currency.TWD)
        ```
    """

    async def request(
        self,
        body: Union[PaymentRequestBody, Dict[str, Any]],
    ) -> RequestPaymentResponse:
        """Request a payment (POST /v4/payments/request).

        Args:
            body: The request body, usually built with ``client.payment()``.
                A dict goes through the same draft checks as the builder.

        Returns:
            Envelope whose info carries the payment URL and transaction id
        """
        if isinstance(body, PaymentRequestBody):
            validate_draft(PaymentDraft.from_body(body))
        else:
            body = PaymentDraft.from_dict(body).to_body()
        return await self._post("/v4/payments/request", RequestPaymentResponse, body.to_dict())

    async def confirm(
        self,
        transaction_id: str,
        amount: Number,
        currency: Union[Currency, str],
    ) -> ConfirmPaymentResponse:
        """Confirm a payment the user approved.

        Args:
            transaction_id: 19-digit transaction id
            amount: Payment amount, must match the requested amount
            currency: Payment currency

        Returns:
            Envelope with the order, transaction and pay info
        """
        path = f"/v4/payments/{_path_id(transaction_id)}/confirm"
        request = self._build(ConfirmPaymentRequest, amount=amount, currency=currency)
        return await self._post(path, ConfirmPaymentResponse, request.to_dict())

    async def capture(
        self,
        transaction_id: str,
        amount: Number,
        currency: Union[Currency, str],
    ) -> CapturePaymentResponse:
        """Capture an authorized payment (requested with ``capture=False``)."""
        path = f"/v4/payments/authorizations/{_path_id(transaction_id)}/capture"
        request = self._build(CapturePaymentRequest, amount=amount, currency=currency)
        return await self._post(path, CapturePaymentResponse, request.to_dict())

    async def void(self, transaction_id: str) -> VoidPaymentResponse:
        """Void an authorized but not yet captured payment."""
        path = f"/v4/payments/authorizations/{_path_id(transaction_id)}/void"
        return await self._post(path, VoidPaymentResponse, {})

    async def refund(
        self,
        transaction_id: str,
        refund_amount: Optional[Number] = None,
    ) -> RefundPaymentResponse:
        """Refund a payment.

        Args:
            transaction_id: 19-digit transaction id
            refund_amount: Partial refund amount; omit for a full refund

        Returns:
            Envelope with the refund transaction id and date
        """
        path = f"/v4/payments/{_path_id(transaction_id)}/refund"
        request = self._build(RefundPaymentRequest, refund_amount=refund_amount)
        return await self._post(path, RefundPaymentResponse, request.to_dict())

    async def get_details(
        self,
        transaction_ids: Optional[Union[str, int, Sequence[Union[str, int]]]] = None,
        order_ids: Optional[Union[str, Sequence[str]]] = None,
        fields: Optional[str] = None,
    ) -> PaymentDetailsResponse:
        """Look up payments by transaction id and/or order id.

        Args:
            transaction_ids: Transaction id or ids to look up
            order_ids: Merchant order id or ids to look up
            fields: Restrict the info to ``"TRANSACTION"``, ``"ORDER"``, ...

        Returns:
            Envelope whose info is a list of payment details
        """
        params = self._build(
            PaymentDetailsParams,
            fields=fields,
            transaction_id=_as_list(transaction_ids),
            order_id=_as_list(order_ids),
        )
        return await self._get("/v4/payments/requests", PaymentDetailsResponse, params.to_query())

    async def check_status(self, transaction_id: str) -> CheckPaymentStatusResponse:
        """Check the status of a payment request."""
        path = f"/v4/payments/requests/{_path_id(transaction_id)}/check"
        return await self._get(path, CheckPaymentStatusResponse)


class RequestPayment:
    """Fluent builder for POST /v4/payments/request.

    Every setter returns a new builder; the underlying draft is never
    modified in place.

    Example:
        ```python
        response = await (
            client.payment()
            .set_amount(100)
            .set_currency(Currency.TWD)
            .set_order_id("ORDER_001")
            .add_package(package)
            .set_redirect_urls("https://example.com/confirm", "https://example.com/cancel")
            .send()
        )
        ```
    """

    def __init__(self, client: "LinePayClient", draft: Optional[PaymentDraft] = None) -> None:
        self._client = client
        self.draft = draft or PaymentDraft()

    def _with(self, draft: PaymentDraft) -> "RequestPayment":
        return RequestPayment(self._client, draft)

    def set_amount(self, amount: Number) -> "RequestPayment":
        return self._with(self.draft.with_amount(amount))

    def set_currency(self, currency: Union[Currency, str]) -> "RequestPayment":
        return self._with(self.draft.with_currency(currency))

    def set_order_id(self, order_id: str) -> "RequestPayment":
        return self._with(self.draft.with_order_id(order_id))

    def add_package(self, package: Union[Package, Dict[str, Any]]) -> "RequestPayment":
        return self._with(self.draft.add_package(package))

    def set_redirect_urls(
        self,
        confirm_url: str,
        cancel_url: str,
        confirm_url_type: Optional[ConfirmUrlType] = None,
    ) -> "RequestPayment":
        return self._with(self.draft.with_redirect_urls(confirm_url, cancel_url, confirm_url_type))

    def set_options(self, options: Union[PaymentOptions, Dict[str, Any]]) -> "RequestPayment":
        return self._with(self.draft.with_options(options))

    def validate(self) -> None:
        self.draft.validate()

    def to_body(self) -> PaymentRequestBody:
        return self.draft.to_body()

    async def send(self) -> RequestPaymentResponse:
        """Validate the draft and send it."""
        return await self._client.payments.request(self.to_body())

    def __repr__(self) -> str:
        return f"RequestPayment({self.draft!r})"


__all__ = [
    "PaymentsResource",
    "RequestPayment",
]
