"""
LINE Pay Online V4 Python SDK

Example usage:
    ```python
    from linepay_online import Currency, LinePayClient

    async with LinePayClient(
        channel_id="your-channel-id",
        channel_secret="your-channel-secret",
        env="sandbox",
    ) as client:
        # Build, validate and send a payment request
        response = await (
            client.payment()
            .set_amount(100)
            .set_currency(Currency.TWD)
            .set_order_id("ORDER_001")
            .add_package({"id": "PKG_1", "amount": 100, "products": [
                {"name": "Coffee", "quantity": 1, "price": 100},
            ]})
            .set_redirect_urls("https://example.com/confirm", "https://example.com/cancel")
            .send()
        )

        # Once the user approved the payment
        await client.payments.confirm(response.info.transaction_id, 100, Currency.TWD)
    ```
"""
from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Optional, Type, TypeVar, Union

import httpx
from pydantic import ValidationError

from .config import (
    DEFAULT_TIMEOUT,
    Environment,
    LinePaySettings,
    load_settings,
    resolve_environment,
    validate_credentials,
    validate_timeout,
)
from .models.errors import SUCCESS_CODE, LinePayAPIError, LinePayParseError, LinePayTimeoutError
from .resources.payments import PaymentsResource, RequestPayment
from .signing import build_query_string, generate_nonce, generate_signature, verify_signature

logger = logging.getLogger(__name__)

R = TypeVar("R")


def _serialize_body(body: Any) -> str:
    return json.dumps(body, separators=(",", ":"), ensure_ascii=False)


class LinePayClient:
    """
    LINE Pay API client.

    Provides access to the payment operations through ``payments`` and to
    the request builder through :meth:`payment`.

    Args:
        channel_id: Channel ID from the LINE Pay Merchant Center
        channel_secret: Channel Secret, also the request signing key
        env: ``"sandbox"`` (default) or ``"production"``
        timeout: Per-request deadline in milliseconds (default: 20000)
        http_client: Optional preconfigured ``httpx.AsyncClient``, not closed by :meth:`close`

    Raises:
        LinePayConfigError: If credentials, environment or timeout are invalid
    """

    USER_AGENT = "linepay-online-python/0.1.0"

    def __init__(
        self,
        channel_id: str,
        channel_secret: str,
        env: Union[Environment, str] = Environment.SANDBOX,
        timeout: int = DEFAULT_TIMEOUT,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self._channel_id, self._channel_secret = validate_credentials(channel_id, channel_secret)
        self._env = resolve_environment(env)
        self._base_url = self._env.base_url
        self._timeout = validate_timeout(timeout)
        self._client = http_client
        self._owns_client = http_client is None

        self.payments = PaymentsResource(self)

    @classmethod
    def from_settings(cls, settings: Optional[LinePaySettings] = None) -> "LinePayClient":
        """Create a client from ``LINE_PAY_*`` settings."""
        settings = settings or load_settings()
        return cls(
            channel_id=settings.channel_id,
            channel_secret=settings.channel_secret,
            env=settings.env,
            timeout=settings.timeout,
        )

    @property
    def channel_id(self) -> str:
        return self._channel_id

    @property
    def env(self) -> Environment:
        return self._env

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> int:
        return self._timeout

    def payment(self) -> RequestPayment:
        """Start a new payment request builder."""
        return RequestPayment(self)

    def verify_signature(self, data: str, signature: str) -> bool:
        """Verify a signature made with this client's channel secret."""
        return verify_signature(self._channel_secret, data, signature)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            # The per-call deadline in _request is the only timeout.
            self._client = httpx.AsyncClient(
                headers={"User-Agent": self.USER_AGENT},
                timeout=None,
            )
            self._owns_client = True
        return self._client

    async def _request(
        self,
        method: str,
        path: str,
        response_model: Type[R],
        body: Optional[dict[str, Any]] = None,
        params: Optional[dict[str, str]] = None,
    ) -> R:
        """Sign and send one request, then classify the response.

        Returns:
            The success envelope validated into ``response_model``

        Raises:
            LinePayTimeoutError: If no response arrived before the deadline
            LinePayParseError: If the body is not a JSON envelope
            LinePayHTTPError: If the HTTP status is not 2xx
            LinePayBusinessError: If ``returnCode`` is not ``"0000"``
            httpx.RequestError: On network failures, unwrapped
        """
        nonce = generate_nonce()
        query_string = build_query_string(params)
        body_string = _serialize_body(body) if body is not None and method != "GET" else ""
        signature = generate_signature(self._channel_secret, path, body_string, nonce, query_string)

        headers = {
            "Content-Type": "application/json",
            "X-LINE-ChannelId": self._channel_id,
            "X-LINE-Authorization-Nonce": nonce,
            "X-LINE-Authorization": signature,
        }
        url = f"{self._base_url}{path}"
        if query_string:
            url = f"{url}?{query_string}"

        client = await self._get_client()
        logger.debug("LINE Pay %s %s nonce=%s", method, url, nonce)

        try:
            response = await asyncio.wait_for(
                client.request(
                    method,
                    url,
                    headers=headers,
                    content=body_string.encode("utf-8") if method != "GET" else None,
                ),
                timeout=self._timeout / 1000,
            )
        except asyncio.TimeoutError:
            logger.warning("LINE Pay %s %s timed out after %sms", method, url, self._timeout)
            raise LinePayTimeoutError(self._timeout, url) from None

        return self._handle_response(response, response_model)

    def _handle_response(self, response: httpx.Response, response_model: Type[R]) -> R:
        """Classify a response into a success envelope or a typed error."""
        raw = response.text
        status = response.status_code

        try:
            data = json.loads(raw)
        except ValueError:
            data = None
        if not isinstance(data, dict):
            logger.warning("LINE Pay response is not a JSON envelope (HTTP %s)", status)
            raise LinePayParseError(status, raw)

        if not response.is_success or data.get("returnCode") != SUCCESS_CODE:
            error = LinePayAPIError.from_response(status, response.reason_phrase, data, raw)
            logger.warning(
                "LINE Pay API error [%s] %s (HTTP %s)",
                error.return_code,
                error.return_message,
                status,
            )
            raise error

        try:
            return response_model.model_validate(data)
        except ValidationError as e:
            logger.warning("LINE Pay success payload did not match %s", getattr(response_model, "__name__", response_model))
            raise LinePayParseError(status, raw) from e

    async def close(self) -> None:
        """Close the HTTP client if this client created it.

        A caller-provided ``http_client`` is left open for its owner.
        """
        if self._client and self._owns_client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "LinePayClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()
