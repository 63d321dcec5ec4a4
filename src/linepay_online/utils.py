"""Helpers for transaction ids and the confirm/cancel redirect callback."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Union
from urllib.parse import parse_qs, urlsplit

from .models.errors import LinePayFormatError, LinePayValidationError

_TRANSACTION_ID_RE = re.compile(r"[0-9]{19}")

QueryValue = Union[str, Sequence[str], None]


@dataclass(frozen=True)
class ConfirmCallback:
    """Parameters LINE Pay appends to the confirm URL."""

    transaction_id: str
    order_id: Optional[str] = None


def validate_transaction_id(transaction_id: Any) -> str:
    """Return ``transaction_id`` if it is exactly 19 digits.

    Raises:
        LinePayFormatError: For anything else
    """
    if not isinstance(transaction_id, str) or not _TRANSACTION_ID_RE.fullmatch(transaction_id):
        raise LinePayFormatError(transaction_id)
    return transaction_id


def _first(value: QueryValue) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    return value[0] if len(value) > 0 else None


def parse_confirm_query(query: Mapping[str, QueryValue]) -> ConfirmCallback:
    """Extract ``transactionId`` and ``orderId`` from callback query params.

    Duplicated parameters resolve to their first value.

    Raises:
        LinePayValidationError: If ``transactionId`` is missing or empty
    """
    transaction_id = _first(query.get("transactionId"))
    order_id = _first(query.get("orderId"))

    if not transaction_id:
        raise LinePayValidationError("Missing transactionId in callback query", field="transactionId")

    return ConfirmCallback(transaction_id=transaction_id, order_id=order_id)


def parse_confirm_url(url: str) -> ConfirmCallback:
    """Same as :func:`parse_confirm_query`, starting from the full redirect URL."""
    return parse_confirm_query(parse_qs(urlsplit(url).query, keep_blank_values=True))
