"""Enumerations used in LINE Pay requests."""
from __future__ import annotations

from enum import Enum


class Currency(str, Enum):
    """Currencies accepted by LINE Pay (ISO 4217)."""

    USD = "USD"
    JPY = "JPY"
    TWD = "TWD"
    THB = "THB"


class PayType(str, Enum):
    """Payment type.

    NORMAL is a one-time payment, PREAPPROVED registers the user for
    automatic payments.
    """

    NORMAL = "NORMAL"
    PREAPPROVED = "PREAPPROVED"


class ConfirmUrlType(str, Enum):
    """How the merchant is notified once the user approves a payment."""

    CLIENT = "CLIENT"
    SERVER = "SERVER"
