"""
Resources for the LINE Pay SDK.
"""
from .base import AsyncBaseResource
from .payments import PaymentsResource, RequestPayment

__all__ = [
    "AsyncBaseResource",
    "PaymentsResource",
    "RequestPayment",
]
