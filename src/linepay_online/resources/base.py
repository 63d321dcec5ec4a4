"""
Base resource class for LINE Pay SDK.

Resources turn typed calls into signed requests on the owning client.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional, Type, TypeVar

from pydantic import ValidationError

from ..models.base import LinePayModel
from ..models.errors import LinePayValidationError

if TYPE_CHECKING:
    from ..client import LinePayClient

M = TypeVar("M", bound=LinePayModel)
R = TypeVar("R")


class AsyncBaseResource:
    """Base class for async API resources.

    Attributes:
        _client: The client instance
    """

    def __init__(self, client: "LinePayClient") -> None:
        """Initialize the resource.

        Args:
            client: The client instance
        """
        self._client = client

    async def _get(
        self,
        path: str,
        response_model: Type[R],
        params: Optional[Dict[str, str]] = None,
    ) -> R:
        """Make a signed GET request.

        Args:
            path: API endpoint path
            response_model: Envelope model to validate a success into
            params: Query parameters

        Returns:
            The validated response envelope
        """
        return await self._client._request("GET", path, response_model, params=params)

    async def _post(
        self,
        path: str,
        response_model: Type[R],
        data: Optional[Dict[str, Any]] = None,
    ) -> R:
        """Make a signed POST request.

        Args:
            path: API endpoint path
            response_model: Envelope model to validate a success into
            data: Request body

        Returns:
            The validated response envelope
        """
        return await self._client._request("POST", path, response_model, body=data)

    @staticmethod
    def _build(model: Type[M], **values: Any) -> M:
        """Build a request model, reporting bad input as LinePayValidationError."""
        try:
            return model(**values)
        except ValidationError as exc:
            error = exc.errors()[0]
            field = ".".join(str(part) for part in error["loc"]) or None
            raise LinePayValidationError(f"{field}: {error['msg']}", field=field) from exc


__all__ = ["AsyncBaseResource"]
