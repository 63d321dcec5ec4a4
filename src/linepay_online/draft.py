"""Payment request drafts and their validation.

A :class:`PaymentDraft` is an immutable value. Each ``with_*`` /
``add_package`` call returns a new draft, so drafts can be shared and
extended freely. :func:`validate_draft` checks it, and
:meth:`PaymentDraft.to_body` turns a valid draft into the wire body.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Type, TypeVar, Union

from pydantic import ValidationError

from .models.base import LinePayModel, Number, is_finite_number
from .models.enums import ConfirmUrlType, Currency
from .models.errors import LinePayValidationError
from .models.payment import Package, PaymentOptions, PaymentRequestBody, RedirectUrls

# Absolute tolerance for amount sums, absorbs float rounding.
AMOUNT_TOLERANCE = 0.01

M = TypeVar("M", bound=LinePayModel)


def _coerce(model: Type[M], value: Any, field: str, label: str) -> M:
    if isinstance(value, model):
        return value
    try:
        return model.model_validate(value)
    except ValidationError as exc:
        raise LinePayValidationError(f"Invalid {label}: {exc.errors()[0]['msg']}", field=field) from exc


def format_amount(value: Number) -> str:
    """Render 100.0 as ``100`` and 99.5 as ``99.5``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class PaymentDraft:
    """An in-progress payment request."""

    amount: Optional[Number] = None
    currency: Optional[Currency] = None
    order_id: Optional[str] = None
    packages: tuple[Package, ...] = ()
    redirect_urls: Optional[RedirectUrls] = None
    options: Optional[PaymentOptions] = None

    @classmethod
    def from_body(cls, body: PaymentRequestBody) -> "PaymentDraft":
        return cls(
            amount=body.amount,
            currency=Currency(body.currency),
            order_id=body.order_id,
            packages=tuple(body.packages),
            redirect_urls=body.redirect_urls,
            options=body.options,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PaymentDraft":
        """Build a draft from a request body dict, camelCase or snake_case.

        Missing keys stay unset so :func:`validate_draft` reports them.
        """

        def get(camel: str, snake: str) -> Any:
            return data[camel] if camel in data else data.get(snake)

        draft = cls()
        if data.get("amount") is not None:
            draft = draft.with_amount(data["amount"])
        if data.get("currency") is not None:
            draft = draft.with_currency(data["currency"])
        if get("orderId", "order_id") is not None:
            draft = draft.with_order_id(get("orderId", "order_id"))
        packages = data.get("packages") or ()
        if isinstance(packages, (str, Mapping)):
            raise LinePayValidationError("Packages must be a list", field="packages")
        for package in packages:
            draft = draft.add_package(package)
        urls = get("redirectUrls", "redirect_urls")
        if urls is not None:
            urls = _coerce(RedirectUrls, urls, "redirectUrls", "redirect URLs")
            draft = dataclasses.replace(draft, redirect_urls=urls)
        if data.get("options") is not None:
            draft = draft.with_options(data["options"])
        return draft

    def with_amount(self, amount: Number) -> "PaymentDraft":
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            raise LinePayValidationError(f"Amount must be a number, got {amount!r}", field="amount")
        return dataclasses.replace(self, amount=amount)

    def with_currency(self, currency: Union[Currency, str]) -> "PaymentDraft":
        try:
            return dataclasses.replace(self, currency=Currency(currency))
        except ValueError:
            raise LinePayValidationError(f"Unsupported currency: {currency!r}", field="currency") from None

    def with_order_id(self, order_id: str) -> "PaymentDraft":
        return dataclasses.replace(self, order_id=order_id)

    def add_package(self, package: Union[Package, dict[str, Any]]) -> "PaymentDraft":
        index = len(self.packages)
        package = _coerce(Package, package, f"packages[{index}]", f"package at index {index}")
        return dataclasses.replace(self, packages=self.packages + (package,))

    def with_redirect_urls(
        self,
        confirm_url: str,
        cancel_url: str,
        confirm_url_type: Optional[ConfirmUrlType] = None,
    ) -> "PaymentDraft":
        urls = RedirectUrls(
            confirm_url=confirm_url,
            cancel_url=cancel_url,
            confirm_url_type=confirm_url_type,
        )
        return dataclasses.replace(self, redirect_urls=urls)

    def with_options(self, options: Union[PaymentOptions, dict[str, Any]]) -> "PaymentDraft":
        options = _coerce(PaymentOptions, options, "options", "options")
        return dataclasses.replace(self, options=options)

    def validate(self) -> None:
        validate_draft(self)

    def to_body(self) -> PaymentRequestBody:
        """Validate the draft and build the request body.

        Raises:
            LinePayValidationError: If any check fails
        """
        validate_draft(self)
        return PaymentRequestBody(
            amount=self.amount,
            currency=self.currency,
            order_id=self.order_id,
            packages=self.packages,
            redirect_urls=self.redirect_urls,
            options=self.options,
        )


def validate_draft(draft: PaymentDraft) -> None:
    """Check a draft, raising on the first failed check.

    Checks run in order: amount, currency, order id, packages present,
    redirect URLs, package sum vs amount, then product sums per package.
    """
    if not is_finite_number(draft.amount) or draft.amount < 0:
        raise LinePayValidationError("Amount is required and must be non-negative", field="amount")
    if draft.currency is None:
        raise LinePayValidationError("Currency is required", field="currency")
    if not draft.order_id:
        raise LinePayValidationError("OrderId is required", field="orderId")
    if len(draft.packages) == 0:
        raise LinePayValidationError("At least one package is required", field="packages")
    urls = draft.redirect_urls
    if urls is None or not urls.confirm_url or not urls.cancel_url:
        raise LinePayValidationError("Redirect URLs are required", field="redirectUrls")

    packages_total = sum(pkg.amount for pkg in draft.packages)
    if not is_finite_number(packages_total) or abs(packages_total - draft.amount) > AMOUNT_TOLERANCE:
        raise LinePayValidationError(
            f"Sum of package amounts ({format_amount(packages_total)}) "
            f"does not match total amount ({format_amount(draft.amount)})",
            field="packages",
        )

    for index, pkg in enumerate(draft.packages):
        products_total = pkg.products_total
        if not is_finite_number(products_total) or abs(products_total - pkg.amount) > AMOUNT_TOLERANCE:
            raise LinePayValidationError(
                f"Sum of product amounts ({format_amount(products_total)}) in package index {index} "
                f"does not match package amount ({format_amount(pkg.amount)})",
                field=f"packages[{index}].products",
            )
