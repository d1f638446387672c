from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CheckoutErrorKind(str, Enum):
    INVALID_REQUEST_SHAPE = "InvalidRequestShape"
    INVALID_CART_ITEM = "InvalidCartItem"
    PROVIDER_ERROR = "ProviderError"


# What the caller sees. Provider failures stay generic.
ERROR_MESSAGES: dict[CheckoutErrorKind, str] = {
    CheckoutErrorKind.INVALID_REQUEST_SHAPE: "Invalid cartItems data",
    CheckoutErrorKind.INVALID_CART_ITEM: "Invalid cart item format",
    CheckoutErrorKind.PROVIDER_ERROR: "Failed to create checkout session",
}

ERROR_STATUS_CODES: dict[CheckoutErrorKind, int] = {
    CheckoutErrorKind.INVALID_REQUEST_SHAPE: 400,
    CheckoutErrorKind.INVALID_CART_ITEM: 400,
    CheckoutErrorKind.PROVIDER_ERROR: 500,
}


@dataclass(frozen=True, slots=True)
class CheckoutError:
    """A failed checkout step.

    `message` is the server-side diagnostic; it is logged, never sent to the caller.
    """

    kind: CheckoutErrorKind
    message: str
    item_index: int | None = None

    @property
    def public_message(self) -> str:
        return ERROR_MESSAGES[self.kind]

    @property
    def status_code(self) -> int:
        return ERROR_STATUS_CODES[self.kind]


@dataclass(frozen=True, slots=True)
class LineItem:
    currency: str
    product_name: str
    unit_amount_minor: int
    quantity: int


@dataclass(frozen=True, slots=True)
class CheckoutResult:
    url: str | None = None
    error: CheckoutError | None = None
    session_id: str | None = None

    @classmethod
    def success(cls, url: str, session_id: str | None = None) -> CheckoutResult:
        return cls(url=url, session_id=session_id)

    @classmethod
    def failure(cls, kind: CheckoutErrorKind, message: str) -> CheckoutResult:
        return cls(error=CheckoutError(kind=kind, message=message))

    @property
    def ok(self) -> bool:
        return self.error is None
