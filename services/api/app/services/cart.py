"""Cart validation and conversion into provider line items.

Both steps are pure: they return either their output or a `CheckoutError` and never
raise for bad input.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from packages.shared.schemas.checkout_v1 import CartItemV1
from pydantic import ValidationError
from services.api.app.models.checkout import CheckoutError, CheckoutErrorKind, LineItem

CART_ITEMS_KEY = "cartItems"

_MINOR_UNITS_PER_MAJOR = Decimal(100)


def extract_cart_items(body: Any) -> list[Any] | CheckoutError:
    """Return the raw `cartItems` list from a decoded request body."""

    if not isinstance(body, dict):
        return CheckoutError(
            kind=CheckoutErrorKind.INVALID_REQUEST_SHAPE,
            message=f"request body must be a JSON object, got {type(body).__name__}",
        )

    items = body.get(CART_ITEMS_KEY)
    if not isinstance(items, list):
        return CheckoutError(
            kind=CheckoutErrorKind.INVALID_REQUEST_SHAPE,
            message=f"{CART_ITEMS_KEY} must be a list, got {type(items).__name__}",
        )

    if not items:
        return CheckoutError(
            kind=CheckoutErrorKind.INVALID_REQUEST_SHAPE,
            message=f"{CART_ITEMS_KEY} must not be empty",
        )

    return items


def to_minor_units(price: float | int) -> int:
    # str() first so 19.99 is 19.99 and not 19.989999999999998
    amount = Decimal(str(price)) * _MINOR_UNITS_PER_MAJOR
    return int(amount.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def build_line_items(raw_items: list[Any], currency: str) -> list[LineItem] | CheckoutError:
    """Map cart items to line items in order.

    The first invalid item aborts the whole conversion; no partial list is returned.
    """

    line_items: list[LineItem] = []
    for index, raw in enumerate(raw_items):
        try:
            item = CartItemV1.model_validate(raw)
        except ValidationError as e:
            fields = ", ".join(
                ".".join(str(p) for p in err["loc"]) or "item" for err in e.errors()
            )
            return CheckoutError(
                kind=CheckoutErrorKind.INVALID_CART_ITEM,
                message=f"cart item {index} is invalid ({fields})",
                item_index=index,
            )

        line_items.append(
            LineItem(
                currency=currency,
                product_name=item.name,
                unit_amount_minor=to_minor_units(item.price),
                quantity=item.quantity,
            )
        )

    return line_items
