"""Shared checkout schema (v1).

These are the JSON shapes exchanged with the storefront. The storefront posts a cart,
the backend answers with either a redirect URL or an error string.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Stripe caps unit_amount at 8 digits of minor units.
MAX_UNIT_PRICE = 999_999.99


class CartItemV1(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0, le=MAX_UNIT_PRICE, allow_inf_nan=False)
    quantity: int = Field(..., ge=1)

    @field_validator("name", mode="before")
    @classmethod
    def _name_is_text(cls, value: Any) -> Any:
        if not isinstance(value, str):
            raise ValueError("name must be a string")
        return value

    @field_validator("name")
    @classmethod
    def _name_is_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value

    @field_validator("price", mode="before")
    @classmethod
    def _price_is_number(cls, value: Any) -> Any:
        # bool is an int subclass; "19.99" would otherwise be coerced
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("price must be a number")
        return value

    @field_validator("quantity", mode="before")
    @classmethod
    def _quantity_is_integer(cls, value: Any) -> Any:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError("quantity must be an integer")
        return value


class CheckoutRequestV1(BaseModel):
    cartItems: list[CartItemV1] = Field(..., min_length=1)  # noqa: N815


class CheckoutSessionCreatedV1(BaseModel):
    url: str


class CheckoutErrorV1(BaseModel):
    error: str
