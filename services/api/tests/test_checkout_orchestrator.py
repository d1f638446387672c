from __future__ import annotations

import pytest
from services.api.app.models.checkout import CheckoutErrorKind, CheckoutResult, LineItem
from services.api.app.services.checkout import create_checkout_session
from services.api.app.services.payment_base import (
    CheckoutSession,
    CheckoutSessionRequest,
    PaymentProviderError,
)
from services.api.app.services.payment_mock import MockPaymentProvider

_LINE_ITEMS = [LineItem(currency="sek", product_name="Scarf", unit_amount_minor=15000, quantity=2)]


class _RaisingProvider:
    name = "RAISING"

    def __init__(self, exc: Exception) -> None:
        self._exc = exc

    def create_checkout_session(self, request: CheckoutSessionRequest) -> CheckoutSession:
        del request
        raise self._exc

    def close(self) -> None:
        return None


def test_success_result_carries_url() -> None:
    result = create_checkout_session(
        MockPaymentProvider(base_url="https://pay.example"),
        _LINE_ITEMS,
        success_url="https://shop.example/success.html",
        cancel_url="https://shop.example/cart.html",
    )

    assert result.ok
    assert result.error is None
    assert result.session_id is not None
    assert result.url == f"https://pay.example/{result.session_id}"


@pytest.mark.parametrize(
    "exc",
    [PaymentProviderError("card_declined"), TimeoutError("read timed out"), KeyError("url")],
)
def test_provider_failure_becomes_provider_error(exc: Exception) -> None:
    result = create_checkout_session(
        _RaisingProvider(exc),
        _LINE_ITEMS,
        success_url="https://shop.example/success.html",
        cancel_url="https://shop.example/cart.html",
    )

    assert not result.ok
    assert result.url is None
    assert result.error is not None
    assert result.error.kind == CheckoutErrorKind.PROVIDER_ERROR
    assert result.error.status_code == 500
    assert result.error.public_message == "Failed to create checkout session"


def test_failure_constructor() -> None:
    result = CheckoutResult.failure(CheckoutErrorKind.PROVIDER_ERROR, "boom")
    assert result.error is not None
    assert result.error.message == "boom"
    assert CheckoutResult.success("https://pay.example/abc").ok
