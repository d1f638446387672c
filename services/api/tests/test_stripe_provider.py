from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest
import stripe
from services.api.app.models.checkout import LineItem
from services.api.app.services.payment_base import (
    CheckoutSessionRequest,
    PaymentProviderConfigError,
    PaymentProviderError,
    PaymentProviderResponseError,
)
from services.api.app.services.payment_stripe import StripePaymentProvider


class _FakeSessions:
    def __init__(self, result: Any = None, exc: Exception | None = None) -> None:
        self._result = result
        self._exc = exc
        self.calls: list[dict[str, Any]] = []

    def create(self, params: dict[str, Any]) -> Any:
        self.calls.append(params)
        if self._exc is not None:
            raise self._exc
        return self._result


def _fake_client(sessions: _FakeSessions) -> SimpleNamespace:
    return SimpleNamespace(checkout=SimpleNamespace(sessions=sessions))


def _request() -> CheckoutSessionRequest:
    return CheckoutSessionRequest(
        line_items=[
            LineItem(currency="sek", product_name="Scarf", unit_amount_minor=15000, quantity=2),
            LineItem(currency="sek", product_name="Beanie", unit_amount_minor=9950, quantity=1),
        ],
        success_url="https://shop.example/success.html",
        cancel_url="https://shop.example/cart.html",
    )


def test_create_checkout_session_sends_price_data() -> None:
    sessions = _FakeSessions(result=SimpleNamespace(id="cs_test_1", url="https://pay.example/abc"))
    provider = StripePaymentProvider("sk_test_123", client=_fake_client(sessions))

    session = provider.create_checkout_session(_request())

    assert session.session_id == "cs_test_1"
    assert session.url == "https://pay.example/abc"
    assert sessions.calls == [
        {
            "payment_method_types": ["card"],
            "mode": "payment",
            "line_items": [
                {
                    "price_data": {
                        "currency": "sek",
                        "product_data": {"name": "Scarf"},
                        "unit_amount": 15000,
                    },
                    "quantity": 2,
                },
                {
                    "price_data": {
                        "currency": "sek",
                        "product_data": {"name": "Beanie"},
                        "unit_amount": 9950,
                    },
                    "quantity": 1,
                },
            ],
            "success_url": "https://shop.example/success.html",
            "cancel_url": "https://shop.example/cart.html",
        }
    ]


@pytest.mark.parametrize(
    "exc",
    [
        stripe.AuthenticationError("Invalid API Key provided"),
        stripe.APIConnectionError("Network error"),
        stripe.InvalidRequestError("Invalid currency", param="currency"),
    ],
)
def test_stripe_errors_are_wrapped(exc: Exception) -> None:
    provider = StripePaymentProvider("sk_test_123", client=_fake_client(_FakeSessions(exc=exc)))

    with pytest.raises(PaymentProviderError) as info:
        provider.create_checkout_session(_request())

    assert info.value.__cause__ is exc


def test_session_without_url_is_an_error() -> None:
    sessions = _FakeSessions(result=SimpleNamespace(id="cs_test_1", url=None))
    provider = StripePaymentProvider("sk_test_123", client=_fake_client(sessions))

    with pytest.raises(PaymentProviderResponseError, match="no url"):
        provider.create_checkout_session(_request())


def test_missing_api_key_is_rejected() -> None:
    with pytest.raises(PaymentProviderConfigError, match="STRIPE_SECRET_KEY"):
        StripePaymentProvider("")


def test_closed_provider_refuses_new_sessions() -> None:
    sessions = _FakeSessions(result=SimpleNamespace(id="cs_test_1", url="https://pay.example/abc"))
    provider = StripePaymentProvider("sk_test_123", client=_fake_client(sessions))

    provider.close()
    provider.close()

    with pytest.raises(PaymentProviderError, match="closed"):
        provider.create_checkout_session(_request())
    assert sessions.calls == []
