from __future__ import annotations

from fastapi import Request
from services.api.app.services.payment_base import PaymentProvider
from services.api.app.settings import CheckoutSettings


def get_settings(request: Request) -> CheckoutSettings:
    return request.app.state.settings


def get_payment_provider(request: Request) -> PaymentProvider:
    provider = getattr(request.app.state, "payment_provider", None)
    if provider is None:
        # Only happens if the app is served without running its lifespan.
        raise RuntimeError("payment provider is not initialised")
    return provider
