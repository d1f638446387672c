from __future__ import annotations

from services.api.app.services.payment_base import PaymentProvider
from services.api.app.services.payment_mock import MockPaymentProvider
from services.api.app.settings import CheckoutSettings


def get_payment_provider(settings: CheckoutSettings) -> PaymentProvider:
    """Build the payment provider named by CHECKOUT_PAYMENT_PROVIDER.

    Defaults to Stripe. Set CHECKOUT_PAYMENT_PROVIDER=mock for local dev without a key.
    """

    provider = settings.payment_provider

    if provider == "mock":
        return MockPaymentProvider(base_url=settings.mock_base_url)

    if provider == "stripe":
        if not settings.stripe_secret_key:
            raise ValueError("STRIPE_SECRET_KEY is required when CHECKOUT_PAYMENT_PROVIDER=stripe")

        from services.api.app.services.payment_stripe import StripePaymentProvider

        return StripePaymentProvider(api_key=settings.stripe_secret_key)

    raise ValueError(f"Unknown CHECKOUT_PAYMENT_PROVIDER={provider!r}. Expected stripe or mock.")
