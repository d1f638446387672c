from __future__ import annotations

from typing import Any

import stripe
from services.api.app.models.checkout import LineItem
from services.api.app.services.payment_base import (
    CheckoutSession,
    CheckoutSessionRequest,
    PaymentProviderConfigError,
    PaymentProviderError,
    PaymentProviderResponseError,
)


def _to_stripe_line_item(item: LineItem) -> dict[str, Any]:
    return {
        "price_data": {
            "currency": item.currency,
            "product_data": {"name": item.product_name},
            "unit_amount": item.unit_amount_minor,
        },
        "quantity": item.quantity,
    }


class StripePaymentProvider:
    """Creates hosted Stripe Checkout sessions with inline `price_data`.

    The SDK client holds no per-request state, so one instance is shared by all requests.
    """

    name = "STRIPE"

    def __init__(self, api_key: str, client: Any | None = None) -> None:
        if not api_key:
            raise PaymentProviderConfigError(self.name, "STRIPE_SECRET_KEY")
        self._client = client if client is not None else stripe.StripeClient(api_key)

    def create_checkout_session(self, request: CheckoutSessionRequest) -> CheckoutSession:
        params = {
            "payment_method_types": list(request.payment_method_types),
            "mode": request.mode,
            "line_items": [_to_stripe_line_item(item) for item in request.line_items],
            "success_url": request.success_url,
            "cancel_url": request.cancel_url,
        }

        if self._client is None:
            raise PaymentProviderError("Stripe provider is closed")

        try:
            session = self._client.checkout.sessions.create(params=params)
        except stripe.StripeError as e:
            raise PaymentProviderError(f"Stripe checkout session failed: {e}") from e

        url = getattr(session, "url", None)
        if not url:
            raise PaymentProviderResponseError(self.name, "session has no url")

        return CheckoutSession(session_id=session.id, url=url)

    def close(self) -> None:
        """Drop the SDK client.

        StripeClient exposes no public close; its HTTP session is released when the
        client is garbage collected. Later calls fail with PaymentProviderError.
        """

        self._client = None
