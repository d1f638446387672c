from __future__ import annotations

from services.api.app.logging_utils import checkout_logger
from services.api.app.models.checkout import CheckoutErrorKind, CheckoutResult, LineItem
from services.api.app.services.payment_base import CheckoutSessionRequest, PaymentProvider


def create_checkout_session(
    provider: PaymentProvider,
    line_items: list[LineItem],
    *,
    success_url: str,
    cancel_url: str,
) -> CheckoutResult:
    """Ask the provider for a card-only, one-time payment session.

    This is the only step that talks to the network. Any provider failure becomes a
    ProviderError result; the details go to the log, not to the caller.
    """

    request = CheckoutSessionRequest(
        line_items=line_items,
        success_url=success_url,
        cancel_url=cancel_url,
    )

    try:
        session = provider.create_checkout_session(request)
    except Exception as e:
        checkout_logger.exception(
            "Error creating checkout session via %s: %s", provider.name, e
        )
        return CheckoutResult.failure(CheckoutErrorKind.PROVIDER_ERROR, str(e))

    checkout_logger.info(
        "Created checkout session %s via %s (%d line items)",
        session.session_id,
        provider.name,
        len(line_items),
    )
    return CheckoutResult.success(session.url, session_id=session.session_id)
