from __future__ import annotations

from uuid import uuid4

from services.api.app.services.payment_base import CheckoutSession, CheckoutSessionRequest


class MockPaymentProvider:
    name = "MOCK"

    def __init__(self, base_url: str = "https://checkout.mock.local/pay") -> None:
        self._base_url = base_url.rstrip("/")

    def create_checkout_session(self, request: CheckoutSessionRequest) -> CheckoutSession:
        del request

        session_id = f"cs_mock_{uuid4().hex[:16]}"
        return CheckoutSession(session_id=session_id, url=f"{self._base_url}/{session_id}")

    def close(self) -> None:
        return None
