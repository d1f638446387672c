from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from services.api.app.models.checkout import LineItem


class PaymentProviderError(Exception):
    """Base class for payment provider errors."""


class PaymentProviderConfigError(PaymentProviderError):
    def __init__(self, provider: str, setting: str) -> None:
        super().__init__(f"{provider} provider is not configured: {setting} is required")
        self.provider = provider
        self.setting = setting


class PaymentProviderResponseError(PaymentProviderError):
    def __init__(self, provider: str, reason: str) -> None:
        super().__init__(f"{provider} returned an unusable checkout session: {reason}")
        self.provider = provider
        self.reason = reason


@dataclass(frozen=True, slots=True)
class CheckoutSessionRequest:
    line_items: list[LineItem]
    success_url: str
    cancel_url: str
    payment_method_types: tuple[str, ...] = ("card",)
    mode: str = "payment"


@dataclass(frozen=True, slots=True)
class CheckoutSession:
    session_id: str
    url: str


class PaymentProvider(Protocol):
    name: str

    def create_checkout_session(self, request: CheckoutSessionRequest) -> CheckoutSession: ...

    def close(self) -> None: ...
