from __future__ import annotations

import os
from dataclasses import dataclass

_DEFAULT_FRONTEND_ORIGIN = "https://evelinarudin.github.io"
_DEFAULT_SHOP_URL = f"{_DEFAULT_FRONTEND_ORIGIN}/blooberry-crochet"


@dataclass(frozen=True, slots=True)
class CheckoutSettings:
    payment_provider: str = "stripe"
    stripe_secret_key: str = ""
    frontend_origin: str = _DEFAULT_FRONTEND_ORIGIN
    success_url: str = f"{_DEFAULT_SHOP_URL}/success.html"
    cancel_url: str = f"{_DEFAULT_SHOP_URL}/cart.html"
    currency: str = "sek"
    mock_base_url: str = "https://checkout.mock.local/pay"
    host: str = "0.0.0.0"
    port: int = 10000
    log_level: str = "INFO"
    log_file: str | None = None

    @classmethod
    def from_env(cls) -> CheckoutSettings:
        """Read settings from the environment.

        Nothing here is validated against the provider; the payment factory does that at
        startup so a missing secret stops the process before it serves traffic.
        """

        defaults = cls()
        return cls(
            payment_provider=os.getenv("CHECKOUT_PAYMENT_PROVIDER", defaults.payment_provider)
            .strip()
            .lower(),
            stripe_secret_key=os.getenv("STRIPE_SECRET_KEY", "").strip(),
            frontend_origin=os.getenv("CHECKOUT_FRONTEND_ORIGIN", defaults.frontend_origin)
            .strip()
            .rstrip("/"),
            success_url=os.getenv("CHECKOUT_SUCCESS_URL", defaults.success_url).strip(),
            cancel_url=os.getenv("CHECKOUT_CANCEL_URL", defaults.cancel_url).strip(),
            currency=os.getenv("CHECKOUT_CURRENCY", defaults.currency).strip().lower(),
            mock_base_url=os.getenv("CHECKOUT_MOCK_BASE_URL", defaults.mock_base_url).strip(),
            host=os.getenv("HOST", defaults.host).strip(),
            port=int(os.getenv("PORT", str(defaults.port))),
            log_level=os.getenv("CHECKOUT_LOG_LEVEL", defaults.log_level).strip().upper(),
            log_file=os.getenv("CHECKOUT_LOG_FILE") or None,
        )
