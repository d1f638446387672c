"""Checkout API service entrypoint."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from services.api.app.logging_utils import checkout_logger, setup_logger
from services.api.app.middleware import OriginGuardMiddleware
from services.api.app.routers.checkout import router as checkout_router
from services.api.app.services.payment_base import PaymentProvider
from services.api.app.services.payment_factory import get_payment_provider
from services.api.app.settings import CheckoutSettings


def create_app(
    settings: CheckoutSettings | None = None,
    provider: PaymentProvider | None = None,
) -> FastAPI:
    """Build the application.

    The payment provider is created once at startup (unless one is passed in) and shared
    by every request. A misconfigured provider makes startup fail.
    """

    settings = settings or CheckoutSettings.from_env()
    setup_logger("checkout", settings.log_level, settings.log_file)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.payment_provider = provider or get_payment_provider(settings)
        checkout_logger.info(
            "Checkout service starting on port %d (provider=%s, origin=%s)",
            settings.port,
            app.state.payment_provider.name,
            settings.frontend_origin,
        )
        try:
            yield
        finally:
            app.state.payment_provider.close()
            app.state.payment_provider = None
            checkout_logger.info("Checkout service shutting down")

    app = FastAPI(title="Checkout API", lifespan=lifespan)
    app.state.settings = settings

    allowed_origins = [settings.frontend_origin]
    app.add_middleware(OriginGuardMiddleware, allowed_origins=allowed_origins)
    # Added last so it runs first and answers preflight requests itself.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )

    app.include_router(checkout_router)

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings: CheckoutSettings = app.state.settings
    uvicorn.run(app, host=settings.host, port=settings.port)
