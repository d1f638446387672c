from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from packages.shared.schemas.checkout_v1 import CheckoutErrorV1, CheckoutSessionCreatedV1
from services.api.app.deps import get_payment_provider, get_settings
from services.api.app.logging_utils import checkout_logger
from services.api.app.models.checkout import CheckoutError, CheckoutErrorKind, CheckoutResult
from services.api.app.services.cart import build_line_items, extract_cart_items
from services.api.app.services.checkout import create_checkout_session
from services.api.app.services.payment_base import PaymentProvider
from services.api.app.settings import CheckoutSettings
from starlette.concurrency import run_in_threadpool

router = APIRouter()

_NOT_JSON = object()


def render_checkout_error(error: CheckoutError) -> JSONResponse:
    return JSONResponse(
        status_code=error.status_code,
        content=CheckoutErrorV1(error=error.public_message).model_dump(),
    )


def render_checkout_result(result: CheckoutResult) -> JSONResponse:
    if result.error is not None:
        return render_checkout_error(result.error)

    assert result.url is not None
    return JSONResponse(
        status_code=200,
        content=CheckoutSessionCreatedV1(url=result.url).model_dump(),
    )


async def _read_json(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        return _NOT_JSON


@router.post(
    "/create-checkout-session",
    response_model=CheckoutSessionCreatedV1,
    responses={400: {"model": CheckoutErrorV1}, 500: {"model": CheckoutErrorV1}},
)
async def create_checkout_session_endpoint(
    request: Request,
    provider: PaymentProvider = Depends(get_payment_provider),
    settings: CheckoutSettings = Depends(get_settings),
) -> JSONResponse:
    body = await _read_json(request)
    if body is _NOT_JSON:
        error = CheckoutError(
            kind=CheckoutErrorKind.INVALID_REQUEST_SHAPE,
            message="request body is not valid JSON",
        )
        checkout_logger.warning("Rejected checkout request: %s", error.message)
        return render_checkout_error(error)

    raw_items = extract_cart_items(body)
    if isinstance(raw_items, CheckoutError):
        checkout_logger.warning("Rejected checkout request: %s", raw_items.message)
        return render_checkout_error(raw_items)

    line_items = build_line_items(raw_items, settings.currency)
    if isinstance(line_items, CheckoutError):
        checkout_logger.warning("Rejected checkout request: %s", line_items.message)
        return render_checkout_error(line_items)

    # The provider SDK blocks; keep it off the event loop.
    result = await run_in_threadpool(
        create_checkout_session,
        provider,
        line_items,
        success_url=settings.success_url,
        cancel_url=settings.cancel_url,
    )
    return render_checkout_result(result)
