# starter/api/endpoints/payments.py
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool

from starter.core.config import Settings, get_settings
from starter.core.dependencies import get_payment_provider_factory
from starter.core.payment_intents import create_payment_intent, require_stripe_secret_key
from starter.core.payment_provider import PaymentProviderFactory
from starter.schemas.payment import ErrorResponse, PaymentIntentCreateResponse

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    "/create-payment-intent",
    response_model=PaymentIntentCreateResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def create_payment_intent_endpoint(
    request: Request,
    settings: Settings = Depends(get_settings),
    provider_factory: PaymentProviderFactory = Depends(get_payment_provider_factory),
):
    """
    Create a Stripe PaymentIntent for `{"amount": <int>, "currency": <code>}`.
    The body is read raw so that a malformed document surfaces the parser's
    message rather than a 422.
    """
    require_stripe_secret_key(settings)
    raw_body = await request.body()
    # The Stripe SDK blocks, so the whole flow runs off the event loop.
    return await run_in_threadpool(
        create_payment_intent,
        raw_body,
        settings=settings,
        provider_factory=provider_factory,
    )
