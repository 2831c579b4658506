"""Validation and creation flow behind ``POST /create-payment-intent``.

The checks run in a fixed order:

1. the Stripe secret key must be configured (the body is not read otherwise),
2. the body must parse as JSON,
3. ``amount`` must be an integer greater than zero,
4. ``currency`` must be a supported ISO 4217 code, compared case-insensitively,

and only then is the provider called, once, with the amount unchanged and the
currency lowercased.
"""
import json
import logging
from typing import Any

from starter.core.config import Settings
from starter.core.currencies import is_supported_currency
from starter.core.errors import ConfigurationError, InternalError, ValidationError
from starter.core.payment_provider import PaymentProviderFactory
from starter.schemas.payment import PaymentIntentCreateRequest, PaymentIntentCreateResponse

logger = logging.getLogger(__name__)

AMOUNT_ERROR_MESSAGE = "Amount must be a positive integer"
CURRENCY_ERROR_MESSAGE = "Invalid or unsupported currency code"
MISSING_SECRET_KEY_MESSAGE = "STRIPE_SECRET_KEY is not configured"


def _is_positive_integer(value: Any) -> bool:
    # bool is a subclass of int; JSON true/false are not amounts.
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def parse_payment_request(raw_body: bytes) -> PaymentIntentCreateRequest:
    try:
        body = json.loads(raw_body)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors; deep nesting raises RecursionError.
        logger.info(f"Rejected payment intent request with unparseable body: {e}")
        raise InternalError(str(e)) from e

    if not isinstance(body, dict):
        body = {}

    amount = body.get("amount")
    if not _is_positive_integer(amount):
        logger.info(f"Rejected payment intent request: invalid amount {amount!r}")
        raise ValidationError(AMOUNT_ERROR_MESSAGE)

    currency = body.get("currency")
    if not isinstance(currency, str) or not is_supported_currency(currency):
        logger.info(f"Rejected payment intent request: invalid currency {currency!r}")
        raise ValidationError(CURRENCY_ERROR_MESSAGE)

    return PaymentIntentCreateRequest(amount=amount, currency=currency.lower())


def require_stripe_secret_key(settings: Settings) -> str:
    if not settings.stripe_secret_key:
        logger.error("Stripe secret key is not configured. Cannot create payment intent.")
        raise ConfigurationError(MISSING_SECRET_KEY_MESSAGE)
    return settings.stripe_secret_key


def create_payment_intent(
    raw_body: bytes,
    *,
    settings: Settings,
    provider_factory: PaymentProviderFactory,
) -> PaymentIntentCreateResponse:
    secret_key = require_stripe_secret_key(settings)
    payment_request = parse_payment_request(raw_body)

    provider = provider_factory(secret_key)
    return provider.create_intent(payment_request.amount, payment_request.currency)
