import logging
from typing import Callable, Protocol

import stripe

from starter.core.errors import GENERIC_ERROR_MESSAGE, ProviderError
from starter.schemas.payment import PaymentIntentCreateResponse

logger = logging.getLogger(__name__)


class PaymentProvider(Protocol):
    def create_intent(self, amount: int, currency: str) -> PaymentIntentCreateResponse:
        ...


# Receives the secret key and returns a ready provider.
PaymentProviderFactory = Callable[[str], PaymentProvider]


class StripePaymentProvider:
    def __init__(self, secret_key: str):
        # Passed per request instead of setting the module-wide stripe.api_key.
        self._secret_key = secret_key

    def create_intent(self, amount: int, currency: str) -> PaymentIntentCreateResponse:
        try:
            payment_intent = stripe.PaymentIntent.create(
                amount=amount,
                currency=currency,
                api_key=self._secret_key,
            )
        except stripe.StripeError as e:
            user_message = getattr(e, "user_message", None) or str(e)
            logger.error(f"Stripe API error creating payment intent ({amount} {currency}): {user_message}")
            raise ProviderError(user_message or GENERIC_ERROR_MESSAGE) from e
        except Exception as e:
            logger.error(f"Generic error creating payment intent ({amount} {currency}): {e}", exc_info=True)
            raise ProviderError(str(e) or GENERIC_ERROR_MESSAGE) from e

        logger.info(f"PaymentIntent {payment_intent.id} created for {amount} {currency}")
        return PaymentIntentCreateResponse(client_secret=payment_intent.client_secret)


def stripe_provider_factory(secret_key: str) -> PaymentProvider:
    return StripePaymentProvider(secret_key)
