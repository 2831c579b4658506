# starter/schemas/payment.py
from pydantic import BaseModel, ConfigDict, Field, PositiveInt


class PaymentIntentCreateRequest(BaseModel):
    """A request that already passed amount and currency validation."""
    amount: PositiveInt  # smallest currency unit, e.g. cents
    currency: str = Field(min_length=3, max_length=3)


class PaymentIntentCreateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    client_secret: str = Field(alias="clientSecret")


class ErrorResponse(BaseModel):
    error: str
