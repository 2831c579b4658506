import logging

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from typing import Optional

from starter.core.config import Settings, get_settings
from starter.core.errors import AuthenticationError, ConfigurationError
from starter.core.payment_provider import PaymentProviderFactory, stripe_provider_factory

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False) # Missing headers are reported as our own 401 below


def get_payment_provider_factory() -> PaymentProviderFactory:
    return stripe_provider_factory


def decode_clerk_token(token: str, settings: Settings) -> dict:
    """
    Verify a Clerk session token and return its claims.
    Clerk signs session tokens itself; we only check signature, expiry and (optionally) issuer.
    """
    if not settings.clerk_jwt_key:
        logger.error("CLERK_JWT_KEY is not configured. Cannot verify session tokens.")
        raise ConfigurationError("CLERK_JWT_KEY is not configured")

    try:
        return jwt.decode(
            token,
            settings.clerk_jwt_key,
            algorithms=list(settings.clerk_jwt_algorithms),
            issuer=settings.clerk_issuer,
            options={"verify_aud": False},
        )
    except JWTError as e: # Catches any error during decoding (expired, invalid signature, etc.)
        logger.info(f"Rejected Clerk session token: {e}")
        raise AuthenticationError("Could not validate credentials") from e


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> str:
    if credentials is None:
        raise AuthenticationError("Not authenticated")

    payload = decode_clerk_token(credentials.credentials, settings)
    user_id: Optional[str] = payload.get("sub")
    if not user_id:
        raise AuthenticationError("Could not validate credentials")
    return user_id
