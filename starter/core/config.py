import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple

from dotenv import load_dotenv

load_dotenv()

DEFAULT_DATABASE_URL = "sqlite:///./starter.db"


def _env(name: str) -> Optional[str]:
    # Blank values count as unset so an empty `KEY=` line in .env is not a credential.
    raw_value = os.getenv(name)
    if raw_value is None:
        return None
    normalized = raw_value.strip()
    return normalized or None


def _split_csv(value: Optional[str]) -> Tuple[str, ...]:
    if not value:
        return tuple()
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    log_level: str = "INFO"

    # Stripe API Keys
    stripe_secret_key: Optional[str] = None
    stripe_publishable_key: Optional[str] = None

    # Clerk session token verification
    clerk_secret_key: Optional[str] = None
    clerk_publishable_key: Optional[str] = None
    clerk_jwt_key: Optional[str] = None
    clerk_jwt_algorithms: Tuple[str, ...] = ("RS256",)
    clerk_issuer: Optional[str] = None

    def __repr__(self) -> str:
        # Keys never appear in the repr.
        return (
            f"Settings(database={self.database_url.split(':', 1)[0]!r}, log_level={self.log_level!r}, "
            f"stripe_configured={self.stripe_secret_key is not None}, "
            f"clerk_configured={self.clerk_jwt_key is not None})"
        )


def load_settings() -> Settings:
    """Build a Settings object from the current process environment."""
    return Settings(
        database_url=_env("DATABASE_URL") or DEFAULT_DATABASE_URL,
        log_level=(_env("LOG_LEVEL") or "INFO").upper(),
        stripe_secret_key=_env("STRIPE_SECRET_KEY"),
        stripe_publishable_key=_env("STRIPE_PUBLISHABLE_KEY"),
        clerk_secret_key=_env("CLERK_SECRET_KEY"),
        clerk_publishable_key=_env("CLERK_PUBLISHABLE_KEY"),
        clerk_jwt_key=_env("CLERK_JWT_KEY"),
        clerk_jwt_algorithms=_split_csv(_env("CLERK_JWT_ALGORITHMS")) or ("RS256",),
        clerk_issuer=_env("CLERK_ISSUER"),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
