import pytest
from fastapi.testclient import TestClient
from jose import jwt
import os

# Add project root to sys.path to allow imports from starter
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))


from starter.main import app
from starter.db.base_class import Base
from starter.db.session import build_engine, build_session_factory, get_db
from starter.core.config import Settings, get_settings
from starter.core.dependencies import get_payment_provider_factory
from starter.schemas.payment import PaymentIntentCreateResponse
import starter.models  # noqa: F401  registers every table on Base.metadata

# Use a separate SQLite database for testing
TEST_SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

TEST_STRIPE_SECRET_KEY = "sk_test_51TestKeyNeverSentAnywhere"
TEST_CLERK_JWT_KEY = "clerk-test-signing-secret"

engine = build_engine(Settings(database_url=TEST_SQLALCHEMY_DATABASE_URL))
TestingSessionLocal = build_session_factory(engine)

Base.metadata.create_all(bind=engine)

def override_get_db():
    try:
        db = TestingSessionLocal()
        yield db
    finally:
        db.close()

app.dependency_overrides[get_db] = override_get_db


class FakePaymentProvider:
    """Records create_intent calls instead of talking to Stripe."""

    def __init__(self, client_secret: str = "pi_test_123_secret_abc", error: Exception = None):
        self.client_secret = client_secret
        self.error = error
        self.calls = []
        self.secret_keys = []

    def factory(self, secret_key: str):
        self.secret_keys.append(secret_key)
        return self

    def create_intent(self, amount: int, currency: str) -> PaymentIntentCreateResponse:
        self.calls.append((amount, currency))
        if self.error is not None:
            raise self.error
        return PaymentIntentCreateResponse(client_secret=self.client_secret)


def make_settings(**overrides) -> Settings:
    values = {
        "database_url": TEST_SQLALCHEMY_DATABASE_URL,
        "stripe_secret_key": TEST_STRIPE_SECRET_KEY,
        "clerk_jwt_key": TEST_CLERK_JWT_KEY,
        "clerk_jwt_algorithms": ("HS256",),
    }
    values.update(overrides)
    return Settings(**values)


def make_clerk_token(user_id: str, key: str = TEST_CLERK_JWT_KEY, **claims) -> str:
    payload = {"sub": user_id, **claims}
    return jwt.encode(payload, key, algorithm="HS256")


def auth_headers(user_id: str) -> dict:
    return {"Authorization": f"Bearer {make_clerk_token(user_id)}"}


@pytest.fixture(scope="session")
def test_engine():
    Base.metadata.create_all(bind=engine)
    yield engine

@pytest.fixture(scope="function")
def db_session(test_engine):
    """
    Provides a database session for each test function.
    Tables are dropped and recreated first so every test starts empty.
    """
    Base.metadata.drop_all(bind=test_engine)
    Base.metadata.create_all(bind=test_engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def settings() -> Settings:
    return make_settings()

@pytest.fixture(scope="function")
def fake_provider() -> FakePaymentProvider:
    return FakePaymentProvider()

@pytest.fixture(scope="function")
def client(settings: Settings, fake_provider: FakePaymentProvider):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_payment_provider_factory] = lambda: fake_provider.factory
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.pop(get_settings, None)
        app.dependency_overrides.pop(get_payment_provider_factory, None)

@pytest.fixture(scope="function")
def override_settings(client: TestClient):
    """Swap the settings the app sees for the rest of the test, e.g. override_settings(stripe_secret_key=None)."""
    def _override(**overrides) -> Settings:
        new_settings = make_settings(**overrides)
        app.dependency_overrides[get_settings] = lambda: new_settings
        return new_settings
    return _override

@pytest.fixture(scope="function")
def clerk_token():
    return make_clerk_token

@pytest.fixture(scope="function")
def user_headers():
    """Authorization headers for a given Clerk user id."""
    return auth_headers
