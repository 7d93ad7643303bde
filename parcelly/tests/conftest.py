"""
Centralized Test Configuration.
"""

import pytest
from httpx import AsyncClient, ASGITransport
from mongomock_motor import AsyncMongoMockClient

from parcelly.app.main import app
from parcelly.app.core.config import settings
from parcelly.app.core.jwt import create_access_token
from parcelly.app.db.mongo import get_db
from parcelly.app.services.payments import PaymentGateway, get_payment_gateway


# Stripe stand-in that records requested amounts
class MockPaymentGateway(PaymentGateway):
    def __init__(self):
        super().__init__(api_key="sk_test_dummy", currency="usd", minimum_charge=settings.minimum_charge)
        self.amounts = []

    def request_intent(self, amount: int) -> str:
        self.amounts.append(amount)
        return f"pi_test_{len(self.amounts)}_secret_{amount}"


@pytest.fixture
def mongo_db():
    """Fresh in-memory database for every test."""
    return AsyncMongoMockClient()[settings.db_name]


@pytest.fixture
def payment_gateway():
    return MockPaymentGateway()


@pytest.fixture(autouse=True)
def apply_overrides(mongo_db, payment_gateway):
    """Point the app at the in-memory database and fake gateway."""

    async def override_get_db():
        return mongo_db

    def override_get_payment_gateway():
        return payment_gateway

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_payment_gateway] = override_get_payment_gateway
    yield
    app.dependency_overrides = {}


@pytest.fixture
async def client():
    """Async client for testing."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def token():
    return create_access_token({"email": "customer@test.com"})


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def parcels_collection(mongo_db):
    return mongo_db[settings.parcel_collection]


@pytest.fixture
def users_collection(mongo_db):
    return mongo_db[settings.user_collection]


@pytest.fixture
def reviews_collection(mongo_db):
    return mongo_db[settings.review_collection]
