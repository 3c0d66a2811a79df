import pytest
from httpx import AsyncClient, ASGITransport

from haulhub.main import app
from haulhub.core import redis as redis_module
from haulhub.core.config import settings
from haulhub.services.jobs import JobStore, get_job_store


class InMemoryRedis:
    """Async stand-in for the handful of Redis commands the service uses"""

    def __init__(self):
        self.store = {}
        self.expiry = {}

    async def get(self, key):
        return self.store.get(key)

    async def set(self, key, value, ex=None):
        if isinstance(value, str):
            value = value.encode()
        self.store[key] = value
        self.expiry[key] = ex

    async def incr(self, key):
        value = int(self.store.get(key, b"0")) + 1
        self.store[key] = str(value).encode()
        return value

    async def delete(self, key):
        self.store.pop(key, None)
        self.expiry.pop(key, None)


class BrokenRedis:

    async def get(self, key):
        raise ConnectionError("redis down")

    async def set(self, key, value, ex=None):
        raise ConnectionError("redis down")

    async def incr(self, key):
        raise ConnectionError("redis down")


@pytest.fixture
def fake_redis(monkeypatch):
    client = InMemoryRedis()
    monkeypatch.setattr(redis_module, "redis", client)
    return client


@pytest.fixture
def broken_redis(monkeypatch):
    client = BrokenRedis()
    monkeypatch.setattr(redis_module, "redis", client)
    return client


@pytest.fixture
def job_store():
    store = JobStore()
    app.dependency_overrides[get_job_store] = lambda: store
    yield store
    app.dependency_overrides.pop(get_job_store, None)


@pytest.fixture
async def test_client(job_store):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def no_webhook(monkeypatch):
    monkeypatch.setattr(settings, "WEBHOOK_URL", None)


@pytest.fixture
def valid_quote_data():
    return {
        "region": "us",
        "distance": 7,
        "weight": 10,
        "isRush": False,
        "vehicleType": "car",
    }


@pytest.fixture
def valid_job_data():
    return {
        "title": "Move a bookshelf",
        "description": "Flat-packed, two boxes",
        "posterId": "poster_1",
        "pickup": {"address": "12 Rizal Ave, Manila", "latitude": 14.5995, "longitude": 120.9842},
        "dropoff": {"address": "88 Ayala Ave, Makati"},
        "distance": 3,
        "weight": 5,
        "isRush": True,
        "vehicleType": "bike",
        "region": "ph",
    }


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "pricing: marks tests related to pricing"
    )
    config.addinivalue_line(
        "markers", "api: marks tests that go through the HTTP layer"
    )
    config.addinivalue_line(
        "markers", "webhooks: marks tests related to webhooks"
    )
    config.addinivalue_line(
        "markers", "rate_limit: marks tests related to rate limiting"
    )
    config.addinivalue_line(
        "markers", "idempotency: marks tests related to idempotency"
    )
