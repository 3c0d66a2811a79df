import json
import httpx
import pytest
from types import SimpleNamespace
from haulhub.core.config import settings
from haulhub.services import webhook

pytestmark = pytest.mark.webhooks

WEBHOOK_URL = "http://hooks.test/jobs"
PAYLOAD = {"jobId": "abc", "status": "in_progress", "priceUsd": 7.0, "cryptoPrice": 7.0}


@pytest.fixture
def sleeps(monkeypatch):
    recorded = []

    async def _sleep(seconds):
        recorded.append(seconds)

    monkeypatch.setattr(webhook, "asyncio", SimpleNamespace(sleep=_sleep))
    return recorded


@pytest.fixture
def webhook_url(monkeypatch):
    monkeypatch.setattr(settings, "WEBHOOK_URL", WEBHOOK_URL)


def _client(statuses, seen):
    responses = iter(statuses)

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        status = next(responses)
        if isinstance(status, Exception):
            raise status
        return httpx.Response(status)

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestWebhookDelivery:

    @pytest.mark.asyncio
    async def test_delivered_first_try(self, webhook_url, sleeps):
        seen = []
        async with _client([200], seen) as client:
            assert await webhook.send_webhook(PAYLOAD, retries=3, client=client) is True

        assert len(seen) == 1
        assert str(seen[0].url) == WEBHOOK_URL
        assert json.loads(seen[0].content) == PAYLOAD
        assert sleeps == []

    @pytest.mark.asyncio
    async def test_retries_until_success(self, webhook_url, sleeps):
        seen = []
        async with _client([500, 202], seen) as client:
            assert await webhook.send_webhook(PAYLOAD, retries=3, client=client) is True

        assert len(seen) == 2
        assert sleeps == [1.0]

    @pytest.mark.asyncio
    async def test_gives_up_after_retries(self, webhook_url, sleeps):
        seen = []
        async with _client([500, 503, 502], seen) as client:
            assert await webhook.send_webhook(PAYLOAD, retries=3, client=client) is False

        assert len(seen) == 3
        assert sleeps == [1.0, 2.0]

    @pytest.mark.asyncio
    async def test_timeout_counts_as_failed_attempt(self, webhook_url, sleeps):
        seen = []
        timeout = httpx.ReadTimeout("timed out")
        async with _client([timeout, 200], seen) as client:
            assert await webhook.send_webhook(PAYLOAD, retries=2, client=client) is True

        assert len(seen) == 2

    @pytest.mark.asyncio
    async def test_connection_error_counts_as_failed_attempt(self, webhook_url, sleeps):
        seen = []
        error = httpx.ConnectError("refused")
        async with _client([error], seen) as client:
            assert await webhook.send_webhook(PAYLOAD, retries=1, client=client) is False

    @pytest.mark.asyncio
    async def test_skipped_without_url(self, monkeypatch, sleeps):
        monkeypatch.setattr(settings, "WEBHOOK_URL", None)
        seen = []
        async with _client([200], seen) as client:
            assert await webhook.send_webhook(PAYLOAD, client=client) is False
        assert seen == []
