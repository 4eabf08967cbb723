"""Tests that concurrent requests are served while lookups are outstanding.

Hostname resolution is the only suspension point in a submission. These tests
hold resolutions open and check that other requests still complete and that
codes stay unique.
"""

import asyncio

import pytest
from httpx import AsyncClient, ASGITransport

from shorturl.common.validators import URLValidator
from shorturl.service import ShortURLService
from web_app import create_app


class GatedResolver:
    """Resolver that blocks every lookup until released."""

    def __init__(self):
        self.release = asyncio.Event()
        self.waiting = 0

    async def __call__(self, hostname):
        self.waiting += 1
        await self.release.wait()
        return ["ok"]


@pytest.mark.asyncio
class TestConcurrentRequests:
    """Prove the server handles many simultaneous requests."""

    async def test_concurrent_distinct_submissions(self, client):
        concurrency = 30
        urls = [f"https://example.com/page_{i}" for i in range(concurrency)]
        responses = await asyncio.gather(
            *(client.post("/api/shorturl", json={"url": url}) for url in urls)
        )

        codes = []
        for url, response in zip(urls, responses):
            assert response.status_code == 200
            data = response.json()
            assert data["original_url"] == url
            codes.append(data["short_url"])

        assert sorted(codes) == list(range(1, concurrency + 1))

    async def test_concurrent_same_url(self, client):
        responses = await asyncio.gather(
            *(client.post("/api/shorturl", json={"url": "https://example.com/same"}) for _ in range(20))
        )

        assert {r.json()["short_url"] for r in responses} == {1}

    async def test_pending_lookup_does_not_block_redirects(self, store, config, logger):
        await store.submit("https://example.com/already-stored")

        resolver = GatedResolver()
        validator = URLValidator(timeout_seconds=None, resolver=resolver, logger=logger)
        service = ShortURLService(store=store, validator=validator, logger=logger)
        app = create_app(store_instance=store, service_instance=service, config=config)

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
            pending = asyncio.create_task(
                ac.post("/api/shorturl", json={"url": "https://example.com/slow"})
            )
            while resolver.waiting == 0:
                await asyncio.sleep(0)

            redirect = await ac.get("/api/shorturl/1")
            assert redirect.status_code == 302
            assert not pending.done()

            resolver.release.set()
            response = await pending

        assert response.json() == {"original_url": "https://example.com/slow", "short_url": 2}
