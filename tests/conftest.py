"""Pytest configuration and fixtures."""

import socket

import pytest
from httpx import AsyncClient, ASGITransport

from config import Config
from shorturl.common.logging_config import setup_logging
from shorturl.common.validators import URLValidator
from shorturl.service import ShortURLService
from shorturl.store.memory import InMemoryShortURLStore
from web_app import create_app


class FakeResolver:
    """Resolves a fixed set of hostnames without touching the network."""

    def __init__(self, known_hosts):
        self.known_hosts = set(known_hosts)
        self.calls = []

    async def __call__(self, hostname):
        self.calls.append(hostname)
        if hostname in self.known_hosts:
            return [(socket.AF_INET, socket.SOCK_STREAM, 6, "", ("93.184.216.34", 0))]
        raise socket.gaierror(socket.EAI_NONAME, "Name or service not known")


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def sample_urls():
    """Sample URLs whose hosts the fake resolver knows."""
    return [
        "https://www.freecodecamp.org",
        "https://github.com/user/repo",
        "http://example.com/path?query=value",
    ]


@pytest.fixture
def resolver():
    return FakeResolver(["www.freecodecamp.org", "github.com", "example.com"])


@pytest.fixture
def validator(resolver, logger):
    return URLValidator(timeout_seconds=1.0, resolver=resolver, logger=logger)


@pytest.fixture
def store(logger):
    return InMemoryShortURLStore(logger=logger)


@pytest.fixture
def service(store, validator, logger) -> ShortURLService:
    """Create service instance."""
    return ShortURLService(store=store, validator=validator, logger=logger)


@pytest.fixture
def config():
    return Config(port=3000, log_level="DEBUG")


@pytest.fixture
def app(store, service, config):
    """Create test FastAPI app."""
    return create_app(
        store_instance=store,
        service_instance=service,
        config=config,
    )


@pytest.fixture
async def client(app):
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac
