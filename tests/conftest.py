"""Pytest configuration and fixtures."""

import pytest
from typing import AsyncGenerator

from httpx import ASGITransport, AsyncClient

from config import Config
from shortener.common.logging_config import setup_logging
from shortener.common.validators import normalize_url
from shortener.database.memory import InMemoryURLShortenerDB
from shortener.service import URLShortenerService
from shortener.shortcode import ShortCodeGenerator
from web_app import create_app


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
async def test_db(logger) -> AsyncGenerator[InMemoryURLShortenerDB, None]:
    """Create test database instance."""
    db = InMemoryURLShortenerDB(logger=logger)

    yield db

    await db.close()


@pytest.fixture
def short_code_generator():
    """Create short code generator."""
    return ShortCodeGenerator(default_length=6)


@pytest.fixture
async def service(test_db, short_code_generator, logger) -> URLShortenerService:
    """Create service instance."""
    return URLShortenerService(
        db=test_db,
        cache=None,  # No cache for tests
        short_code_generator=short_code_generator,
        logger=logger,
    )


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]


@pytest.fixture
def occupy_candidates(test_db, short_code_generator):
    """Return a helper that stores other URLs under a URL's first candidates."""

    async def _occupy(url: str, count: int):
        codes = []
        for candidate in short_code_generator.candidates(normalize_url(url), count):
            await test_db.insert(
                candidate.short_code,
                f"http://occupied-{candidate.source_index}.example.com/",
            )
            codes.append(candidate.short_code)
        return codes

    return _occupy


@pytest.fixture
def config():
    """Create test configuration."""
    return Config(database_backend="memory", base_url="http://testserver")


@pytest.fixture
async def app(test_db, service, config):
    """Create test FastAPI app."""
    return create_app(
        db_instance=test_db,
        cache_instance=None,
        service_instance=service,
        config=config,
    )


@pytest.fixture
async def client(app):
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac
