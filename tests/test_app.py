"""Tests for service wiring in the server entry point."""

import pytest
from httpx import ASGITransport, AsyncClient

from app import build_service, lifespan
from config import Config
from shortener.database.memory import InMemoryURLShortenerDB
from web_app import create_app


@pytest.fixture
def memory_config():
    return Config(
        _env_file=None,
        database_backend="memory",
        redis_url=None,
        max_collision_retries=5,
        base_url="http://testserver",
    )


@pytest.mark.asyncio
class TestBuildService:
    """Test building the service from configuration."""

    async def test_build_memory_service(self, memory_config, logger):
        service = await build_service(memory_config, logger)

        assert isinstance(service.db, InMemoryURLShortenerDB)
        assert service.cache is None
        assert service.max_collision_retries == 5
        assert service.generator.default_length == 6

        await service.close()

    async def test_lifespan_populates_app_state(self, memory_config, logger):
        """The lifespan wires a working service into the app."""
        app = create_app(
            db_instance=None,
            cache_instance=None,
            service_instance=None,
            config=memory_config,
        )
        app.state.logger = logger

        async with lifespan(app):
            assert app.state.service is not None
            assert app.state.db is app.state.service.db

            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://testserver") as client:
                created = await client.post("/api/shorten", json={"url": "example.com/frostbite"})
                redirect = await client.get(f"/{created.json()['short_code']}")

        assert created.status_code == 200
        assert redirect.status_code == 302
        assert redirect.headers["location"] == "http://example.com/frostbite"
