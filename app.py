#!/usr/bin/env python3
"""
Main entry point for URL shortener service.

Concurrency: requests are served with async I/O (FastAPI + asyncpg pool +
redis.asyncio). The service keeps no per-request state; uniqueness under
concurrent writers is enforced by the database. With WORKERS > 1 every worker
has its own process, so use DATABASE_BACKEND=postgres to share mappings.

Usage:
    python app.py

Environment variables:
    DATABASE_BACKEND - 'memory' or 'postgres'
    DATABASE_URL - PostgreSQL connection URL
    REDIS_URL - Redis connection URL (optional)
    BASE_URL - Base URL for short links
    PORT - Port to listen on
    WORKERS - Number of uvicorn worker processes (default 1)
    MAX_COLLISION_RETRIES - Extra candidates tried on collision (default 10)
    LOG_LEVEL - Logging level
"""

import logging
import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import load_config
from shortener.database import create_database
from shortener.database.cache import RedisCache
from shortener.service import URLShortenerService
from shortener.shortcode import ShortCodeGenerator
from shortener.common.logging_config import setup_logging
from web_app import create_app


async def build_service(config, logger: logging.Logger) -> URLShortenerService:
    """Create the storage backend, optional cache and service for a config."""
    logger.info(f"Using {config.database_backend} database backend")
    db = create_database(config, logger=logger)

    if config.redis_url:
        logger.info("Connecting to Redis cache")
        cache = RedisCache(
            redis_url=config.redis_url,
            ttl_seconds=config.cache_ttl_seconds,
            logger=logger,
        )
        await cache.connect()
    else:
        logger.info("Redis caching disabled")
        cache = None

    return URLShortenerService(
        db=db,
        cache=cache,
        short_code_generator=ShortCodeGenerator(default_length=config.short_code_length),
        logger=logger,
        max_collision_retries=config.max_collision_retries,
        max_url_length=config.max_url_length,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build storage, cache and service on startup; close them on shutdown."""
    logger = app.state.logger
    logger.info("Starting URL shortener service...")

    service = await build_service(app.state.config, logger)
    app.state.db = service.db
    app.state.cache = service.cache
    app.state.service = service

    logger.info("Service started successfully")

    yield

    logger.info("Shutting down URL shortener service...")
    await service.close()
    logger.info("Service stopped")


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("URL Shortener Service")
    logger.info(f"Configuration: {config.model_dump(exclude={'database_url', 'redis_url'})}")

    # Instances are created in lifespan
    app = create_app(
        db_instance=None,
        cache_instance=None,
        service_instance=None,
        config=config,
    )
    app.state.logger = logger
    app.router.lifespan_context = lifespan

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        workers=config.workers,
        log_level=config.log_level.lower(),
        access_log=True,
    )

    server = uvicorn.Server(uvicorn_config)

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
