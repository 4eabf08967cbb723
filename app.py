#!/usr/bin/env python3
"""
Main entry point for URL shortener service.

Concurrency: a single async process. Hostname lookups during validation run
on the event loop's resolver, so a slow lookup only holds up its own request.

Usage:
    python app.py

Environment variables:
    PORT - Port to listen on (default 3000)
    HOST - Address to bind to
    DNS_TIMEOUT_SECONDS - Bound on hostname lookups (0 disables)
    STORE_BACKEND - 'memory' (default) or 'redis'
    REDIS_URL - Redis connection URL (redis backend only)
    LOG_LEVEL - Logging level
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import load_config
from shorturl.common.logging_config import setup_logging
from shorturl.common.validators import URLValidator
from shorturl.service import ShortURLService
from shorturl.store import create_store
from web_app import create_app


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the store and service on startup, close them on shutdown."""
    config = app.state.config
    logger = app.state.logger

    logger.info(f"Using '{config.store_backend}' store")
    store = create_store(config, logger=logger)

    if not await store.health_check():
        logger.warning("Store health check failed at startup")

    validator = URLValidator(
        timeout_seconds=config.dns_timeout_seconds,
        logger=logger,
    )
    service = ShortURLService(store=store, validator=validator, logger=logger)

    app.state.store = store
    app.state.service = service

    logger.info(f"URL Shortener running on port {config.port}")

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

    logger.info(f"Configuration: {config.model_dump()}")

    # Store and service are built in lifespan
    app = create_app(
        store_instance=None,
        service_instance=None,
        config=config,
    )
    app.state.logger = logger
    app.router.lifespan_context = lifespan

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        log_config=None,
        access_log=False,
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
