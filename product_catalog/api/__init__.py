"""FastAPI application setup."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from product_catalog import __version__
from product_catalog.api.controller import product_router
from product_catalog.clients import SqliteClient
from product_catalog.config import AppConfig, DatabaseConfig, get_config, get_environment
from product_catalog.logging_config import setup_logging
from product_catalog.repositories import (
    InMemoryProductRepository,
    ProductRepository,
    SqliteProductRepository,
)
from product_catalog.services import ProductService

logger = logging.getLogger(__name__)


def create_repository(database: DatabaseConfig) -> ProductRepository:
    """Build the repository selected by the database configuration."""
    if database.backend == "memory":
        logger.info("Using in-memory product repository")
        return InMemoryProductRepository()

    repository = SqliteProductRepository(SqliteClient(database.connection_string))
    repository.ensure_schema()
    logger.info(f"Using SQLite product repository: {database.connection_string}")
    return repository


def create_app(
    config: Optional[AppConfig] = None,
    repository: Optional[ProductRepository] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Application configuration; loaded with get_config() if omitted.
        repository: Data-access backend to serve. If omitted, one is built
            from the database configuration and closed on shutdown.
    """
    if config is None:
        config = get_config()

    setup_logging(config.logging.level)

    owns_repository = repository is None
    if repository is None:
        repository = create_repository(config.database)

    logger.info(f"Starting {config.api.title} ({get_environment()} environment)")

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        try:
            yield
        finally:
            if owns_repository:
                repository.close()

    app = FastAPI(
        title=config.api.title,
        description="CRUD API for the product catalog",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.api.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.product_service = ProductService(repository)

    # Include routers
    app.include_router(product_router)

    @app.get("/health")
    async def health_check() -> dict:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app
