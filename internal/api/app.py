"""
FastAPI application factory and lifespan.

The lifespan owns the store connection: it is opened on startup, handed to
the repository explicitly through app.state, and closed on shutdown.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from core.config import Settings, get_settings
from core.database import RedisDatabase
from core.logger import logger
from internal.api.routes.health_routes import create_health_routes
from internal.api.routes.task_routes import router as task_router
from repositories.interfaces.store_interface import IKeyValueStore
from repositories.store import InMemoryKeyValueStore, RedisKeyValueStore
from repositories.task_repository import TaskRepository
from services.task_service import TaskService


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[IKeyValueStore] = None,
) -> FastAPI:
    """
    Factory function to create and configure the FastAPI application.

    Args:
        settings: Settings to use instead of the environment-backed ones
        store: Store to use as-is instead of connecting one on startup.
            An injected store is not closed on shutdown.

    Returns:
        FastAPI: Configured application instance
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Manage application lifespan - startup and shutdown.
        Connects to Redis on startup with comprehensive logging.
        """
        logger.info(
            f"========== Starting {settings.app_name} v{settings.app_version} API service =========="
        )
        logger.info(f"Environment: {settings.environment}")
        logger.info(f"Listen address: {settings.task_manager_host}")

        database: Optional[RedisDatabase] = None
        active_store = store

        if active_store is not None:
            logger.info("Using injected store")
        elif settings.use_in_memory_store:
            logger.info("Using in-memory store")
            active_store = InMemoryKeyValueStore()
        else:
            logger.info("Initializing Redis connection...")
            database = RedisDatabase(settings)
            await database.connect()
            active_store = RedisKeyValueStore(database.client)

        # Health check; an unreachable store is not fatal at startup
        logger.info("Performing store health check...")
        if await active_store.ping():
            logger.info("Store health check passed")
        else:
            logger.warning("Store health check failed")

        repository = TaskRepository(
            active_store, use_transactions=settings.redis_use_transactions
        )
        app.state.settings = settings
        app.state.store = active_store
        app.state.task_repository = repository

        if settings.seed_demo_tasks:
            await TaskService(repository).seed_demo_tasks()

        logger.info(
            f"========== {settings.app_name} API service started successfully =========="
        )

        try:
            yield
        finally:
            logger.info("========== Shutting down API service ==========")
            if database is not None:
                await database.disconnect()
            logger.info("========== API service stopped successfully ==========")

    logger.info("Creating FastAPI application...")
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Task tracking service backed by Redis.",
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Tasks",
                "description": "Create, read, list and delete tasks.",
            },
            {
                "name": "Health",
                "description": "Liveness and store connectivity checks.",
            },
        ],
    )

    app.include_router(task_router)
    logger.info("✅ Task routes registered")

    app.include_router(create_health_routes())
    logger.info("✅ Health routes registered")

    return app
