"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic (SRP). Used by main.py;
no business logic here, only wiring of infrastructure (storage
dispatcher, DB engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import get_settings
from app.infrastructure.external.storage import StorageFactory
from app.infrastructure.persistence.database import dispose_engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup builds the storage dispatcher once and stores it on
    app.state.storage. A sink that cannot initialize does not stop the app;
    uploads fail with STORAGE_NOT_INITIALIZED instead. Shutdown disposes
    the SQL engine.
    """
    settings = get_settings()

    # ---- Startup ----
    app.state.storage = StorageFactory.create_dispatcher(settings)
    logger.info(
        "%s %s started (storage=%s, ready=%s)",
        settings.app_name,
        settings.app_version,
        app.state.storage.provider.value,
        app.state.storage.ready,
    )

    yield

    # ---- Shutdown ----
    app.state.storage = None
    await dispose_engine()
    logger.info("Database engine disposed")
