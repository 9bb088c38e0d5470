"""FastAPI application factory for folder-cascade.

Wires the stores, the cascade command and the submission handler onto
the application state. A PostgreSQL pool is opened for the lifetime of
the app when ``CASCADE_DATABASE_URL`` is set and no stores are passed in;
otherwise an in-memory store is used.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .__version__ import __version__
from .config.settings import CascadeSettings, get_settings
from .ownership.api.routers import cascade_router
from .ownership.application.commands import create_cascade_ownership_command
from .ownership.application.handlers import OwnershipFormSubmittedHandler
from .ownership.core.protocols import DocumentStore, FolderRepository
from .ownership.infrastructure.repositories import (
    InMemoryDocumentStore,
    PostgresDocumentStore,
    PostgresFolderRepository,
    create_connection_pool,
)

logger = logging.getLogger(__name__)


def _install_handler(
    app: FastAPI,
    settings: CascadeSettings,
    folder_repository: FolderRepository,
    document_store: DocumentStore
) -> None:
    app.state.folder_repository = folder_repository
    app.state.document_store = document_store
    app.state.submission_handler = OwnershipFormSubmittedHandler(
        folder_repository=folder_repository,
        command=create_cascade_ownership_command(document_store),
        settings=settings
    )


def create_app(
    settings: Optional[CascadeSettings] = None,
    folder_repository: Optional[FolderRepository] = None,
    document_store: Optional[DocumentStore] = None
) -> FastAPI:
    """Create the cascade API application."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        pool = None
        if folder_repository is None and document_store is None and settings.uses_database:
            pool = await create_connection_pool(
                settings.database_url,
                min_size=settings.db_pool_min_size,
                max_size=settings.db_pool_max_size
            )
            _install_handler(
                app,
                settings,
                PostgresFolderRepository(pool, schema=settings.db_schema),
                PostgresDocumentStore(pool, schema=settings.db_schema)
            )
            logger.info(f"Using PostgreSQL store (schema {settings.db_schema})")
        try:
            yield
        finally:
            if pool is not None:
                await pool.close()

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        lifespan=lifespan
    )

    if folder_repository is not None or document_store is not None or not settings.uses_database:
        memory_store = None
        if folder_repository is None or document_store is None:
            memory_store = InMemoryDocumentStore()
        _install_handler(
            app,
            settings,
            folder_repository or memory_store,
            document_store or memory_store
        )

    app.include_router(cascade_router)
    return app
