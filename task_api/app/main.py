"""
Main entrypoint for the Task API.

This module assembles the FastAPI application: it sets up logging,
wires the store, service and handler together and registers the task
routes.  The ``create_app`` function builds and configures the app,
which is then instantiated at module import time as ``app``, e.g.::

    uvicorn task_api.app.main:app --reload
"""

from typing import Optional

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.endpoints.tasks import TaskHandler, method_not_allowed_handler
from .api.router import build_router
from .core.config import Settings, settings as default_settings
from .core.db import init_db
from .core.logging_config import setup_logging
from .services.task_service import TaskService
from .store.task_store import SQLiteTaskStore, TaskStore


def create_app(settings: Optional[Settings] = None, store: Optional[TaskStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module-level settings
        read from the environment.
    store : Optional[TaskStore]
        Persistence backend.  Defaults to a :class:`SQLiteTaskStore`
        on ``settings.database_url``; when one is given, the SQLite
        schema is not touched at startup.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the wiring below
    # can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    manage_schema = store is None
    if store is None:
        store = SQLiteTaskStore(settings.database_url)

    handler = TaskHandler(TaskService(store))
    app.include_router(build_router(handler))
    # Methods outside the registered list never reach the handler.
    app.add_exception_handler(StarletteHTTPException, method_not_allowed_handler)

    if manage_schema:
        @app.on_event("startup")
        async def startup_event() -> None:
            # Creates the database file if needed and brings the schema
            # up to date.
            init_db(settings.database_url)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can locate it.
app = create_app()
