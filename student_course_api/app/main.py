"""
Main entrypoint for the Student Course API.

This module assembles the FastAPI application, sets up logging,
registers the error handlers and includes the versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn student_course_api.app.main:app --reload

Interactive documentation is served at ``/api-docs`` and the raw
OpenAPI document at ``/swagger.json``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.error_handlers import setup_exception_handlers
from .core.logging_config import setup_logging
from .core.store import InMemoryStore

logger = logging.getLogger(__name__)


def create_app(store: Optional[InMemoryStore] = None, seed: Optional[bool] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[InMemoryStore]
        Store backing the application.  A new one is created when
        omitted, so each application owns its own data.
    seed : Optional[bool]
        Whether to load the demo dataset into the store.  Defaults to
        ``settings.seed_on_startup``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        description="Students, courses and enrollments kept in memory.",
        debug=settings.debug,
        docs_url="/api-docs",
        openapi_url="/swagger.json",
        redoc_url=None,
    )

    if store is None:
        store = InMemoryStore(course_capacity=settings.course_capacity)
    if seed is None:
        seed = settings.seed_on_startup
    if seed:
        store.seed()
    app.state.store = store

    setup_exception_handlers(app)

    # Resources are served at the root (``/students``, ``/courses``).
    app.include_router(v1_router)

    logger.debug("Application created (capacity=%s)", store.course_capacity)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
