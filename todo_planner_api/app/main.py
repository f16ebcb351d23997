"""
Main entrypoint for the Todo Planner API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Importing the app here makes it easy to run with uvicorn
or another ASGI server, e.g.::

    uvicorn todo_planner_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .core.errors import ServiceError, UncaughtExceptionMiddleware, service_error_handler
from .core.logging_config import setup_logging
from .core.store import TodoStore
from .api.v1.router import router as v1_router


def create_app(store: Optional[TodoStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[TodoStore]
        Store holding users and todos for this application.  A new,
        empty store is created when omitted.  Data lives only as long
        as the store object; nothing is persisted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the modules below
    # can log from the first request on.
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.store = store if store is not None else TodoStore()

    app.add_middleware(UncaughtExceptionMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(ServiceError, service_error_handler)

    app.include_router(v1_router, prefix=settings.api_prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
