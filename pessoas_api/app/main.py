"""
Main entrypoint for the Pessoas API.

This module assembles the FastAPI application: it sets up logging,
creates the person store, registers the error handlers and includes the
routers.  ``app`` is instantiated at import time so that it can be
served directly, e.g.::

    uvicorn pessoas_api.app.main:app --port 9999

``run.py`` at the repository root does the same with the host and port
taken from ``Settings``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.exceptions import ApplicationError, MethodNotSupported
from .core.logging_config import configure_logging
from .core.store import PersonStore

logger = logging.getLogger(__name__)


async def handle_application_error(request: Request, exc: ApplicationError) -> JSONResponse:
    """Render any ``ApplicationError`` as ``{"detail", "code"}``."""
    logger.info("%s %s rejected (%s): %s", request.method, request.url.path, exc.code, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "code": exc.code},
        headers=exc.headers,
    )


async def handle_http_error(request: Request, exc: StarletteHTTPException):
    """Turn the router's method mismatch into ``MethodNotSupported``.

    Other HTTP errors raised by Starlette (e.g. 404 for unknown paths)
    keep FastAPI's default rendering.
    """
    if exc.status_code == 405:
        error = MethodNotSupported("Método não permitido", headers=exc.headers)
        return await handle_application_error(request, error)
    return await http_exception_handler(request, exc)


def create_app(settings: Optional[Settings] = None, store: Optional[PersonStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use; defaults to the module-level instance read from
        the environment.
    store : Optional[PersonStore]
        Store to serve from.  A fresh, empty store is created when
        omitted.

    Returns
    -------
    FastAPI
        A configured application with the store on ``app.state``.
    """
    settings = settings or default_settings
    configure_logging(settings)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.person_store = store if store is not None else PersonStore()

    app.add_exception_handler(ApplicationError, handle_application_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)

    app.include_router(router)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
