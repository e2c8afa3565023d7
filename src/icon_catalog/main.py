from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from icon_catalog import __version__
from icon_catalog.api.middleware.error_handler import (
    handle_generic_error,
    handle_icon_catalog_error,
    handle_validation_error,
)
from icon_catalog.api.middleware.logging import RequestLoggingMiddleware
from icon_catalog.api.v1 import router as v1_router
from icon_catalog.api.v1.health import router as health_router
from icon_catalog.config import settings
from icon_catalog.core.exceptions import IconCatalogError
from icon_catalog.utils.logger import setup_logging


def create_app() -> FastAPI:
    setup_logging(settings.log_level, settings.log_file, settings.log_format)

    app = FastAPI(
        title="Icon Catalog API",
        description="Icon categorization and search-tag generation",
        version=__version__,
        debug=settings.debug,
    )

    app.add_middleware(RequestLoggingMiddleware)

    # Register exception handlers (order matters - most specific first)
    app.add_exception_handler(IconCatalogError, handle_icon_catalog_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_generic_error)

    app.include_router(health_router)
    app.include_router(v1_router)

    return app


app = create_app()
