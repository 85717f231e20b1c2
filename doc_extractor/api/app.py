from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from doc_extractor import __version__
from doc_extractor.api.errors import (
    request_validation_handler,
    service_error_handler,
    unhandled_error_handler,
)
from doc_extractor.api.middleware import log_requests
from doc_extractor.api.routes import router
from doc_extractor.config.settings import Settings
from doc_extractor.logging.logger import Log
from doc_extractor.processor.exceptions import DocumentServiceError
from doc_extractor.processor.processor import Processor, build_processor


def create_app(
    settings: Settings | None = None,
    processor: Processor | None = None,
) -> FastAPI:
    """Create the FastAPI application with one shared processor and store."""
    settings = settings or Settings()
    processor = processor or build_processor(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        Log.info(f"Document extractor started ({settings.app_env})")
        try:
            yield
        finally:
            processor.close()
            Log.info("Document extractor stopped")

    app = FastAPI(
        title="Document Text Extractor",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.processor = processor

    app.middleware("http")(log_requests)
    app.add_exception_handler(DocumentServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(router, prefix=settings.api_prefix.rstrip("/"))
    return app
