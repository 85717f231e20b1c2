from dataclasses import asdict

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from doc_extractor.logging.logger import Log
from doc_extractor.processor.exceptions import DocumentServiceError, InvalidFormDataError


async def service_error_handler(request: Request, exc: DocumentServiceError) -> JSONResponse:
    """Render a DocumentServiceError as ``{message[, errors]}``."""
    content: dict[str, object] = {"message": exc.message}
    if isinstance(exc, InvalidFormDataError):
        content["errors"] = [asdict(error) for error in exc.errors]
    if exc.status_code >= 500:
        Log.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=content)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed requests the framework rejects before our handlers run."""
    errors = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ()) if part != "body"),
            "message": error.get("msg", ""),
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid form data", "errors": errors},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort 500 body. The server logs the traceback when the error re-raises."""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal Server Error"},
    )
