import time
from collections.abc import Awaitable, Callable

from fastapi import Request, Response

from doc_extractor.logging.logger import Log

_MAX_LOG_LINE = 80


async def log_requests(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Log method, path, status and duration of every request."""
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    line = f"{request.method} {request.url.path} {response.status_code} in {duration_ms:.0f}ms"
    if len(line) > _MAX_LOG_LINE:
        line = line[: _MAX_LOG_LINE - 1] + "…"
    Log.info(line)
    return response
