"""Exception to HTTP response mapping.

The scoring core clamps malformed records instead of raising, so errors that
reach this layer come from configuration, request handling or the store.
"""

import structlog
from fastapi import Request
from fastapi.responses import JSONResponse

logger = structlog.get_logger()

# Checked in order; the first matching class wins.
_STATUS_MAP: list[tuple[type[Exception], int, str]] = [
    (PermissionError, 403, "forbidden"),
    (LookupError, 404, "not_found"),
    (ValueError, 400, "bad_request"),
]


def _message(exc: Exception) -> str:
    # KeyError wraps its message in quotes
    if isinstance(exc, KeyError) and exc.args:
        return str(exc.args[0])
    return str(exc)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    request_id = getattr(request.state, "request_id", "unknown")

    for exc_class, status_code, error in _STATUS_MAP:
        if isinstance(exc, exc_class):
            logger.warning(
                error,
                request_id=request_id,
                path=request.url.path,
                error=_message(exc),
            )
            return JSONResponse(
                status_code=status_code,
                content={"error": error, "message": _message(exc), "request_id": request_id},
            )

    logger.exception("unhandled_exception", request_id=request_id, path=request.url.path)
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred",
            "request_id": request_id,
        },
    )
