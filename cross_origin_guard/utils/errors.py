from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from starlette import status

from cross_origin_guard.protection.verdict import CrossOriginRequestError
from cross_origin_guard.utils.logging import get_logger

logger = get_logger("errors")

class CrossOriginRequestException(HTTPException):
    def __init__(self, error: CrossOriginRequestError):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=error.message)
        self.error = error

# ---- Exception handlers (registered in main.create_app) ----
async def handle_http_exception(request: Request, exc: HTTPException):
    logger.warning(f"HTTPException {exc.status_code}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"ok": False, "error": exc.detail},
        headers=getattr(exc, "headers", None),
    )

async def handle_validation_error(request: Request, exc: RequestValidationError | ValidationError):
    logger.warning("ValidationError")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"ok": False, "error": "validation_error", "details": exc.errors()},
    )

async def handle_unhandled(request: Request, exc: Exception):
    logger.error(f"Unhandled error: {type(exc).__name__}", exc_info=True)
    return JSONResponse(status_code=500, content={"ok": False, "error": "internal_error"})
