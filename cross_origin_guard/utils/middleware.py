from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.types import ASGIApp

from cross_origin_guard.protection.checker import CrossOriginProtection
from cross_origin_guard.protection.request import CheckRequest
from cross_origin_guard.utils.logging import get_logger
from cross_origin_guard.utils.response import forbidden

logger = get_logger("middleware")

class CrossOriginProtectionMiddleware(BaseHTTPMiddleware):
    """Reject cross-origin state-changing requests with a 403 before routing."""

    def __init__(self, app: ASGIApp, protection: CrossOriginProtection):
        super().__init__(app)
        self.protection = protection

    async def dispatch(self, request: Request, call_next):
        verdict = self.protection.check(CheckRequest.from_starlette(request))
        if not verdict.allowed:
            # never echo the trusted origin list back
            logger.warning(
                f"Cross-origin {request.method} {request.url.path} rejected: {verdict.error.reason.value}"
            )
            return forbidden(verdict.message, reason=verdict.error.reason.value)
        return await call_next(request)
