from __future__ import annotations

from typing import Any

from starlette.applications import Starlette

from cross_origin_guard.protection.origin import origin_host
from cross_origin_guard.protection.policy import PolicyStore
from cross_origin_guard.protection.request import CheckRequest
from cross_origin_guard.protection.verdict import (
    ALLOWED,
    CrossOriginRequestError,
    Denied,
    Verdict,
)
from cross_origin_guard.utils.logging import get_logger

logger = get_logger("protection")

SAFE_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})
TRUSTED_FETCH_SITES = frozenset({"same-origin", "none"})


class CrossOriginProtection:
    def __init__(self, policy: PolicyStore | None = None) -> None:
        self.policy = policy if policy is not None else PolicyStore()

    def add_trusted_origin(self, origin: Any) -> str:
        """Allow all requests whose Origin header exactly matches ``origin``.

        Origin header values are of the form 'scheme://host[:port]'.
        """
        return self.policy.add_trusted_origin(origin)

    def add_insecure_bypass_pattern(self, pattern: str) -> None:
        """Skip the check for request paths matching ``pattern`` (case-insensitive)."""
        self.policy.add_insecure_bypass_pattern(pattern)

    def check(self, request: CheckRequest) -> Verdict:
        """Sec-Fetch-Site first, then Origin vs Host for browsers that don't send it."""
        if request.method.upper() in SAFE_METHODS:
            return ALLOWED

        sec_fetch_site = request.header("Sec-Fetch-Site")
        if sec_fetch_site:
            if sec_fetch_site in TRUSTED_FETCH_SITES:
                return ALLOWED
            if self._is_exempt(request):
                return ALLOWED
            return Denied(CrossOriginRequestError.from_sec_fetch_site())

        origin = request.header("Origin")
        if not origin:
            return ALLOWED

        # Host only: an http -> https mismatch is left to HSTS.
        host = origin_host(origin)
        if host and host == request.host:
            return ALLOWED

        if self._is_exempt(request):
            return ALLOWED
        return Denied(CrossOriginRequestError.from_old_browser())

    def install(self, app: Starlette) -> None:
        """Add CrossOriginProtectionMiddleware bound to this instance to ``app``."""
        from cross_origin_guard.utils.middleware import CrossOriginProtectionMiddleware

        app.add_middleware(CrossOriginProtectionMiddleware, protection=self)

    def _is_exempt(self, request: CheckRequest) -> bool:
        exempt = self.policy.is_exempt(request.path, request.header("Origin"))
        if exempt:
            logger.debug(f"Exempt cross-origin {request.method} {request.path}")
        return exempt
