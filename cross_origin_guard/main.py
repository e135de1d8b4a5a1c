import uuid

from fastapi import FastAPI, Request, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.trustedhost import TrustedHostMiddleware
from fastapi.exceptions import RequestValidationError

from cross_origin_guard.config import Settings, settings as default_settings
from cross_origin_guard.protection.checker import CrossOriginProtection

# Logging / errors
from cross_origin_guard.utils.logging import configure_logging, get_logger, request_id_ctx
from cross_origin_guard.utils.errors import (
    handle_http_exception,
    handle_validation_error,
    handle_unhandled,
)
from cross_origin_guard.utils.response import success

logger = get_logger("main")

def build_protection(settings: Settings) -> CrossOriginProtection:
    """Populate a CrossOriginProtection from settings.

    Raises InvalidConfiguration for a malformed origin, an empty pattern or
    patterns that don't compile, so a bad deploy fails at boot.
    """
    protection = CrossOriginProtection()
    for origin in settings.TRUSTED_ORIGINS:
        protection.add_trusted_origin(origin)
    for pattern in settings.INSECURE_BYPASS_PATTERNS:
        protection.add_insecure_bypass_pattern(pattern)
    protection.policy.compile()
    return protection

def create_app(settings: Settings | None = None, protection: CrossOriginProtection | None = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)
    if protection is None:
        protection = build_protection(settings)

    app = FastAPI(
        title=settings.APP_NAME,
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.cross_origin_protection = protection

    # ----- Middleware (last added runs first) -----
    # Host is validated before the origin check sees the request
    protection.install(app)
    app.add_middleware(
        TrustedHostMiddleware,
        allowed_hosts=(settings.TRUSTED_HOSTS + ["*"] if settings.APP_ENV == "dev" else settings.TRUSTED_HOSTS),
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=sorted(protection.policy.trusted_origins),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept"],
        expose_headers=["X-Request-Id"],
        max_age=86400,
    )

    @app.middleware("http")
    async def add_request_id(request: Request, call_next):
        token = request_id_ctx.set(str(uuid.uuid4())[:8])
        try:
            response = await call_next(request)
            response.headers["X-Request-Id"] = request_id_ctx.get() or "-"
        finally:
            request_id_ctx.reset(token)
        return response

    # ----- Exception Handlers -----
    app.add_exception_handler(HTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unhandled)

    # ----- Health -----
    @app.get("/healthz", tags=["system"])
    async def healthz():
        return success({
            "status": "ok",
            "app": settings.APP_NAME,
            "env": settings.APP_ENV,
            "version": app.version,
        })

    logger.info(
        f"Cross-origin protection ready: {len(protection.policy.trusted_origins)} trusted origins, "
        f"{len(protection.policy.bypass_patterns)} bypass patterns"
    )
    return app

app = create_app()
