import logging
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from starlette.exceptions import HTTPException as StarletteHTTPException

from studio.config.settings import Settings, settings as default_settings
from studio.core.errors import http_exception_handler, validation_exception_handler
from studio.database.supabase_client import SupabaseClients
from studio.modules.auth import routes as auth_routes
from studio.modules.models import routes as models_routes
from studio.modules.products import routes as products_routes
from studio.modules.photoshoots import routes as photoshoots_routes

logging.basicConfig(
    level=getattr(logging, default_settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware:
    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_headers(message):
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                message["headers"].extend([
                    (b"X-Content-Type-Options", b"nosniff"),
                    (b"X-Frame-Options", b"DENY"),
                    (b"X-XSS-Protection", b"1; mode=block"),
                ])
            await send(message)

        await self.app(scope, receive, send_with_headers)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    app_settings = app_settings or default_settings

    limiter = Limiter(key_func=get_remote_address, default_limits=[app_settings.rate_limit])
    app = FastAPI(
        title=app_settings.app_name,
        debug=app_settings.debug,
        redirect_slashes=False,
    )
    app.state.settings = app_settings
    app.state.supabase = SupabaseClients(app_settings)
    app.state.limiter = limiter

    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception: %s", exc)
        if app_settings.is_production:
            return JSONResponse(status_code=500, content={"error": "Internal server error"})
        return JSONResponse(status_code=500, content={"error": str(exc) or "Internal server error"})

    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.get_cors_origins_list(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include module routes
    app.include_router(auth_routes.router, prefix="/api")
    app.include_router(models_routes.router, prefix="/api")
    app.include_router(products_routes.router, prefix="/api")
    app.include_router(photoshoots_routes.router, prefix="/api")

    @app.on_event("startup")
    async def startup_event():
        logger.info("Application startup")
        if not app_settings.jwt_secret:
            logger.error("JWT_SECRET is not set; sign-in and protected routes will fail")

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("Application shutdown")

    @app.get("/")
    async def root():
        return {"message": f"Welcome to {app_settings.app_name}", "status": "healthy"}

    @app.get("/health")
    @limiter.exempt
    async def health():
        return {"status": "healthy"}

    @app.get("/ready")
    @limiter.exempt
    async def ready():
        """Readiness probe: extend here with DB checks if needed."""
        return {"status": "ready"}

    return app


app = create_app()
