import sentry_sdk
import structlog
from fastapi import FastAPI
from fastapi.responses import RedirectResponse
from sentry_sdk.integrations.starlette import StarletteIntegration
from starlette.middleware.cors import CORSMiddleware

from rental_inventory.api import errors
from rental_inventory.api.routers import (
    available_equipments,
    equipment_types,
    healthz,
    readyz,
    rental_points,
)
from rental_inventory.core.config import Settings, get_settings
from rental_inventory.logging import setup_logging
from rental_inventory.middleware.request_id import request_id_middleware
from rental_inventory.middleware.security_headers import security_headers_middleware

openapi_tags = [
    {"name": "rental-points", "description": "Rental locations"},
    {"name": "equipment-types", "description": "Kinds of rentable equipment"},
    {"name": "available-equipments", "description": "Stock per location and type, rent/return"},
    {"name": "health", "description": "Liveness and readiness checks"},
]


def _init_sentry(settings: Settings) -> None:
    # no-op without a DSN
    if not settings.sentry_dsn:
        return
    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.app_env,
        release=settings.release,
        integrations=[StarletteIntegration()],
        traces_sample_rate=settings.traces_rate,
        send_default_pii=False,
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    # Initialize structured logging first
    setup_logging(settings=settings)
    _init_sentry(settings)

    app = FastAPI(
        title="Rental Equipment Inventory",
        version="0.1.0",
        description="Rental points, equipment types and the stock of each type at each point.",
        openapi_tags=openapi_tags,
    )
    app.middleware("http")(request_id_middleware)
    app.middleware("http")(security_headers_middleware)

    if settings.origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.origins,
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "HEAD"],
            allow_headers=["*"],
        )

    errors.install(app)

    app.include_router(rental_points.router)
    app.include_router(equipment_types.router)
    app.include_router(available_equipments.router)
    app.include_router(healthz.router)
    app.include_router(readyz.router)

    @app.get("/", include_in_schema=False)
    async def home() -> RedirectResponse:
        # The inventory listing is the landing page
        return RedirectResponse(url="/available-equipments", status_code=307)

    structlog.get_logger(__name__).info("app_startup", env=settings.app_env)
    return app


app = create_app()
