"""
Shared FastAPI App Factory

Provides common app setup for production and test environments.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from drivent.platform.config.core_setting import settings
from drivent.platform.constant.route_constant import (
    AUTH_BASE,
    BOOKING_BASE,
    ENROLLMENT_BASE,
    EVENT_BASE,
    HEALTH,
    HOTEL_BASE,
    METRICS,
    PAYMENT_BASE,
    TICKET_BASE,
    USER_BASE,
)
from drivent.platform.exception.exception_handlers import register_exception_handlers
from drivent.service.lodging.driving_adapter.http_controller.booking_controller import (
    router as booking_router,
)
from drivent.service.lodging.driving_adapter.http_controller.hotel_controller import (
    router as hotel_router,
)
from drivent.service.ticketing.driving_adapter.http_controller.auth_controller import (
    router as auth_router,
)
from drivent.service.ticketing.driving_adapter.http_controller.enrollment_controller import (
    router as enrollment_router,
)
from drivent.service.ticketing.driving_adapter.http_controller.event_controller import (
    router as event_router,
)
from drivent.service.ticketing.driving_adapter.http_controller.payment_controller import (
    router as payment_router,
)
from drivent.service.ticketing.driving_adapter.http_controller.ticket_controller import (
    router as ticket_router,
)
from drivent.service.ticketing.driving_adapter.http_controller.user_controller import (
    router as user_router,
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'Event registration and hotel booking',
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description
    """
    app = FastAPI(
        title=f'{settings.PROJECT_NAME}{title_suffix}',
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS or ['*'],
        allow_credentials=bool(settings.BACKEND_CORS_ORIGINS),
        allow_methods=['*'],
        allow_headers=['*'],
    )

    register_exception_handlers(app)

    # Ticketing
    app.include_router(user_router, prefix=USER_BASE, tags=['users'])
    app.include_router(auth_router, prefix=AUTH_BASE, tags=['auth'])
    app.include_router(event_router, prefix=EVENT_BASE, tags=['event'])
    app.include_router(enrollment_router, prefix=ENROLLMENT_BASE, tags=['enrollments'])
    app.include_router(ticket_router, prefix=TICKET_BASE, tags=['tickets'])
    app.include_router(payment_router, prefix=PAYMENT_BASE, tags=['payments'])

    # Lodging
    app.include_router(hotel_router, prefix=HOTEL_BASE, tags=['hotels'])
    app.include_router(booking_router, prefix=BOOKING_BASE, tags=['booking'])

    _register_common_endpoints(app)

    return app


def _register_common_endpoints(app: FastAPI) -> None:
    """Register health and metrics endpoints."""

    @app.get(HEALTH, response_class=PlainTextResponse)
    async def health_check() -> str:
        return 'OK!'

    @app.get(METRICS)
    async def get_metrics() -> PlainTextResponse:
        """Prometheus metrics endpoint."""
        return PlainTextResponse(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
