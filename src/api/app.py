"""
FastAPI application factory.

* Registers routes for points, the distance matrix, headings and admin.
* Owns one ``MapSession`` per app on ``app.state``; it lives as long as
  the process does.
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.

Every route is ``async def`` and never awaits while touching the session,
so handlers run one at a time on the event loop and need no locking.
"""

import logging

from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from src.api.middleware import limiter
from src.api.routes import admin, headings, matrix, points
from src.config import settings
from src.domain.session import MapSession

logging.basicConfig(level=settings.log_level)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Pin Ruler API",
        description=(
            "Drop pins on a map, link pairs of pins to measure the distance "
            "between them, and view the resulting distance matrix.  Also "
            "numbers markdown headings before rendering."
        ),
        version="1.0.0",
    )

    app.state.map_session = MapSession()

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Routers
    app.include_router(points.router, prefix="/api/v1")
    app.include_router(matrix.router, prefix="/api/v1")
    app.include_router(headings.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    return app
