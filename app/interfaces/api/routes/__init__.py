from fastapi import FastAPI

from .admin import router as admin_router
from .articles import router as articles_router
from .auth import router as auth_router
from .exports import router as exports_router
from .inventory_counts import router as inventory_counts_router
from .order_lines import router as order_lines_router
from .realtime import router as realtime_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(articles_router)
    app.include_router(inventory_counts_router)
    app.include_router(order_lines_router)
    app.include_router(exports_router)
    app.include_router(admin_router)
    app.include_router(realtime_router)
