import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.application.use_cases.users import seed_default_users
from app.config import get_settings
from app.infrastructure.database import SessionLocal, engine, initialize_database
from app.infrastructure.realtime import ChangeEventBroadcaster
from app.interfaces.api.routes import register_routes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Prepare the database on startup and release connections on shutdown."""

    initialize_database()
    if get_settings().seed_default_users:
        session = SessionLocal()
        try:
            seed_default_users(session)
        finally:
            session.close()
    yield
    app.state.broadcaster.close_all()
    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = get_settings()
    app = FastAPI(title="Warehouse Inventory", lifespan=lifespan)
    app.state.broadcaster = ChangeEventBroadcaster(
        max_pending=settings.realtime_max_pending,
        overflow_policy=settings.realtime_overflow_policy,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()
