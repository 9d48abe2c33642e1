"""Login endpoint."""

import logging
from datetime import timedelta

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.application.use_cases.users import login_user
from app.config import get_settings
from app.infrastructure.database import get_db
from app.infrastructure.realtime import EventPublisher
from app.infrastructure.security import create_access_token
from app.interfaces.api.dependencies import get_event_publisher
from app.interfaces.api.routes_helpers import to_http_exception
from app.interfaces.api.schemas import LoginRequest, Token, UserRead

router = APIRouter(prefix="/api", tags=["auth"])
settings = get_settings()
logger = logging.getLogger(__name__)


@router.post("/login", response_model=Token)
def login(
    credentials: LoginRequest,
    db: Session = Depends(get_db),
    publisher: EventPublisher = Depends(get_event_publisher),
):
    """Authenticate by user name and password and return a JWT."""

    try:
        user = login_user(
            db, publisher, name=credentials.name, password=credentials.password
        )
    except ValueError as exc:
        logger.info("Rejected login for %s", credentials.name)
        raise to_http_exception(exc) from exc

    access_token = create_access_token(
        data={"sub": user.id, "role": user.role},
        expires_delta=timedelta(minutes=settings.access_token_expire_minutes),
    )
    return Token(access_token=access_token, user=UserRead.model_validate(user))
