"""Routes for managing warehouse users."""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.application.use_cases.users import (
    create_user as create_user_uc,
    delete_user as delete_user_uc,
    list_users as list_users_uc,
    record_activity as record_activity_uc,
    update_user as update_user_uc,
)
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.infrastructure.realtime import EventPublisher
from app.interfaces.api.dependencies import get_current_user, get_event_publisher
from app.interfaces.api.routes_helpers import to_http_exception
from app.interfaces.api.schemas import SuccessResponse, UserCreate, UserRead, UserUpdate

router = APIRouter(prefix="/api/users", tags=["users"])
logger = logging.getLogger(__name__)


def _to_read_model(user: User) -> UserRead:
    return UserRead.model_validate(user)


@router.get("", response_model=list[UserRead])
def list_users(db: Session = Depends(get_db)):
    """Return every registered user."""

    return [_to_read_model(user) for user in list_users_uc(db)]


@router.get("/me", response_model=UserRead)
def read_current_user(current_user: User = Depends(get_current_user)):
    """Return the user the bearer token was issued to."""

    return _to_read_model(current_user)


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def create_user(
    user_in: UserCreate,
    db: Session = Depends(get_db),
    publisher: EventPublisher = Depends(get_event_publisher),
):
    """Create a user; without a password the default one is assigned."""

    try:
        user = create_user_uc(
            db,
            publisher,
            name=user_in.name,
            role=user_in.role,
            email=user_in.email,
            password=user_in.password,
            is_active=user_in.is_active,
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(user)


@router.patch("/{user_id}", response_model=UserRead)
def update_user(
    user_id: str,
    user_in: UserUpdate,
    db: Session = Depends(get_db),
    publisher: EventPublisher = Depends(get_event_publisher),
):
    update_data = user_in.model_dump(exclude_unset=True)
    try:
        user = update_user_uc(db, publisher, user_id=user_id, **update_data)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(user)


@router.delete("/{user_id}", response_model=SuccessResponse)
def delete_user(
    user_id: str,
    db: Session = Depends(get_db),
    publisher: EventPublisher = Depends(get_event_publisher),
):
    try:
        delete_user_uc(db, publisher, user_id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return SuccessResponse()


@router.post("/{user_id}/activity", response_model=SuccessResponse)
def record_activity(
    user_id: str,
    db: Session = Depends(get_db),
    publisher: EventPublisher = Depends(get_event_publisher),
):
    """Mark the user as active now."""

    try:
        record_activity_uc(db, publisher, user_id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return SuccessResponse()
