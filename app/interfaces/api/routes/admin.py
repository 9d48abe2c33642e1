"""Administration panel endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.application.use_cases.admin import (
    DATA_CLEARED_MESSAGE,
    clear_all_data as clear_all_data_uc,
    verify_admin_password,
)
from app.infrastructure.database import get_db
from app.infrastructure.realtime import EventPublisher
from app.interfaces.api.dependencies import get_event_publisher
from app.interfaces.api.routes_helpers import to_http_exception
from app.interfaces.api.schemas import AdminPasswordRequest, SuccessResponse

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.post("/verify", response_model=SuccessResponse, response_model_exclude_none=True)
def verify(payload: AdminPasswordRequest):
    """Check the admin password without changing anything."""

    try:
        verify_admin_password(payload.password)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return SuccessResponse()


@router.post("/clear-data", response_model=SuccessResponse)
def clear_data(
    payload: AdminPasswordRequest,
    db: Session = Depends(get_db),
    publisher: EventPublisher = Depends(get_event_publisher),
):
    """Delete all articles, order lines and counts. Users are kept."""

    try:
        clear_all_data_uc(db, publisher, password=payload.password)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return SuccessResponse(message=DATA_CLEARED_MESSAGE)
