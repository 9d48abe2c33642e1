"""Routes for order lines and their inventory confirmation."""

from fastapi import APIRouter, Depends, File, UploadFile, status
from sqlalchemy.orm import Session

from app.application.use_cases.order_lines import (
    create_order_line as create_order_line_uc,
    import_order_lines as import_order_lines_uc,
    inventory_order_line as inventory_order_line_uc,
    list_order_lines as list_order_lines_uc,
)
from app.domain.exceptions import ValidationError
from app.infrastructure.database import get_db
from app.infrastructure.realtime import EventPublisher
from app.interfaces.api.dependencies import get_event_publisher
from app.interfaces.api.routes_helpers import to_http_exception
from app.interfaces.api.schemas import (
    OrderLineCreate,
    OrderLineImportResponse,
    OrderLineInventory,
    OrderLineRead,
)

from .articles import NO_FILE_MESSAGE

router = APIRouter(prefix="/api/order-lines", tags=["order-lines"])


@router.get("", response_model=list[OrderLineRead])
def list_order_lines(db: Session = Depends(get_db)):
    return [OrderLineRead.model_validate(line) for line in list_order_lines_uc(db)]


@router.post("", response_model=OrderLineRead, status_code=status.HTTP_201_CREATED)
def create_order_line(
    order_line_in: OrderLineCreate,
    db: Session = Depends(get_db),
    publisher: EventPublisher = Depends(get_event_publisher),
):
    try:
        order_line = create_order_line_uc(db, publisher, **order_line_in.model_dump())
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return OrderLineRead.model_validate(order_line)


@router.post("/import", response_model=OrderLineImportResponse)
def import_order_lines(
    file: UploadFile | None = File(default=None),
    db: Session = Depends(get_db),
    publisher: EventPublisher = Depends(get_event_publisher),
):
    """Replace every order line with the rows of an .xlsx, .xls or .csv file."""

    try:
        if file is None:
            raise ValidationError(NO_FILE_MESSAGE)
        order_lines = import_order_lines_uc(
            db,
            publisher,
            file_bytes=file.file.read(),
            filename=file.filename or "",
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return OrderLineImportResponse(
        count=len(order_lines),
        order_lines=[OrderLineRead.model_validate(line) for line in order_lines],
    )


@router.post("/{order_line_id}/inventory", response_model=OrderLineRead)
def inventory_order_line(
    order_line_id: str,
    inventory_in: OrderLineInventory,
    db: Session = Depends(get_db),
    publisher: EventPublisher = Depends(get_event_publisher),
):
    """Confirm a picked order line.

    Lines that are not "Plockat" are rejected with 400 and
    ``{"message", "pickStatus"}`` as detail.
    """

    try:
        order_line = inventory_order_line_uc(
            db,
            publisher,
            order_line_id=order_line_id,
            user_id=inventory_in.user_id,
            inventoried_quantity=inventory_in.inventoried_quantity,
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return OrderLineRead.model_validate(order_line)
