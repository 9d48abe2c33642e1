"""Routes for logged inventory counts."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.application.use_cases.inventory_counts import (
    delete_inventory_count as delete_inventory_count_uc,
    list_inventory_counts as list_inventory_counts_uc,
    update_inventory_count as update_inventory_count_uc,
)
from app.infrastructure.database import get_db
from app.infrastructure.realtime import EventPublisher
from app.interfaces.api.dependencies import get_event_publisher
from app.interfaces.api.routes_helpers import to_http_exception
from app.interfaces.api.schemas import (
    InventoryCountRead,
    InventoryCountUpdate,
    SuccessResponse,
)

router = APIRouter(prefix="/api/inventory-counts", tags=["inventory-counts"])


@router.get("", response_model=list[InventoryCountRead])
def list_inventory_counts(db: Session = Depends(get_db)):
    return [
        InventoryCountRead.model_validate(item) for item in list_inventory_counts_uc(db)
    ]


@router.get("/article/{article_id}", response_model=list[InventoryCountRead])
def list_article_inventory_counts(article_id: str, db: Session = Depends(get_db)):
    """Return the counts logged for one article, newest first."""

    return [
        InventoryCountRead.model_validate(item)
        for item in list_inventory_counts_uc(db, article_id=article_id)
    ]


@router.patch("/{inventory_count_id}", response_model=InventoryCountRead)
def update_inventory_count(
    inventory_count_id: str,
    count_in: InventoryCountUpdate,
    db: Session = Depends(get_db),
    publisher: EventPublisher = Depends(get_event_publisher),
):
    """Correct ``count`` and/or ``notes``; omitted fields are left as they are."""

    try:
        inventory_count = update_inventory_count_uc(
            db,
            publisher,
            inventory_count_id=inventory_count_id,
            changes=count_in.model_dump(exclude_unset=True),
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return InventoryCountRead.model_validate(inventory_count)


@router.delete("/{inventory_count_id}", response_model=SuccessResponse)
def delete_inventory_count(
    inventory_count_id: str,
    db: Session = Depends(get_db),
    publisher: EventPublisher = Depends(get_event_publisher),
):
    try:
        delete_inventory_count_uc(db, publisher, inventory_count_id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return SuccessResponse()
