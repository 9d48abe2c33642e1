"""Use case for adding a single order line."""

from sqlalchemy.orm import Session

from app.domain.entities import PICK_STATUS_NOT_PICKED, ChangeEvent, OrderLine, ResourceType
from app.domain.exceptions import ValidationError
from app.infrastructure.realtime import EventPublisher
from app.infrastructure.repositories import OrderLineRepository


def create_order_line(
    session: Session,
    publisher: EventPublisher,
    *,
    order_number: str,
    article_number: str,
    description: str,
    length: str,
    quantity: int,
    position: str | None = None,
    pick_status: str | None = None,
) -> OrderLine:
    if quantity < 0:
        raise ValidationError("Antalet kan inte vara negativt")

    order_line = OrderLineRepository(session).create(
        OrderLine(
            id=None,
            order_number=order_number,
            article_number=article_number,
            description=description,
            length=length,
            position=position,
            quantity=quantity,
            pick_status=pick_status or PICK_STATUS_NOT_PICKED,
            is_inventoried=False,
            inventoried_by=None,
            inventoried_at=None,
            inventoried_quantity=None,
            created_at=None,
        )
    )
    publisher.publish(ChangeEvent.created(ResourceType.ORDER_LINE, order_line))
    return order_line
