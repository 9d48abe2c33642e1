"""Use case for confirming a picked order line."""

from dataclasses import replace

from sqlalchemy.orm import Session

from app.domain.entities import INVENTORIED_ACTION, ChangeEvent, OrderLine, ResourceType
from app.domain.exceptions import DomainRuleError, NotFoundError, ValidationError
from app.infrastructure.realtime import EventPublisher
from app.infrastructure.repositories import OrderLineRepository, UserRepository
from app.utils import now_in_app_timezone

ONLY_PICKED_MESSAGE = "Endast plockade orderrader kan inventeras"


def inventory_order_line(
    session: Session,
    publisher: EventPublisher,
    *,
    order_line_id: str,
    user_id: str,
    inventoried_quantity: int | None = None,
) -> OrderLine:
    """Mark the order line inventoried by ``user_id``.

    Only lines whose pick status is "Plockat" may be inventoried; any other
    status raises :class:`DomainRuleError` and leaves the line untouched.
    """

    if inventoried_quantity is not None and inventoried_quantity < 0:
        raise ValidationError("Antalet kan inte vara negativt")

    repository = OrderLineRepository(session)
    order_line = repository.get(order_line_id)
    if order_line is None:
        raise NotFoundError("Orderraden hittades inte")
    if not order_line.is_picked():
        raise DomainRuleError(ONLY_PICKED_MESSAGE, pick_status=order_line.pick_status)
    if UserRepository(session).get(user_id) is None:
        raise NotFoundError("Användaren hittades inte")

    saved = repository.update(
        replace(
            order_line,
            is_inventoried=True,
            inventoried_by=user_id,
            inventoried_at=now_in_app_timezone(),
            inventoried_quantity=inventoried_quantity,
        )
    )
    publisher.publish(
        ChangeEvent.updated(ResourceType.ORDER_LINE, saved, action=INVENTORIED_ACTION)
    )
    return saved
