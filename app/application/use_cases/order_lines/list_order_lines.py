"""Use case for listing order lines."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import OrderLine
from app.infrastructure.repositories import OrderLineRepository


def list_order_lines(session: Session) -> Sequence[OrderLine]:
    return OrderLineRepository(session).list()
