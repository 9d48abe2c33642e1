"""Use case for replacing the order lines from a spreadsheet."""

import logging
from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import ChangeEvent, OrderLine, ResourceType
from app.infrastructure.realtime import EventPublisher
from app.infrastructure.repositories import OrderLineRepository
from app.infrastructure.spreadsheets import order_lines_from_rows, read_rows

logger = logging.getLogger(__name__)


def import_order_lines(
    session: Session,
    publisher: EventPublisher,
    *,
    file_bytes: bytes,
    filename: str,
) -> Sequence[OrderLine]:
    """Replace every order line with the rows of the uploaded file."""

    order_lines = order_lines_from_rows(read_rows(file_bytes, filename))
    created = OrderLineRepository(session).replace_all(order_lines)
    logger.info("Imported %d order lines from %s", len(created), filename)
    publisher.publish(ChangeEvent.imported(ResourceType.ORDER_LINE, created))
    return created
