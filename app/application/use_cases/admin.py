"""Administration panel use cases."""

import hmac
import logging

from sqlalchemy.orm import Session

from app.config import get_settings
from app.domain.entities import ChangeEvent
from app.domain.exceptions import AuthenticationError
from app.infrastructure.realtime import EventPublisher
from app.infrastructure.repositories import MaintenanceRepository

logger = logging.getLogger(__name__)

WRONG_PASSWORD_MESSAGE = "Felaktigt lösenord"
DATA_CLEARED_MESSAGE = "Databasen har tömts"


def verify_admin_password(password: str) -> None:
    """Raise :class:`AuthenticationError` unless ``password`` is the admin password."""

    expected = get_settings().admin_password
    if not hmac.compare_digest(password.encode(), expected.encode()):
        raise AuthenticationError(WRONG_PASSWORD_MESSAGE)


def clear_all_data(
    session: Session, publisher: EventPublisher, *, password: str
) -> dict[str, int]:
    """Remove all counts, order lines and articles. Users are kept."""

    verify_admin_password(password)
    removed = MaintenanceRepository(session).clear_all_data()
    logger.warning(
        "Cleared warehouse data: %s",
        ", ".join(f"{table}={count}" for table, count in removed.items()),
    )
    publisher.publish(ChangeEvent.data_cleared())
    return removed


__all__ = [
    "DATA_CLEARED_MESSAGE",
    "WRONG_PASSWORD_MESSAGE",
    "clear_all_data",
    "verify_admin_password",
]
