"""Shared commit handling for repositories."""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.domain.exceptions import ConflictError

logger = logging.getLogger(__name__)


def commit_or_conflict(session: Session, message: str) -> None:
    """Commit ``session`` and turn constraint violations into :class:`ConflictError`.

    The session is rolled back before raising so it stays usable for the
    rest of the request.
    """

    try:
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        logger.info("Rejected write: %s (%s)", message, exc.orig)
        raise ConflictError(message) from exc


__all__ = ["commit_or_conflict"]
