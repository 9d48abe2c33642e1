"""Bulk maintenance operations spanning several tables."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.infrastructure.models import ArticleModel, InventoryCountModel, OrderLineModel

from .session_helpers import commit_or_conflict


class MaintenanceRepository:
    """Operations used by the administration panel."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def clear_all_data(self) -> dict[str, int]:
        """Delete counts, order lines and articles; users are kept.

        Returns the number of removed rows per table.
        """

        removed = {
            "inventory_counts": self.session.query(InventoryCountModel).delete(
                synchronize_session=False
            ),
            "order_lines": self.session.query(OrderLineModel).delete(
                synchronize_session=False
            ),
            "articles": self.session.query(ArticleModel).delete(
                synchronize_session=False
            ),
        }
        commit_or_conflict(self.session, "Databasen kunde inte tömmas")
        return removed


__all__ = ["MaintenanceRepository"]
