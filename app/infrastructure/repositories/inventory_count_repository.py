"""Persistence layer for inventory counts."""

from __future__ import annotations

from collections.abc import Sequence
from uuid import uuid4

from sqlalchemy.orm import Session

from app.domain.entities import InventoryCount
from app.infrastructure.models import InventoryCountModel
from app.utils import ensure_app_timezone, now_in_app_timezone

from .session_helpers import commit_or_conflict


class InventoryCountRepository:
    """Provide CRUD operations for inventory counts."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, *, article_id: str | None = None) -> Sequence[InventoryCount]:
        query = self.session.query(InventoryCountModel)
        if article_id is not None:
            query = query.filter(InventoryCountModel.article_id == article_id)
        query = query.order_by(InventoryCountModel.created_at.desc())
        return [self._to_entity(model) for model in query.all()]

    def get(self, inventory_count_id: str) -> InventoryCount | None:
        model = self.session.get(InventoryCountModel, inventory_count_id)
        return self._to_entity(model) if model else None

    def create(self, inventory_count: InventoryCount) -> InventoryCount:
        model = InventoryCountModel(
            id=inventory_count.id or str(uuid4()),
            article_id=inventory_count.article_id,
            user_id=inventory_count.user_id,
            count=inventory_count.count,
            notes=inventory_count.notes,
            created_at=inventory_count.created_at or now_in_app_timezone(),
        )
        self.session.add(model)
        commit_or_conflict(self.session, "Inventeringen kunde inte sparas")
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, inventory_count: InventoryCount) -> InventoryCount:
        model = self.session.get(InventoryCountModel, inventory_count.id)
        if not model:
            msg = f"Inventory count with id {inventory_count.id} not found"
            raise ValueError(msg)
        model.count = inventory_count.count
        model.notes = inventory_count.notes
        self.session.add(model)
        commit_or_conflict(self.session, "Inventeringen kunde inte uppdateras")
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, inventory_count_id: str) -> bool:
        model = self.session.get(InventoryCountModel, inventory_count_id)
        if not model:
            return False
        self.session.delete(model)
        commit_or_conflict(self.session, "Inventeringen kunde inte tas bort")
        return True

    @staticmethod
    def _to_entity(model: InventoryCountModel) -> InventoryCount:
        return InventoryCount(
            id=model.id,
            article_id=model.article_id,
            user_id=model.user_id,
            count=model.count,
            notes=model.notes,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["InventoryCountRepository"]
