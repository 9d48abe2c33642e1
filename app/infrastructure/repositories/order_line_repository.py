"""Persistence layer for order lines."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from uuid import uuid4

from sqlalchemy.orm import Session

from app.domain.entities import OrderLine
from app.infrastructure.models import OrderLineModel
from app.utils import ensure_app_timezone, now_in_app_timezone

from .session_helpers import commit_or_conflict


class OrderLineRepository:
    """Provide CRUD operations for order lines."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[OrderLine]:
        query = self.session.query(OrderLineModel).order_by(
            OrderLineModel.order_number, OrderLineModel.position
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, order_line_id: str) -> OrderLine | None:
        model = self.session.get(OrderLineModel, order_line_id)
        return self._to_entity(model) if model else None

    def create(self, order_line: OrderLine) -> OrderLine:
        model = self._new_model(order_line)
        self.session.add(model)
        commit_or_conflict(self.session, "Orderraden kunde inte skapas")
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, order_line: OrderLine) -> OrderLine:
        model = self.session.get(OrderLineModel, order_line.id)
        if not model:
            msg = f"Order line with id {order_line.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, order_line)
        self.session.add(model)
        commit_or_conflict(self.session, "Orderraden kunde inte uppdateras")
        self.session.refresh(model)
        return self._to_entity(model)

    def replace_all(self, order_lines: Iterable[OrderLine]) -> Sequence[OrderLine]:
        """Delete every order line and insert ``order_lines`` in one transaction."""

        self.session.query(OrderLineModel).delete(synchronize_session=False)
        models = [self._new_model(order_line) for order_line in order_lines]
        self.session.add_all(models)
        commit_or_conflict(self.session, "Orderraderna kunde inte importeras")
        for model in models:
            self.session.refresh(model)
        return [self._to_entity(model) for model in models]

    def _new_model(self, order_line: OrderLine) -> OrderLineModel:
        model = OrderLineModel(
            id=order_line.id or str(uuid4()),
            created_at=order_line.created_at or now_in_app_timezone(),
        )
        self._apply_entity_to_model(model, order_line)
        return model

    @staticmethod
    def _to_entity(model: OrderLineModel) -> OrderLine:
        return OrderLine(
            id=model.id,
            order_number=model.order_number,
            article_number=model.article_number,
            description=model.description,
            length=model.length,
            position=model.position,
            quantity=model.quantity,
            pick_status=model.pick_status,
            is_inventoried=model.is_inventoried,
            inventoried_by=model.inventoried_by,
            inventoried_at=ensure_app_timezone(model.inventoried_at),
            inventoried_quantity=model.inventoried_quantity,
            created_at=ensure_app_timezone(model.created_at),
        )

    @staticmethod
    def _apply_entity_to_model(model: OrderLineModel, order_line: OrderLine) -> None:
        model.order_number = order_line.order_number
        model.article_number = order_line.article_number
        model.description = order_line.description
        model.length = order_line.length
        model.position = order_line.position
        model.quantity = order_line.quantity
        model.pick_status = order_line.pick_status
        model.is_inventoried = order_line.is_inventoried
        model.inventoried_by = order_line.inventoried_by
        model.inventoried_at = order_line.inventoried_at
        model.inventoried_quantity = order_line.inventoried_quantity


__all__ = ["OrderLineRepository"]
