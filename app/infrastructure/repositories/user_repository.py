"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Sequence
from uuid import uuid4

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.infrastructure.models import UserModel
from app.utils import ensure_app_timezone

from .session_helpers import commit_or_conflict


class UserRepository:
    """Provide CRUD operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[User]:
        query = self.session.query(UserModel).order_by(UserModel.name)
        return [self._to_entity(model) for model in query.all()]

    def get(self, user_id: str) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_name(self, name: str) -> User | None:
        model = self.session.query(UserModel).filter_by(name=name).first()
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel(id=user.id or str(uuid4()))
        self._apply_entity_to_model(model, user)
        self.session.add(model)
        commit_or_conflict(self.session, "Användaren kunde inte skapas")
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, user: User) -> User:
        model = self.session.get(UserModel, user.id)
        if not model:
            msg = f"User with id {user.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, user)
        self.session.add(model)
        commit_or_conflict(self.session, "Användaren kunde inte uppdateras")
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, user_id: str) -> bool:
        model = self.session.get(UserModel, user_id)
        if not model:
            return False
        self.session.delete(model)
        commit_or_conflict(
            self.session,
            "Användaren har registrerade inventeringar och kan inte tas bort",
        )
        return True

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            name=model.name,
            role=model.role,
            email=model.email,
            password=model.password,
            is_active=model.is_active,
            last_active=ensure_app_timezone(model.last_active),
        )

    @staticmethod
    def _apply_entity_to_model(model: UserModel, user: User) -> None:
        model.name = user.name
        model.role = user.role
        model.email = user.email
        model.password = user.password
        model.is_active = user.is_active
        model.last_active = user.last_active


__all__ = ["UserRepository"]
