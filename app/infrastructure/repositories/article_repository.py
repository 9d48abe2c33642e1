"""Persistence layer for articles."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from uuid import uuid4

from sqlalchemy.orm import Session

from app.domain.entities import Article
from app.infrastructure.models import ArticleModel, InventoryCountModel
from app.utils import ensure_app_timezone, now_in_app_timezone

from .session_helpers import commit_or_conflict


class ArticleRepository:
    """Provide CRUD operations for articles."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[Article]:
        query = self.session.query(ArticleModel).order_by(
            ArticleModel.location, ArticleModel.article_number
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, article_id: str) -> Article | None:
        model = self.session.get(ArticleModel, article_id)
        return self._to_entity(model) if model else None

    def create(self, article: Article) -> Article:
        model = self._new_model(article)
        self.session.add(model)
        commit_or_conflict(
            self.session,
            f"Artikelnummer {article.article_number} finns redan",
        )
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, article: Article) -> Article:
        model = self.session.get(ArticleModel, article.id)
        if not model:
            msg = f"Article with id {article.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, article)
        self.session.add(model)
        commit_or_conflict(
            self.session,
            f"Artikelnummer {article.article_number} finns redan",
        )
        self.session.refresh(model)
        return self._to_entity(model)

    def replace_all(self, articles: Iterable[Article]) -> Sequence[Article]:
        """Delete every article (and its counts) and insert ``articles``.

        Everything happens in one transaction: a duplicated article number in
        the new set leaves the previous catalogue untouched.
        """

        self.session.query(InventoryCountModel).delete(synchronize_session=False)
        self.session.query(ArticleModel).delete(synchronize_session=False)
        models = [self._new_model(article) for article in articles]
        self.session.add_all(models)
        commit_or_conflict(
            self.session, "Importen innehåller dubblerade artikelnummer"
        )
        for model in models:
            self.session.refresh(model)
        return [self._to_entity(model) for model in models]

    def _new_model(self, article: Article) -> ArticleModel:
        model = ArticleModel(
            id=article.id or str(uuid4()),
            created_at=article.created_at or now_in_app_timezone(),
        )
        self._apply_entity_to_model(model, article)
        return model

    @staticmethod
    def _to_entity(model: ArticleModel) -> Article:
        return Article(
            id=model.id,
            article_number=model.article_number,
            description=model.description,
            length=model.length,
            location=model.location,
            inventory_count=model.inventory_count,
            notes=model.notes,
            is_inventoried=model.is_inventoried,
            last_inventoried_by=model.last_inventoried_by,
            last_inventoried_at=ensure_app_timezone(model.last_inventoried_at),
            created_at=ensure_app_timezone(model.created_at),
        )

    @staticmethod
    def _apply_entity_to_model(model: ArticleModel, article: Article) -> None:
        model.article_number = article.article_number
        model.description = article.description
        model.length = article.length
        model.location = article.location
        model.inventory_count = article.inventory_count
        model.notes = article.notes
        model.is_inventoried = article.is_inventoried
        model.last_inventoried_by = article.last_inventoried_by
        model.last_inventoried_at = article.last_inventoried_at


__all__ = ["ArticleRepository"]
