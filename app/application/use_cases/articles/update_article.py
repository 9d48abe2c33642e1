"""Use case for editing an article."""

from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from app.domain.entities import Article, ChangeEvent, ResourceType
from app.domain.exceptions import NotFoundError, ValidationError
from app.infrastructure.realtime import EventPublisher
from app.infrastructure.repositories import ArticleRepository, UserRepository
from app.utils import now_in_app_timezone

UPDATABLE_FIELDS = frozenset(
    {
        "article_number",
        "description",
        "length",
        "location",
        "inventory_count",
        "notes",
        "is_inventoried",
        "last_inventoried_by",
    }
)
REQUIRED_FIELDS = frozenset(
    {"article_number", "description", "length", "location", "is_inventoried"}
)


def update_article(
    session: Session,
    publisher: EventPublisher,
    *,
    article_id: str,
    changes: dict[str, Any],
) -> Article:
    """Apply the fields present in ``changes`` to the article.

    Setting ``last_inventoried_by`` also stamps ``last_inventoried_at``.
    """

    unknown = set(changes) - UPDATABLE_FIELDS
    if unknown:
        raise ValidationError(f"Okända fält: {', '.join(sorted(unknown))}")

    repository = ArticleRepository(session)
    article = repository.get(article_id)
    if article is None:
        raise NotFoundError("Artikeln hittades inte")

    missing = sorted(
        field for field in REQUIRED_FIELDS if field in changes and changes[field] is None
    )
    if missing:
        raise ValidationError(f"Fälten kan inte tömmas: {', '.join(missing)}")
    if "article_number" in changes and not changes["article_number"].strip():
        raise ValidationError("Artikelnummer måste anges")

    inventoried_by = changes.get("last_inventoried_by")
    if inventoried_by is not None:
        if UserRepository(session).get(inventoried_by) is None:
            raise NotFoundError("Användaren hittades inte")
        changes = {**changes, "last_inventoried_at": now_in_app_timezone()}

    saved = repository.update(replace(article, **changes))
    publisher.publish(ChangeEvent.updated(ResourceType.ARTICLE, saved))
    return saved
