"""Use case for adding a single article to the catalogue."""

from sqlalchemy.orm import Session

from app.domain.entities import Article, ChangeEvent, ResourceType
from app.domain.exceptions import ValidationError
from app.infrastructure.realtime import EventPublisher
from app.infrastructure.repositories import ArticleRepository


def create_article(
    session: Session,
    publisher: EventPublisher,
    *,
    article_number: str,
    description: str,
    length: str,
    location: str,
    inventory_count: int | None = None,
    notes: str | None = None,
) -> Article:
    """Create an article; a duplicated number is reported as a conflict."""

    article_number = article_number.strip()
    if not article_number:
        raise ValidationError("Artikelnummer måste anges")

    article = ArticleRepository(session).create(
        Article(
            id=None,
            article_number=article_number,
            description=description,
            length=length,
            location=location,
            inventory_count=inventory_count,
            notes=notes,
            is_inventoried=inventory_count is not None,
            last_inventoried_by=None,
            last_inventoried_at=None,
            created_at=None,
        )
    )
    publisher.publish(ChangeEvent.created(ResourceType.ARTICLE, article))
    return article
