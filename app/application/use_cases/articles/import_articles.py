"""Use case for replacing the catalogue from a spreadsheet."""

import logging
from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Article, ChangeEvent, ResourceType
from app.domain.exceptions import ValidationError
from app.infrastructure.realtime import EventPublisher
from app.infrastructure.repositories import ArticleRepository
from app.infrastructure.spreadsheets import articles_from_rows, read_rows

logger = logging.getLogger(__name__)


def import_articles(
    session: Session,
    publisher: EventPublisher,
    *,
    file_bytes: bytes,
    filename: str,
) -> Sequence[Article]:
    """Replace every article (and its counts) with the rows of the file.

    The file is parsed completely before anything is deleted.
    """

    articles = articles_from_rows(read_rows(file_bytes, filename))
    numbers = [article.article_number for article in articles]
    duplicates = sorted({number for number in numbers if numbers.count(number) > 1})
    if duplicates:
        raise ValidationError(
            f"Dubblerade artikelnummer i filen: {', '.join(duplicates)}"
        )

    created = ArticleRepository(session).replace_all(articles)
    logger.info("Imported %d articles from %s", len(created), filename)
    publisher.publish(ChangeEvent.imported(ResourceType.ARTICLE, created))
    return created
