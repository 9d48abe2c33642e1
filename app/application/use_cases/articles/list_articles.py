"""Use case for reading the article catalogue."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Article
from app.infrastructure.repositories import ArticleRepository


def list_articles(session: Session) -> Sequence[Article]:
    return ArticleRepository(session).list()
