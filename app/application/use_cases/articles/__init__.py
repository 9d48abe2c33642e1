"""Use cases for the article catalogue."""

from .create_article import create_article
from .import_articles import import_articles
from .list_articles import list_articles
from .record_article_count import record_article_count
from .update_article import update_article

__all__ = [
    "create_article",
    "import_articles",
    "list_articles",
    "record_article_count",
    "update_article",
]
