"""Routes for the article catalogue and article counts."""

import logging

from fastapi import APIRouter, Depends, File, UploadFile, status
from sqlalchemy.orm import Session

from app.application.use_cases.articles import (
    create_article as create_article_uc,
    import_articles as import_articles_uc,
    list_articles as list_articles_uc,
    record_article_count as record_article_count_uc,
    update_article as update_article_uc,
)
from app.domain.exceptions import ValidationError
from app.infrastructure.database import get_db
from app.infrastructure.realtime import EventPublisher
from app.interfaces.api.dependencies import get_event_publisher
from app.interfaces.api.routes_helpers import to_http_exception
from app.interfaces.api.schemas import (
    ArticleCountCreate,
    ArticleCreate,
    ArticleImportResponse,
    ArticleRead,
    ArticleUpdate,
    InventoryCountRead,
)

router = APIRouter(prefix="/api/articles", tags=["articles"])
logger = logging.getLogger(__name__)

NO_FILE_MESSAGE = "Ingen fil laddades upp"


@router.get("", response_model=list[ArticleRead])
def list_articles(db: Session = Depends(get_db)):
    return [ArticleRead.model_validate(article) for article in list_articles_uc(db)]


@router.post("", response_model=ArticleRead, status_code=status.HTTP_201_CREATED)
def create_article(
    article_in: ArticleCreate,
    db: Session = Depends(get_db),
    publisher: EventPublisher = Depends(get_event_publisher),
):
    try:
        article = create_article_uc(db, publisher, **article_in.model_dump())
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return ArticleRead.model_validate(article)


@router.post("/import", response_model=ArticleImportResponse)
def import_articles(
    file: UploadFile | None = File(default=None),
    db: Session = Depends(get_db),
    publisher: EventPublisher = Depends(get_event_publisher),
):
    """Replace the whole catalogue with the rows of an .xlsx, .xls or .csv file.

    Existing counts are removed together with their articles.
    """

    try:
        if file is None:
            raise ValidationError(NO_FILE_MESSAGE)
        articles = import_articles_uc(
            db,
            publisher,
            file_bytes=file.file.read(),
            filename=file.filename or "",
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return ArticleImportResponse(
        count=len(articles),
        articles=[ArticleRead.model_validate(article) for article in articles],
    )


@router.patch("/{article_id}", response_model=ArticleRead)
def update_article(
    article_id: str,
    article_in: ArticleUpdate,
    db: Session = Depends(get_db),
    publisher: EventPublisher = Depends(get_event_publisher),
):
    try:
        article = update_article_uc(
            db,
            publisher,
            article_id=article_id,
            changes=article_in.model_dump(exclude_unset=True),
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return ArticleRead.model_validate(article)


@router.post(
    "/{article_id}/inventory",
    response_model=InventoryCountRead,
    status_code=status.HTTP_201_CREATED,
)
def record_article_count(
    article_id: str,
    count_in: ArticleCountCreate,
    db: Session = Depends(get_db),
    publisher: EventPublisher = Depends(get_event_publisher),
):
    """Log a count for the article on behalf of ``userId``."""

    try:
        inventory_count = record_article_count_uc(
            db,
            publisher,
            article_id=article_id,
            user_id=count_in.user_id,
            count=count_in.inventory_count,
            notes=count_in.notes,
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return InventoryCountRead.model_validate(inventory_count)
