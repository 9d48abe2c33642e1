"""Build the inventory, order and discrepancy reports."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from sqlalchemy.orm import Session

from app.domain.entities import Article, OrderLine
from app.infrastructure import spreadsheets
from app.infrastructure.repositories import ArticleRepository, OrderLineRepository
from app.utils import now_in_app_timezone


class ExportKind(str, Enum):
    INVENTORY = "inventory"
    ORDERS = "orders"
    DISCREPANCIES = "discrepancies"


@dataclass(frozen=True)
class ExportFile:
    filename: str
    content: bytes
    content_type: str = spreadsheets.XLSX_CONTENT_TYPE


def list_export_records(
    session: Session, kind: ExportKind
) -> Sequence[Article] | Sequence[OrderLine]:
    """Return the records a report of ``kind`` contains."""

    if kind is ExportKind.ORDERS:
        return OrderLineRepository(session).list()
    articles = ArticleRepository(session).list()
    if kind is ExportKind.DISCREPANCIES:
        return [article for article in articles if article.has_discrepancy()]
    return articles


_WORKBOOK_BUILDERS: dict[ExportKind, tuple[str, Callable[..., bytes]]] = {
    ExportKind.INVENTORY: ("inventory_report", spreadsheets.articles_workbook),
    ExportKind.ORDERS: ("order_report", spreadsheets.order_lines_workbook),
    ExportKind.DISCREPANCIES: ("discrepancies_report", spreadsheets.discrepancies_workbook),
}


def build_export_file(session: Session, kind: ExportKind) -> ExportFile:
    """Return the report of ``kind`` as an Excel workbook."""

    prefix, builder = _WORKBOOK_BUILDERS[kind]
    stamp = now_in_app_timezone().strftime("%Y%m%d")
    return ExportFile(
        filename=f"{prefix}_{stamp}.xlsx",
        content=builder(list_export_records(session, kind)),
    )


__all__ = ["ExportFile", "ExportKind", "build_export_file", "list_export_records"]
