"""Read uploaded spreadsheets and build the Excel reports."""

from __future__ import annotations

import importlib
import logging
import math
from collections.abc import Iterable, Mapping, Sequence
from io import BytesIO
from pathlib import Path
from typing import Any

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill

from app.domain.entities import PICK_STATUS_NOT_PICKED, Article, OrderLine
from app.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".xlsx", ".xls", ".csv")
XLSX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

# First non-empty alias wins.
ARTICLE_COLUMNS: Mapping[str, tuple[str, ...]] = {
    "article_number": ("Artikelnummer", "articleNumber"),
    "description": ("Beskrivning", "description"),
    "length": ("Längd", "length"),
    "location": ("Lagerplats", "location"),
}

ORDER_LINE_COLUMNS: Mapping[str, tuple[str, ...]] = {
    "order_number": ("Ordernummer", "Ordernr", "orderNumber"),
    "article_number": ("art.nr", "Artikelnummer", "articleNumber"),
    "description": ("Besk", "Beskrivning", "description"),
    "length": ("Längd", "length"),
    "position": ("Pos",),
    "quantity": ("Antal", "quantity"),
    "pick_status": ("Plockstatt", "Plockstatus", "pickStatus"),
}

ARTICLE_HEADERS = (
    "Artikelnummer",
    "Beskrivning",
    "Längd",
    "Lagerplats",
    "Inventerat antal",
    "Status",
    "Anteckningar",
)
ORDER_LINE_HEADERS = (
    "Ordernummer",
    "Artikelnummer",
    "Beskrivning",
    "Längd",
    "Antal",
    "Plockstatus",
    "Inventerad",
)
DISCREPANCY_HEADERS = (
    "Artikelnummer",
    "Beskrivning",
    "Lagerplats",
    "Inventerat antal",
    "Anteckningar",
)


def _get_pandas_module() -> Any:
    """Load :mod:`pandas` lazily; it is only needed for imports."""

    return importlib.import_module("pandas")


def read_rows(file_bytes: bytes, filename: str) -> list[dict[str, Any]]:
    """Return the rows of the first sheet of an uploaded file as dictionaries.

    Blank cells become ``None`` and rows without any value are dropped.
    """

    suffix = Path(filename or "").suffix.lower()
    if suffix not in SUPPORTED_EXTENSIONS:
        raise ValidationError(
            "Filformatet stöds inte, använd .xlsx, .xls eller .csv"
        )
    if not file_bytes:
        raise ValidationError("Filen är tom")

    pd = _get_pandas_module()
    buffer = BytesIO(file_bytes)
    try:
        if suffix == ".csv":
            dataframe = pd.read_csv(buffer, dtype=object)
        else:
            dataframe = pd.read_excel(buffer, dtype=object)
    except Exception as exc:  # pandas raises many parser specific errors
        logger.exception("Could not read uploaded spreadsheet %s", filename)
        raise ValidationError("Filen kunde inte läsas") from exc

    dataframe.columns = [str(column).strip() for column in dataframe.columns]
    dataframe = dataframe.dropna(how="all").reset_index(drop=True)
    normalized = dataframe.astype("object").where(pd.notnull(dataframe), None)
    return [
        {key: _blank_to_none(value) for key, value in row.items()}
        for row in normalized.to_dict(orient="records")
    ]


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    return value


def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def _pick(row: Mapping[str, Any], aliases: Sequence[str]) -> str:
    for alias in aliases:
        text = _cell_text(row.get(alias))
        if text:
            return text
    return ""


def _parse_quantity(text: str, line_number: int) -> int:
    if not text:
        return 0
    try:
        number = float(text.replace(",", "."))
    except ValueError as exc:
        raise ValidationError(
            f"Ogiltigt antal '{text}' på rad {line_number}"
        ) from exc
    if not number.is_integer() or number < 0:
        raise ValidationError(f"Ogiltigt antal '{text}' på rad {line_number}")
    return int(number)


def articles_from_rows(rows: Iterable[Mapping[str, Any]]) -> list[Article]:
    articles = []
    for line_number, row in enumerate(rows, start=2):
        values = {field: _pick(row, aliases) for field, aliases in ARTICLE_COLUMNS.items()}
        if not values["article_number"]:
            raise ValidationError(f"Artikelnummer saknas på rad {line_number}")
        articles.append(
            Article(
                id=None,
                inventory_count=None,
                notes=None,
                is_inventoried=False,
                last_inventoried_by=None,
                last_inventoried_at=None,
                created_at=None,
                **values,
            )
        )
    return articles


def order_lines_from_rows(rows: Iterable[Mapping[str, Any]]) -> list[OrderLine]:
    order_lines = []
    for line_number, row in enumerate(rows, start=2):
        values = {
            field: _pick(row, aliases) for field, aliases in ORDER_LINE_COLUMNS.items()
        }
        order_lines.append(
            OrderLine(
                id=None,
                order_number=values["order_number"],
                article_number=values["article_number"],
                description=values["description"],
                length=values["length"],
                position=values["position"] or None,
                quantity=_parse_quantity(values["quantity"], line_number),
                pick_status=values["pick_status"] or PICK_STATUS_NOT_PICKED,
                is_inventoried=False,
                inventoried_by=None,
                inventoried_at=None,
                inventoried_quantity=None,
                created_at=None,
            )
        )
    return order_lines


def _create_workbook(title: str, headers: Sequence[str], rows: Iterable[Sequence[Any]]) -> bytes:
    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = title

    worksheet.append(list(headers))
    header_fill = PatternFill(fill_type="solid", fgColor="4F81BD")
    header_font = Font(color="FFFFFFFF", bold=True)
    header_alignment = Alignment(horizontal="center", vertical="center")
    for cell in worksheet[1]:
        cell.fill = header_fill
        cell.font = header_font
        cell.alignment = header_alignment
    worksheet.freeze_panes = "A2"

    for row in rows:
        worksheet.append(list(row))

    buffer = BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


def articles_workbook(articles: Iterable[Article]) -> bytes:
    rows = (
        (
            article.article_number,
            article.description,
            article.length,
            article.location,
            article.inventory_count if article.inventory_count is not None else "",
            "Inventerad" if article.is_inventoried else "Ej inventerad",
            article.notes or "",
        )
        for article in articles
    )
    return _create_workbook("Artiklar", ARTICLE_HEADERS, rows)


def order_lines_workbook(order_lines: Iterable[OrderLine]) -> bytes:
    rows = (
        (
            line.order_number,
            line.article_number,
            line.description,
            line.length,
            line.quantity,
            line.pick_status,
            "Ja" if line.is_inventoried else "Nej",
        )
        for line in order_lines
    )
    return _create_workbook("Orderrader", ORDER_LINE_HEADERS, rows)


def discrepancies_workbook(articles: Iterable[Article]) -> bytes:
    rows = (
        (
            article.article_number,
            article.description,
            article.location,
            article.inventory_count if article.inventory_count is not None else "",
            article.notes,
        )
        for article in articles
        if article.has_discrepancy()
    )
    return _create_workbook("Avvikelser", DISCREPANCY_HEADERS, rows)


__all__ = [
    "ARTICLE_COLUMNS",
    "ORDER_LINE_COLUMNS",
    "SUPPORTED_EXTENSIONS",
    "XLSX_CONTENT_TYPE",
    "articles_from_rows",
    "articles_workbook",
    "discrepancies_workbook",
    "order_lines_from_rows",
    "order_lines_workbook",
    "read_rows",
]
