"""Tests for spreadsheet import parsing and report generation."""

from io import BytesIO

import pytest
from openpyxl import Workbook, load_workbook

from app.domain.entities import Article
from app.domain.exceptions import ValidationError
from app.infrastructure.spreadsheets import (
    articles_from_rows,
    articles_workbook,
    discrepancies_workbook,
    order_lines_from_rows,
    read_rows,
)


def _xlsx(rows) -> bytes:
    workbook = Workbook()
    worksheet = workbook.active
    for row in rows:
        worksheet.append(row)
    buffer = BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


def _article(number: str, notes: str | None = None) -> Article:
    return Article(
        id=None,
        article_number=number,
        description="Bräda",
        length="4.2",
        location="A1",
        inventory_count=5,
        notes=notes,
        is_inventoried=True,
        last_inventoried_by=None,
        last_inventoried_at=None,
        created_at=None,
    )


def test_read_articles_from_xlsx_with_swedish_headers():
    content = _xlsx(
        [
            ["Artikelnummer", "Beskrivning", "Längd", "Lagerplats"],
            [1001, "Regel", 4.5, "A1"],
            [None, None, None, None],
            ["ART-2", "Bräda", "3,6", "B2"],
        ]
    )

    articles = articles_from_rows(read_rows(content, "artiklar.xlsx"))

    assert [article.article_number for article in articles] == ["1001", "ART-2"]
    assert articles[0].length == "4.5"
    assert articles[1].location == "B2"
    assert not articles[0].is_inventoried


def test_read_order_lines_from_csv_with_aliases():
    content = (
        "Ordernr,art.nr,Besk,Längd,Pos,Antal,Plockstatt\n"
        "5001,ART-1,Regel,4.5,1,3,Plockat\n"
        "5001,ART-2,Bräda,3.6,2,,\n"
    ).encode("utf-8")

    lines = order_lines_from_rows(read_rows(content, "orders.csv"))

    assert [line.order_number for line in lines] == ["5001", "5001"]
    assert lines[0].pick_status == "Plockat"
    assert lines[0].quantity == 3
    assert lines[1].quantity == 0
    assert lines[1].pick_status == "Ej plockat"
    assert lines[1].position == "2"


def test_english_headers_are_accepted():
    content = "articleNumber,description,length,location\nART-9,List,1.2,C3\n".encode()

    [article] = articles_from_rows(read_rows(content, "articles.CSV"))

    assert article.article_number == "ART-9"
    assert article.description == "List"


@pytest.mark.parametrize("filename", ["articles.txt", "articles", "articles.json"])
def test_unsupported_extensions_are_rejected(filename):
    with pytest.raises(ValidationError):
        read_rows(b"data", filename)


def test_unreadable_file_is_a_validation_error():
    with pytest.raises(ValidationError):
        read_rows(b"this is not a workbook", "articles.xlsx")


def test_missing_article_number_is_rejected():
    content = "Artikelnummer,Beskrivning\n,Regel\n".encode()
    with pytest.raises(ValidationError):
        articles_from_rows(read_rows(content, "articles.csv"))


def test_invalid_quantity_is_rejected():
    content = "Ordernummer,Artikelnummer,Antal\n1,ART-1,many\n".encode()
    with pytest.raises(ValidationError):
        order_lines_from_rows(read_rows(content, "orders.csv"))


def test_inventory_report_layout():
    workbook = load_workbook(BytesIO(articles_workbook([_article("ART-1")])))
    worksheet = workbook["Artiklar"]

    rows = list(worksheet.iter_rows(values_only=True))
    assert rows[0] == (
        "Artikelnummer",
        "Beskrivning",
        "Längd",
        "Lagerplats",
        "Inventerat antal",
        "Status",
        "Anteckningar",
    )
    assert rows[1][0] == "ART-1"
    assert rows[1][5] == "Inventerad"


def test_discrepancy_report_only_lists_articles_with_notes():
    content = discrepancies_workbook([_article("ART-1"), _article("ART-2", notes="Saknas 2")])
    worksheet = load_workbook(BytesIO(content))["Avvikelser"]

    rows = list(worksheet.iter_rows(values_only=True))
    assert len(rows) == 2
    assert rows[1][0] == "ART-2"
    assert rows[1][4] == "Saknas 2"
