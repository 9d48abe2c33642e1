"""Report downloads."""

from enum import Enum

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from app.application.use_cases.exports import (
    ExportKind,
    build_export_file,
    list_export_records,
)
from app.domain.entities import OrderLine
from app.infrastructure.database import get_db
from app.interfaces.api.schemas import ArticleRead, OrderLineRead

router = APIRouter(prefix="/api/export", tags=["export"])


class ExportFormat(str, Enum):
    JSON = "json"
    XLSX = "xlsx"


@router.get("/{kind}", response_model=None)
def export_report(
    kind: ExportKind,
    export_format: ExportFormat = Query(ExportFormat.JSON, alias="format"),
    db: Session = Depends(get_db),
):
    """Return the inventory, order or discrepancy report as JSON or Excel."""

    if export_format is ExportFormat.XLSX:
        export_file = build_export_file(db, kind)
        return Response(
            content=export_file.content,
            media_type=export_file.content_type,
            headers={
                "Content-Disposition": f'attachment; filename="{export_file.filename}"'
            },
        )

    records = list_export_records(db, kind)
    return [
        (OrderLineRead if isinstance(record, OrderLine) else ArticleRead)
        .model_validate(record)
        .model_dump(mode="json", by_alias=True)
        for record in records
    ]
