"""Turn record lists into downloadable CSV, XLSX and PDF artifacts.

A table is an ordered list of `Column`s. Each column reads one value from a
record (a key name or a callable) and falls back to a placeholder when the
value is None. The same rows feed every output format.
"""
from __future__ import annotations

import csv
import datetime
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from io import BytesIO, StringIO
from typing import Any, Callable, List, Optional, Sequence, Union

from django.utils import timezone
from openpyxl import Workbook
from openpyxl.styles import Font
from reportlab.lib.pagesizes import landscape, letter
from reportlab.pdfgen import canvas

logger = logging.getLogger(__name__)

CSV = 'csv'
XLSX = 'xlsx'
PDF = 'pdf'
FORMATS = (CSV, XLSX, PDF)

# widest block of columns that stays legible on a landscape letter page
PDF_MAX_COLUMNS = 14

CONTENT_TYPES = {
    CSV: 'text/csv; charset=utf-8',
    XLSX: 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet',
    PDF: 'application/pdf',
}

Accessor = Union[str, Callable[[Any], Any]]


class NothingToExport(Exception):
    """Raised instead of producing an artifact with no data rows."""

    def __init__(self, entity: str):
        self.entity = entity
        super().__init__(f'No {entity.lower()} to export')


@dataclass(frozen=True)
class Column:
    label: str
    accessor: Accessor
    placeholder: Optional[str] = None

    def value(self, record: Any, default_placeholder: str) -> Any:
        if callable(self.accessor):
            v = self.accessor(record)
        elif isinstance(record, dict):
            v = record.get(self.accessor)
        else:
            v = getattr(record, self.accessor, None)
        if v is None:
            return self.placeholder if self.placeholder is not None else default_placeholder
        return v


@dataclass(frozen=True)
class ExportTable:
    context: str
    entity: str
    columns: Sequence[Column]
    placeholder: str = 'N/A'
    title: str = ''

    @property
    def headers(self) -> List[str]:
        return [c.label for c in self.columns]

    def rows(self, records: Sequence[Any]) -> List[List[Any]]:
        return [[c.value(r, self.placeholder) for c in self.columns] for r in records]

    def filename(self, ext: str, today: Optional[datetime.date] = None) -> str:
        today = today or timezone.localdate()
        return f'{self.context}_{self.entity}_{today.isoformat()}.{ext}'


@dataclass
class ExportArtifact:
    filename: str
    content_type: str
    content: bytes
    row_count: int
    export_type: str = CSV
    headers: List[str] = field(default_factory=list)


def _plain(v: Any) -> Any:
    if isinstance(v, Decimal):
        return float(v)
    if isinstance(v, (datetime.datetime, datetime.date)):
        return v.isoformat()
    return v


def _text(v: Any) -> str:
    v = _plain(v)
    return '' if v is None else str(v)


def to_csv(headers: Sequence[str], rows: Sequence[Sequence[Any]]) -> str:
    """Header line plus one line per row, every field double-quoted.

    Embedded quotes are doubled (RFC 4180) so a field can never break out of
    its column. Lines are joined with '\\n' and there is no trailing newline.
    """
    sio = StringIO()
    writer = csv.writer(sio, quoting=csv.QUOTE_ALL, lineterminator='\n')
    writer.writerow([_text(h) for h in headers])
    for r in rows:
        writer.writerow([_text(v) for v in r])
    out = sio.getvalue()
    return out[:-1] if out.endswith('\n') else out


def to_xlsx(headers: Sequence[str], rows: Sequence[Sequence[Any]], sheet_title: str = 'data') -> bytes:
    wb = Workbook()
    ws = wb.active
    # sheet titles are capped at 31 characters by Excel
    ws.title = (sheet_title or 'data')[:31]
    ws.append(list(headers))
    for cell in ws[1]:
        cell.font = Font(bold=True)
    for r in rows:
        ws.append([_plain(v) for v in r])
    for idx, header in enumerate(headers, start=1):
        width = max([len(str(header))] + [len(_text(r[idx - 1])) for r in rows if idx - 1 < len(r)])
        ws.column_dimensions[ws.cell(row=1, column=idx).column_letter].width = min(max(width + 2, 10), 60)
    buf = BytesIO()
    wb.save(buf)
    return buf.getvalue()


def column_chunks(count: int, size: int = PDF_MAX_COLUMNS) -> List[range]:
    """Split `count` column indexes into runs of at most `size`."""
    return [range(start, min(start + size, count)) for start in range(0, count, size)]


def to_pdf(title: str, headers: Sequence[str], rows: Sequence[Sequence[Any]], generated_at: Optional[datetime.datetime] = None) -> bytes:
    """Landscape table. Columns past PDF_MAX_COLUMNS continue on following
    pages, one block of columns at a time, each repeating all rows."""
    generated_at = generated_at or timezone.localtime()
    buf = BytesIO()
    c = canvas.Canvas(buf, pagesize=landscape(letter))
    c.setTitle(title)
    width, height = landscape(letter)

    c.setFont('Helvetica-Bold', 12)
    c.drawString(24, height - 24, title)
    c.setFont('Helvetica', 8)
    c.drawString(24, height - 36, f'Generated on: {generated_at:%Y-%m-%d %H:%M}    Total: {len(rows)}')

    x0 = 24
    row_h = 10
    chunks = column_chunks(len(headers)) or [range(0)]

    for n, cols in enumerate(chunks):
        if n:
            c.showPage()
        y = height - 56 if n == 0 else height - 24
        col_w = (width - 48) / len(cols) if len(cols) else (width - 48)
        max_chars = max(int(col_w / 4), 6)

        def _cell(v: Any) -> str:
            return _text(v).replace('\n', ' ')[:max_chars]

        def _header_row(y_pos: float) -> float:
            c.setFont('Helvetica-Bold', 7)
            for j, i in enumerate(cols):
                c.drawString(x0 + j * col_w, y_pos, _cell(headers[i]))
            c.setFont('Helvetica', 7)
            return y_pos - row_h

        y = _header_row(y)
        for r in rows:
            if y < 24:
                c.showPage()
                y = _header_row(height - 24)
            for j, i in enumerate(cols):
                c.drawString(x0 + j * col_w, y, _cell(r[i] if i < len(r) else ''))
            y -= row_h

    c.showPage()
    c.save()
    return buf.getvalue()


def build_export(table: ExportTable, records: Sequence[Any], export_type: str = CSV,
                 today: Optional[datetime.date] = None) -> ExportArtifact:
    """Render `records` through `table` in the requested format.

    Raises NothingToExport for an empty record list and ValueError for an
    unknown format.
    """
    export_type = (export_type or CSV).lower()
    if export_type not in FORMATS:
        raise ValueError(f'Unsupported export format: {export_type}')
    records = list(records)
    if not records:
        raise NothingToExport(table.entity)

    headers = table.headers
    rows = table.rows(records)
    if export_type == CSV:
        # BOM so spreadsheet apps detect UTF-8
        content = to_csv(headers, rows).encode('utf-8-sig')
    elif export_type == XLSX:
        content = to_xlsx(headers, rows, sheet_title=table.entity)
    else:
        content = to_pdf(table.title or f'{table.entity} Export', headers, rows)

    artifact = ExportArtifact(
        filename=table.filename(export_type, today=today),
        content_type=CONTENT_TYPES[export_type],
        content=content,
        row_count=len(rows),
        export_type=export_type,
        headers=headers,
    )
    logger.info('Built export %s rows=%s bytes=%s', artifact.filename, artifact.row_count, len(content))
    return artifact
