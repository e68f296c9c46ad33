"""Tabular export of normalized records as CSV and XLSX.

Free-text fields have their commas replaced rather than quoted, so the CSV
stays greppable and safe to paste. The workbook carries the same rows.
"""

from __future__ import annotations

import csv
import io
import re
from collections.abc import Iterable
from pathlib import Path

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE

from smokereport.core.models import NormalizedRecord

HEADER: tuple[str, ...] = ("Suite", "Test", "Status", "Duration(ms)", "Error", "Attachments")
ERROR_MAX_LENGTH = 500
SHEET_TITLE = "Results"

# Terminal colour and cursor sequences, as Playwright embeds them in error messages
ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def flatten_text(text: str) -> str:
    """Drop ANSI escapes, replace line breaks with spaces and commas with semicolons."""
    return ANSI_ESCAPE_RE.sub("", text).replace("\r", " ").replace("\n", " ").replace(",", ";")


def to_row(record: NormalizedRecord, error_max_length: int = ERROR_MAX_LENGTH) -> list[str | int | float]:
    """Project a record onto the six export columns."""
    return [
        flatten_text(record.suite),
        flatten_text(record.test),
        record.status.value,
        record.duration_ms,
        flatten_text(record.error)[:error_max_length],
        flatten_text(record.attachments),
    ]


def render_csv(records: Iterable[NormalizedRecord], error_max_length: int = ERROR_MAX_LENGTH) -> str:
    """Render records as CSV text with a header row."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(HEADER)
    for record in records:
        writer.writerow(to_row(record, error_max_length))
    return buffer.getvalue()


def write_csv(
    records: Iterable[NormalizedRecord],
    path: Path,
    error_max_length: int = ERROR_MAX_LENGTH,
) -> Path:
    """Write the CSV export, creating the parent directory if needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_csv(records, error_max_length), encoding="utf-8")
    return path


def _sheet_value(value: str | int | float) -> str | int | float:
    # openpyxl rejects control characters in cell text
    if isinstance(value, str):
        return ILLEGAL_CHARACTERS_RE.sub("", value)
    return value


def write_workbook(
    records: Iterable[NormalizedRecord],
    path: Path,
    error_max_length: int = ERROR_MAX_LENGTH,
) -> Path:
    """Write the XLSX export with a single ``Results`` sheet."""
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = SHEET_TITLE
    sheet.append(list(HEADER))
    for record in records:
        sheet.append([_sheet_value(v) for v in to_row(record, error_max_length)])

    path.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(path)
    return path
