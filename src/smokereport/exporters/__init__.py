"""Writers for normalized results and scenario outcomes."""

from smokereport.exporters.checklist import render_checklist, write_checklist
from smokereport.exporters.tabular import HEADER, render_csv, to_row, write_csv, write_workbook

__all__ = [
    "HEADER",
    "render_checklist",
    "render_csv",
    "to_row",
    "write_checklist",
    "write_csv",
    "write_workbook",
]
