from __future__ import annotations

from io import BytesIO
from typing import Iterable

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from ..core.enums import PeriodLevel

EXPORT_FIELDS = ["employee", "level", "period", "hours", "minutes"]

_SHEET_TITLES = {
    PeriodLevel.DAILY: "Tage",
    PeriodLevel.WEEKLY: "Wochen",
    PeriodLevel.MONTHLY: "Monate",
}

HEADER_FILL = PatternFill(fill_type="solid", fgColor="0B4F73")
HEADER_FONT = Font(bold=True, color="FFFFFF")
THIN_SIDE = Side(style="thin", color="D5E2EC")
THIN_BORDER = Border(left=THIN_SIDE, right=THIN_SIDE, top=THIN_SIDE, bottom=THIN_SIDE)


def _style_header(ws: Worksheet, row: int = 1) -> None:
    for cell in ws[row]:
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.alignment = Alignment(horizontal="center", vertical="center")
        cell.border = THIN_BORDER


def _auto_width(ws: Worksheet) -> None:
    for column_cells in ws.iter_cols(min_row=1, max_row=ws.max_row, min_col=1, max_col=ws.max_column):
        col_letter = get_column_letter(column_cells[0].column)
        max_len = max(len("" if c.value is None else str(c.value)) for c in column_cells)
        ws.column_dimensions[col_letter].width = min(max_len + 2, 45)


def build_export_xlsx_bytes(rows: Iterable[dict], level: PeriodLevel) -> bytes:
    """One sheet with a styled header row; hours are written as numbers."""
    level = PeriodLevel(level)
    wb = Workbook()
    ws = wb.active
    ws.title = _SHEET_TITLES[level]

    ws.append(EXPORT_FIELDS)
    _style_header(ws)
    for row in rows:
        ws.append(
            [
                row["employee"],
                row["level"],
                row["period"],
                float(row["hours"]),
                int(row["minutes"]),
            ]
        )

    for cell in ws["D"][1:]:
        cell.number_format = "0.00"
    ws.freeze_panes = "A2"
    if ws.max_row > 1:
        ws.auto_filter.ref = f"A1:{get_column_letter(ws.max_column)}{ws.max_row}"
    _auto_width(ws)

    stream = BytesIO()
    wb.save(stream)
    return stream.getvalue()
