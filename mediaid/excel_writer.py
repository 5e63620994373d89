#!/usr/bin/env python3
"""
Excel report writer for parse results.

Thin wrappers around openpyxl: one table-styled sheet per ExcelSheetData
(bold headers, auto-width columns, optional row highlighting), plus helpers
that lay out ParsedMedia results as a "Results" and a "Summary" sheet.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, List, Optional, Sequence

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.table import Table, TableStyleInfo

from .models import MediaType, ParsedMedia

RowPredicate = Callable[[Sequence[Any]], bool]

RESULT_HEADERS = (
    "Filename", "Type", "Title", "Year", "Season", "Episode", "Episode End",
    "Episode Title", "Resolution", "Source", "Codec", "Audio", "Languages",
    "Release Group", "Container", "Confidence",
)

# Results at or below this confidence are highlighted in the report
LOW_CONFIDENCE = 40


@dataclass(frozen=True)
class ExcelSheetData:
    """
    Describes a sheet to be written to the workbook.

    Attributes:
        name: Sheet/tab name.
        headers: Ordered list of column headers.
        rows: Row values already ordered to match headers.
        highlight_row: Optional predicate; matching rows get a yellow fill.
    """

    name: str
    headers: Sequence[str]
    rows: Sequence[Sequence[Any]]
    highlight_row: Optional[RowPredicate] = None


def _write_excel_sheet(ws, sheet: ExcelSheetData) -> None:
    """Render a single sheet using provided headers/rows and optional highlighting."""
    ws.title = sheet.name

    headers = list(sheet.headers)
    bold_font = Font(bold=True)
    for col_idx, header in enumerate(headers, 1):
        ws.cell(row=1, column=col_idx, value=header).font = bold_font

    yellow_fill = PatternFill(start_color="FFFF00", end_color="FFFF00", fill_type="solid")

    for row_idx, row in enumerate(sheet.rows, 2):
        highlight = sheet.highlight_row is not None and sheet.highlight_row(row)
        for col_idx, value in enumerate(row, 1):
            cell = ws.cell(row=row_idx, column=col_idx, value=value)
            if highlight:
                cell.fill = yellow_fill

    for col_idx in range(1, len(headers) + 1):
        col_letter = get_column_letter(col_idx)
        max_length = len(headers[col_idx - 1])

        for cell in ws[col_letter]:
            if cell.value is not None:
                max_length = max(max_length, len(str(cell.value)))

        ws.column_dimensions[col_letter].width = min(max_length + 2, 60)

    if sheet.rows:
        last_col = get_column_letter(len(headers))
        data_range = f"A1:{last_col}{len(sheet.rows) + 1}"
        table_name = "".join(ch for ch in sheet.name if ch.isalnum()) + "Table"
        table = Table(displayName=table_name, ref=data_range)
        table.tableStyleInfo = TableStyleInfo(
            name="TableStyleMedium9",
            showFirstColumn=False,
            showLastColumn=False,
            showRowStripes=True,
            showColumnStripes=False,
        )
        ws.add_table(table)


def write_excel_workbook(output_path: Path | str, sheets: Sequence[ExcelSheetData]) -> Path:
    """
    Write a workbook consisting of the provided sheets.

    Args:
        output_path: Destination path for the workbook.
        sheets: Ordered sheet definitions to render.

    Returns:
        Path to the written workbook.
    """
    if not sheets:
        raise ValueError("At least one sheet must be provided to write a workbook.")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    wb = Workbook()
    wb.remove(wb.active)
    for sheet in sheets:
        _write_excel_sheet(wb.create_sheet(), sheet)

    wb.save(output_path)
    return output_path


def result_row(result: ParsedMedia) -> List[Any]:
    """Flatten one ParsedMedia into a row ordered like RESULT_HEADERS."""
    episode = result.episode_info
    quality = result.quality
    return [
        result.original,
        result.media_type.value,
        result.title,
        result.year,
        episode.season,
        episode.episode,
        episode.episode_end,
        episode.episode_title,
        quality.resolution,
        quality.source,
        quality.codec,
        quality.audio,
        ", ".join(result.languages) or None,
        result.release_group,
        result.container,
        result.confidence,
    ]


def build_report_sheets(results: Sequence[ParsedMedia]) -> List[ExcelSheetData]:
    """
    Lay out parse results as a detail sheet and a summary sheet.

    Args:
        results: Parse results, in input order

    Returns:
        [Results sheet, Summary sheet]
    """
    rows = [result_row(r) for r in results]
    confidence_col = RESULT_HEADERS.index("Confidence")

    counts = Counter(r.media_type for r in results)
    average = round(sum(r.confidence for r in results) / len(results), 1) if results else 0.0
    summary_rows: List[List[Any]] = [["Total", len(results)]]
    summary_rows.extend([media_type.value, counts.get(media_type, 0)] for media_type in MediaType)
    summary_rows.append(["Average confidence", average])
    summary_rows.append([f"Confidence <= {LOW_CONFIDENCE}", sum(1 for r in results if r.confidence <= LOW_CONFIDENCE)])

    return [
        ExcelSheetData(
            name="Results",
            headers=RESULT_HEADERS,
            rows=rows,
            highlight_row=lambda row: row[confidence_col] <= LOW_CONFIDENCE,
        ),
        ExcelSheetData(name="Summary", headers=("Metric", "Value"), rows=summary_rows),
    ]


def write_report(output_path: Path | str, results: Sequence[ParsedMedia]) -> Path:
    """Write the Results/Summary report for a list of parse results."""
    return write_excel_workbook(output_path, build_report_sheets(results))
