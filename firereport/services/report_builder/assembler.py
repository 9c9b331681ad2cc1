"""
Workbook assembler for the fire simulation report.

Writes the styled rows into a single-sheet workbook and applies the fixed
column widths, per-row heights and the title/banner merges.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional, Sequence, Tuple

import structlog
from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from firereport.services.report_builder.labels import SPANISH, Catalog
from firereport.services.report_builder.layout import resolve_layout
from firereport.services.report_builder.rows import CellValue, ReportRow, RowKind
from firereport.services.report_builder.styles import (
    PALETTE,
    ReportPalette,
    resolve_cell_style,
)

logger = structlog.get_logger(__name__)


COLUMN_WIDTHS: Tuple[int, ...] = (30, 30, 30, 20)
COLUMN_COUNT = len(COLUMN_WIDTHS)

# Row heights in points
TITLE_ROW_HEIGHT = 35
BANNER_ROW_HEIGHT = 28
DEFAULT_ROW_HEIGHT = 22


@dataclass(frozen=True)
class MergeSpan:
    """A rectangular merge, zero-based and inclusive on both ends."""

    start_row: int
    end_row: int
    start_column: int
    end_column: int

    def to_range(self) -> str:
        """Excel range reference, e.g. ``A1:D1``."""
        return (
            f"{get_column_letter(self.start_column + 1)}{self.start_row + 1}:"
            f"{get_column_letter(self.end_column + 1)}{self.end_row + 1}"
        )


@dataclass
class WorkbookLayout:
    """Sheet geometry derived from the report rows."""

    rows: List[Tuple[CellValue, ...]]
    merges: List[MergeSpan] = field(default_factory=list)
    row_heights: List[int] = field(default_factory=list)
    column_widths: Tuple[int, ...] = COLUMN_WIDTHS


def is_banner_row(values: Sequence[CellValue], index: int) -> bool:
    """A single non-empty cell anywhere below the title."""
    return index > 0 and len(values) == 1 and values[0] not in (None, "")


def _full_width(index: int) -> MergeSpan:
    return MergeSpan(index, index, 0, COLUMN_COUNT - 1)


def build_layout(rows: Sequence[Sequence[CellValue]]) -> WorkbookLayout:
    """
    Derive merges and row heights from the row values.

    The title row and every banner row span all report columns; banner rows
    are detected from their shape alone.
    """
    merges: List[MergeSpan] = []
    heights: List[int] = []

    for index, values in enumerate(rows):
        if index == 0:
            if len(values) > 0:
                merges.append(_full_width(index))
            heights.append(TITLE_ROW_HEIGHT)
        elif is_banner_row(values, index):
            merges.append(_full_width(index))
            heights.append(BANNER_ROW_HEIGHT)
        else:
            heights.append(DEFAULT_ROW_HEIGHT)

    return WorkbookLayout(
        rows=[tuple(values) for values in rows],
        merges=merges,
        row_heights=heights,
    )


class WorkbookAssembler:
    """
    Builds the report workbook from report rows.

    Row kinds are re-derived from position and checked against the kinds the
    rows were built as before anything is written.
    """

    def __init__(
        self,
        catalog: Catalog = SPANISH,
        palette: ReportPalette = PALETTE,
    ):
        self.catalog = catalog
        self.palette = palette

    def assemble(
        self,
        report_rows: Sequence[ReportRow],
        data_count: int,
        generated_at: Optional[datetime] = None,
    ) -> Workbook:
        """
        Assemble the single-sheet report workbook.

        Args:
            report_rows: Rows produced by the row builder.
            data_count: Number of trailing ignition point rows.
            generated_at: Stamped into the document properties when given.

        Returns:
            OpenPyXL Workbook object.
        """
        kinds = resolve_layout(report_rows, data_count)
        layout = build_layout([row.values for row in report_rows])

        logger.info(
            "Building report workbook",
            rows=len(layout.rows),
            ignition_points=data_count,
            merges=len(layout.merges),
        )

        workbook = Workbook()
        worksheet = workbook.active
        worksheet.title = self.catalog.sheet_name

        self._write_cells(worksheet, layout.rows, kinds)
        self._apply_dimensions(worksheet, layout)

        for span in layout.merges:
            worksheet.merge_cells(span.to_range())

        self._set_properties(workbook, generated_at)

        return workbook

    def _write_cells(
        self,
        worksheet: Worksheet,
        rows: Sequence[Tuple[CellValue, ...]],
        kinds: Sequence[RowKind],
    ) -> None:
        """Write values and styles; only cells holding a value are styled."""
        for row_num, (values, kind) in enumerate(zip(rows, kinds), start=1):
            for col_index, value in enumerate(values):
                cell = worksheet.cell(row=row_num, column=col_index + 1, value=value)
                resolve_cell_style(kind, col_index, self.palette).apply(cell)

    def _apply_dimensions(self, worksheet: Worksheet, layout: WorkbookLayout) -> None:
        for col_index, width in enumerate(layout.column_widths, start=1):
            worksheet.column_dimensions[get_column_letter(col_index)].width = width

        for row_num, height in enumerate(layout.row_heights, start=1):
            worksheet.row_dimensions[row_num].height = height

    def _set_properties(self, workbook: Workbook, generated_at: Optional[datetime]) -> None:
        workbook.properties.title = self.catalog.title
        workbook.properties.creator = "firereport"
        if generated_at is not None:
            if generated_at.tzinfo is not None:
                generated_at = generated_at.astimezone(timezone.utc).replace(tzinfo=None)
            workbook.properties.created = generated_at


def get_workbook_assembler(
    catalog: Catalog = SPANISH,
    palette: ReportPalette = PALETTE,
) -> WorkbookAssembler:
    """Create a new WorkbookAssembler instance."""
    return WorkbookAssembler(catalog, palette)
