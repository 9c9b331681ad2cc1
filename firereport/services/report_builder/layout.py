"""
Layout resolver for the report sheet.

Classifies rows purely from their position and shape: the first row is the
title, single-cell rows are banners, the last N rows are ignition point data
and the row right above them is the table header.
"""

from typing import List, Sequence

import structlog

from firereport.exceptions import LayoutDriftError
from firereport.services.report_builder.rows import CellValue, ReportRow, RowKind

logger = structlog.get_logger(__name__)


def has_content(value: CellValue) -> bool:
    """True for any cell value other than None or an empty string."""
    return value is not None and value != ""


def is_empty_row(values: Sequence[CellValue]) -> bool:
    return not any(has_content(value) for value in values)


def classify_row(
    rows: Sequence[Sequence[CellValue]],
    index: int,
    data_count: int,
) -> RowKind:
    """
    Classify one row of the sheet.

    Args:
        rows: Cell values of every row, in sheet order.
        index: Zero-based index of the row to classify.
        data_count: Number of trailing data rows (ignition points).
    """
    values = rows[index]

    if index == 0:
        return RowKind.TITLE

    if is_empty_row(values):
        return RowKind.BLANK

    if data_count > 0:
        boundary = len(rows) - data_count
        if index >= boundary:
            return RowKind.DATA
        if index == boundary - 1:
            return RowKind.TABLE_HEADER

    if len(values) == 1:
        return RowKind.BANNER

    return RowKind.KEY_VALUE


def classify_rows(rows: Sequence[Sequence[CellValue]], data_count: int) -> List[RowKind]:
    """Classify every row of the sheet."""
    return [classify_row(rows, index, data_count) for index in range(len(rows))]


def resolve_layout(report_rows: Sequence[ReportRow], data_count: int) -> List[RowKind]:
    """
    Classify built rows by position and check them against their build kinds.

    Raises:
        LayoutDriftError: If a positional class differs from the kind the row
            was built as.
    """
    resolved = classify_rows([row.values for row in report_rows], data_count)

    for index, (row, kind) in enumerate(zip(report_rows, resolved)):
        if row.kind is not kind:
            logger.error(
                "Row classification drift",
                row_index=index,
                expected=row.kind.value,
                resolved=kind.value,
            )
            raise LayoutDriftError(index, row.kind.value, kind.value)

    return resolved
