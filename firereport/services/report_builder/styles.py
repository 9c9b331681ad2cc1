"""
Cell styling for the fire simulation report.

Styles are resolved per cell from the row kind and column index through an
ordered rule list: the first rule whose predicate matches builds the style.
Every rule starts from the base style, so the thin grey border and word wrap
are always present; fonts and fills are replaced by the matching rule.
"""

from dataclasses import dataclass, replace
from typing import Callable, List, Optional

from openpyxl.cell.cell import Cell
from openpyxl.styles import (
    Alignment,
    Border,
    Font,
    PatternFill,
    Side,
)

from firereport.services.report_builder.rows import RowKind

FONT_NAME = "Arial"


@dataclass(frozen=True)
class ReportPalette:
    """Color palette for the report (hex without #)."""

    name: str
    title_bg: str = "8B0000"  # Dark red
    banner_bg: str = "CD5C5C"  # Indian red
    table_header_bg: str = "F08080"  # Light coral
    label_bg: str = "FFE4E1"  # Misty rose
    data_bg: str = "FFF0F5"  # Lavender blush
    value_bg: str = "FFFFFF"
    data_text: str = "8B0000"
    text_on_dark: str = "FFFFFF"
    text_dark: str = "000000"
    border_color: str = "D3D3D3"  # Light grey


PALETTE = ReportPalette(name="Ember")


@dataclass(frozen=True)
class CellStyle:
    """Fully resolved visual attributes of one cell."""

    font: Font
    border: Border
    alignment: Alignment
    fill: Optional[PatternFill] = None

    def apply(self, cell: Cell) -> None:
        cell.font = self.font
        cell.border = self.border
        cell.alignment = self.alignment
        if self.fill is not None:
            cell.fill = self.fill


def _solid(color: str) -> PatternFill:
    return PatternFill("solid", fgColor=color)


def base_style(column: int, palette: ReportPalette = PALETTE) -> CellStyle:
    """Style shared by every cell: thin border, wrapped text, 10pt font."""
    side = Side(style="thin", color=palette.border_color)
    return CellStyle(
        font=Font(name=FONT_NAME, size=10, color=palette.text_dark),
        border=Border(left=side, right=side, top=side, bottom=side),
        alignment=Alignment(
            horizontal="left" if column == 0 else "center",
            vertical="center",
            wrap_text=True,
        ),
    )


@dataclass(frozen=True)
class StyleRule:
    """A predicate on (row kind, column) and the style it produces."""

    name: str
    applies: Callable[[RowKind, int], bool]
    build: Callable[[CellStyle, RowKind, ReportPalette], CellStyle]


def _title(base: CellStyle, kind: RowKind, palette: ReportPalette) -> CellStyle:
    return replace(
        base,
        fill=_solid(palette.title_bg),
        font=Font(name=FONT_NAME, size=16, bold=True, color=palette.text_on_dark),
        alignment=Alignment(horizontal="center", vertical="center", wrap_text=True),
    )


def _banner(base: CellStyle, kind: RowKind, palette: ReportPalette) -> CellStyle:
    return replace(
        base,
        fill=_solid(palette.banner_bg),
        font=Font(name=FONT_NAME, size=12, bold=True, color=palette.text_on_dark),
        alignment=Alignment(horizontal="left", vertical="center", wrap_text=True),
    )


def _table_header(base: CellStyle, kind: RowKind, palette: ReportPalette) -> CellStyle:
    return replace(
        base,
        fill=_solid(palette.table_header_bg),
        font=Font(name=FONT_NAME, size=10, bold=True, color=palette.text_on_dark),
    )


def _label(base: CellStyle, kind: RowKind, palette: ReportPalette) -> CellStyle:
    return replace(
        base,
        fill=_solid(palette.label_bg),
        font=Font(name=FONT_NAME, size=10, bold=True, color=palette.text_dark),
    )


def _value(base: CellStyle, kind: RowKind, palette: ReportPalette) -> CellStyle:
    is_data = kind is RowKind.DATA
    return replace(
        base,
        fill=_solid(palette.data_bg if is_data else palette.value_bg),
        font=Font(
            name=FONT_NAME,
            size=10,
            color=palette.data_text if is_data else palette.text_dark,
        ),
    )


# Order is precedence: the first matching rule wins
STYLE_RULES: List[StyleRule] = [
    StyleRule("title", lambda kind, col: kind is RowKind.TITLE, _title),
    StyleRule("banner", lambda kind, col: kind is RowKind.BANNER, _banner),
    StyleRule("table_header", lambda kind, col: kind is RowKind.TABLE_HEADER, _table_header),
    StyleRule("label", lambda kind, col: kind is RowKind.KEY_VALUE and col == 0, _label),
    StyleRule(
        "value",
        lambda kind, col: kind is RowKind.DATA or (kind is RowKind.KEY_VALUE and col > 0),
        _value,
    ),
]


def resolve_cell_style(
    kind: RowKind,
    column: int,
    palette: ReportPalette = PALETTE,
) -> CellStyle:
    """
    Resolve the style of one cell.

    Args:
        kind: Classification of the cell's row.
        column: Zero-based column index.
        palette: Colors to style with.

    Returns:
        The style built by the first matching rule, or the base style.
    """
    base = base_style(column, palette)
    for rule in STYLE_RULES:
        if rule.applies(kind, column):
            return rule.build(base, kind, palette)
    return base
