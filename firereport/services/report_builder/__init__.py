"""
Report builder module for fire simulation results.

Turns a simulation result into a styled single-sheet Excel report:
rows are built, classified by position, styled cell by cell and assembled
into a workbook that is exported under a location/date file name.
"""

from firereport.services.report_builder.assembler import WorkbookAssembler, build_layout
from firereport.services.report_builder.exporter import (
    build_export_filename,
    build_simulation_workbook,
    export_simulation,
    render_workbook_bytes,
)
from firereport.services.report_builder.labels import CATALOGS, ENGLISH, SPANISH
from firereport.services.report_builder.layout import classify_rows
from firereport.services.report_builder.rows import (
    RowKind,
    build_report_rows,
    risk_interpretation,
)
from firereport.services.report_builder.styles import STYLE_RULES, resolve_cell_style

__all__ = [
    "WorkbookAssembler",
    "build_layout",
    "build_export_filename",
    "build_simulation_workbook",
    "export_simulation",
    "render_workbook_bytes",
    "CATALOGS",
    "ENGLISH",
    "SPANISH",
    "classify_rows",
    "RowKind",
    "build_report_rows",
    "risk_interpretation",
    "STYLE_RULES",
    "resolve_cell_style",
]
