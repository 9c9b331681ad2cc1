"""
Row builder for the fire simulation report.

Turns a SimulationRecord into the ordered list of logical rows that make up
the report sheet: title, section banners, key/value pairs, the ignition
point table header and one data row per ignition point.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import List, Tuple, Union

import structlog

from firereport.schemas.simulation import (
    EnvironmentalParameters,
    Number,
    SimulationRecord,
)
from firereport.services.report_builder.labels import SPANISH, Catalog

logger = structlog.get_logger(__name__)

CellValue = Union[str, int, float]

# Risk bands, highest first; lower bounds are inclusive
RISK_VERY_HIGH = 75
RISK_HIGH = 50
RISK_MODERATE = 25

# Key factor thresholds; comparisons are strict
HIGH_TEMPERATURE_C = 30
LOW_HUMIDITY_PCT = 40
STRONG_WIND_KMH = 25

COORDINATE_DECIMALS = 4


class RowKind(Enum):
    """Kinds of rows in the report sheet."""

    TITLE = "title"  # Document title, always the first row
    BANNER = "banner"  # Single-cell section header
    KEY_VALUE = "keyvalue"  # Label followed by one or more values
    TABLE_HEADER = "table_header"  # Column header right above the data block
    DATA = "data"  # One ignition point
    BLANK = "blank"  # Empty separator


@dataclass(frozen=True)
class ReportRow:
    """A logical report row with the kind it was built as."""

    kind: RowKind
    values: Tuple[CellValue, ...] = ()


@dataclass(frozen=True)
class ThresholdFlags:
    """Boolean key factors derived from the environmental parameters."""

    high_temperature: bool
    low_humidity: bool
    strong_wind: bool


def risk_interpretation(risk: Number, catalog: Catalog = SPANISH) -> str:
    """Describe a fire risk percentage with its band text."""
    if risk >= RISK_VERY_HIGH:
        return catalog.risk_very_high
    if risk >= RISK_HIGH:
        return catalog.risk_high
    if risk >= RISK_MODERATE:
        return catalog.risk_moderate
    return catalog.risk_low


def threshold_flags(parameters: EnvironmentalParameters) -> ThresholdFlags:
    """Evaluate the temperature, humidity and wind thresholds."""
    return ThresholdFlags(
        high_temperature=parameters.temperature > HIGH_TEMPERATURE_C,
        low_humidity=parameters.humidity < LOW_HUMIDITY_PCT,
        strong_wind=parameters.wind_speed > STRONG_WIND_KMH,
    )


def format_coordinate(value: Number) -> str:
    return f"{value:.{COORDINATE_DECIMALS}f}"


def _blank() -> ReportRow:
    return ReportRow(RowKind.BLANK)


def _banner(text: str) -> ReportRow:
    return ReportRow(RowKind.BANNER, (text,))


def _pair(label: str, value: CellValue) -> ReportRow:
    return ReportRow(RowKind.KEY_VALUE, (label, value))


def build_report_rows(
    record: SimulationRecord,
    generated_at: datetime,
    catalog: Catalog = SPANISH,
) -> List[ReportRow]:
    """
    Build the ordered report rows for a simulation record.

    Args:
        record: Simulation result to report on.
        generated_at: Timestamp written into the "generation date" row.
        catalog: Texts to use for titles, labels and placeholders.

    Returns:
        Rows in sheet order; the last ``record.ignition_count`` rows are the
        ignition point data rows.
    """
    params = record.parameters
    flags = threshold_flags(params)

    def text(value):
        return value or catalog.placeholder

    rows: List[ReportRow] = [
        ReportRow(RowKind.TITLE, (catalog.title,)),
        _blank(),
        _banner(catalog.section_general),
        _pair(catalog.generation_date, catalog.format_date(generated_at)),
        _pair(catalog.location, text(record.location)),
        _pair(catalog.responsible, text(record.volunteer_name)),
        _pair(catalog.duration, record.duration),
        _pair(catalog.fire_risk, record.fire_risk),
        _pair(catalog.volunteers, record.volunteers),
        _blank(),
        _banner(catalog.section_environment),
        _pair(catalog.temperature, params.temperature),
        _pair(catalog.humidity, params.humidity),
        _pair(catalog.wind_speed, params.wind_speed),
        _pair(catalog.wind_direction, params.wind_direction),
        _pair(catalog.simulation_speed, text(params.simulation_speed)),
        _blank(),
        _banner(catalog.section_risk),
        _pair(catalog.fire_risk, record.fire_risk),
        _pair(catalog.interpretation, risk_interpretation(record.fire_risk, catalog)),
        _blank(),
        _banner(catalog.section_factors),
        _pair(catalog.initial_fires, record.ignition_count),
        _pair(catalog.volunteers, record.volunteers),
        _pair(catalog.high_temperature, catalog.yes_no(flags.high_temperature)),
        _pair(catalog.low_humidity, catalog.yes_no(flags.low_humidity)),
        _pair(catalog.strong_wind, catalog.yes_no(flags.strong_wind)),
        _blank(),
        _banner(catalog.section_ignition),
    ]

    # Without data rows underneath, the column header is an ordinary row
    header_kind = RowKind.TABLE_HEADER if record.initial_fires else RowKind.KEY_VALUE
    rows.append(ReportRow(header_kind, (
        catalog.column_index,
        catalog.column_latitude,
        catalog.column_longitude,
        catalog.column_intensity,
    )))

    for index, point in enumerate(record.initial_fires, start=1):
        rows.append(ReportRow(RowKind.DATA, (
            index,
            format_coordinate(point.latitude),
            format_coordinate(point.longitude),
            point.intensity,
        )))

    logger.debug(
        "Report rows built",
        rows=len(rows),
        ignition_points=record.ignition_count,
    )

    return rows
