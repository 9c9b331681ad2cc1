"""
Exporter for fire simulation reports.

Runs the whole pipeline for one simulation payload and delivers the result
as an ``.xlsx`` file named after the simulated location and date.
"""

import contextlib
import os
import re
import tempfile
from datetime import datetime, timezone
from io import BytesIO
from pathlib import Path
from typing import Any, Optional, Union

import structlog
from openpyxl import Workbook

from firereport.config import get_settings
from firereport.exceptions import InvalidSimulationDataError, WorkbookExportError
from firereport.logging_config import log_performance
from firereport.schemas.simulation import SimulationRecord
from firereport.services.report_builder.assembler import get_workbook_assembler
from firereport.services.report_builder.labels import Catalog, get_catalog
from firereport.services.report_builder.rows import build_report_rows

logger = structlog.get_logger(__name__)

FILENAME_PREFIX = "Simulacion_Incendios"
LOCATION_PLACEHOLDER = "Sin_Ubicacion"

# Whitespace runs and path separators both become a single underscore
_FILENAME_UNSAFE = re.compile(r"[\s/\\]+")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _utc_date(moment: datetime) -> str:
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.date().isoformat()


def build_export_filename(record: SimulationRecord, now: Optional[datetime] = None) -> str:
    """
    Build the download file name for a record.

    ``Simulacion_Incendios_<location>_<YYYY-MM-DD>.xlsx``, using the record's
    timestamp, or ``now`` when the record has none.
    """
    location = _FILENAME_UNSAFE.sub("_", record.location or LOCATION_PLACEHOLDER)
    moment = record.timestamp or now or _utc_now()
    return f"{FILENAME_PREFIX}_{location}_{_utc_date(moment)}.xlsx"


def build_simulation_workbook(
    record: SimulationRecord,
    generated_at: Optional[datetime] = None,
    catalog: Optional[Catalog] = None,
) -> Workbook:
    """Build the styled report workbook for a record."""
    catalog = catalog or get_catalog(get_settings().report_language)
    generated_at = generated_at or _utc_now()

    logger.debug(
        "Building report workbook",
        language=catalog.language,
        ignition_points=record.ignition_count,
    )
    rows = build_report_rows(record, generated_at, catalog)
    assembler = get_workbook_assembler(catalog)
    return assembler.assemble(rows, record.ignition_count, generated_at)


def render_workbook_bytes(
    record: SimulationRecord,
    generated_at: Optional[datetime] = None,
    catalog: Optional[Catalog] = None,
) -> bytes:
    """Serialize the report workbook for callers that deliver it themselves."""
    workbook = build_simulation_workbook(record, generated_at, catalog)
    buffer = BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


def write_workbook(workbook: Workbook, path: Path) -> Path:
    """
    Save a workbook through a temporary file renamed into place.

    Raises:
        WorkbookExportError: If the directory or file cannot be written. No
            partial file is left behind.
    """
    tmp_path: Optional[str] = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            prefix=f".{path.stem}.", suffix=".part", dir=path.parent
        )
        with os.fdopen(fd, "wb") as handle:
            workbook.save(handle)
        os.replace(tmp_path, path)
    except Exception as e:
        if tmp_path is not None:
            with contextlib.suppress(FileNotFoundError):
                os.unlink(tmp_path)
        logger.error(
            "Workbook write failed",
            path=str(path),
            error=str(e),
            error_type=type(e).__name__,
        )
        raise WorkbookExportError(str(path), message=f"Failed to write workbook to {path}: {e}") from e

    logger.info("Workbook saved", path=str(path))
    return path


@log_performance("simulation_export")
def export_simulation(
    simulation_data: Any,
    output_dir: Optional[Union[str, Path]] = None,
    now: Optional[datetime] = None,
    catalog: Optional[Catalog] = None,
) -> Optional[Path]:
    """
    Export a simulation result as a styled Excel report.

    Args:
        simulation_data: Raw payload mapping or a SimulationRecord.
        output_dir: Target directory; defaults to ``report_output_dir``.
        now: Current time, used for the generation date and as the fallback
            file date.
        catalog: Report texts; defaults to the configured language.

    Returns:
        Path of the written file, or None when the input is not a record.

    Raises:
        WorkbookExportError: If the file cannot be written.
    """
    try:
        record = SimulationRecord.from_payload(simulation_data)
    except InvalidSimulationDataError as e:
        logger.error("Invalid simulation data, export aborted", **e.to_dict())
        return None

    now = now or _utc_now()
    target_dir = Path(output_dir) if output_dir is not None else get_settings().report_output_dir

    workbook = build_simulation_workbook(record, generated_at=now, catalog=catalog)
    path = target_dir / build_export_filename(record, now)

    write_workbook(workbook, path)

    logger.info(
        "Simulation report exported",
        path=str(path),
        location=record.location,
        ignition_points=record.ignition_count,
    )
    return path
