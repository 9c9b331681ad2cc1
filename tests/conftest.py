"""
Pytest configuration and fixtures.
"""
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Generator

import pytest

from firereport.config import get_settings
from firereport.schemas.simulation import SimulationRecord


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for exported files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def fixed_now() -> datetime:
    """A fixed clock so generated reports are reproducible."""
    return datetime(2024, 3, 5, 10, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_payload() -> Dict[str, Any]:
    """Simulation payload as sent by the simulation screen."""
    return {
        "location": "Santa Cruz Norte",
        "volunteerName": "Ana Pérez",
        "duration": 6,
        "fireRisk": 82.5,
        "volunteers": 14,
        "parameters": {
            "temperature": 32,
            "humidity": 35,
            "windSpeed": 30,
            "windDirection": 225,
            "simulationSpeed": "Rápida",
        },
        "initialFires": [
            {"lat": 40.41678, "lng": -3.70379, "intensity": 7},
            {"lat": 40.5, "lng": -3.6, "intensity": 3.5},
            {"lat": -17.783333, "lng": -63.18212, "intensity": 10},
        ],
        "timestamp": "2024-03-05T10:00:00Z",
    }


@pytest.fixture
def sample_record(sample_payload: Dict[str, Any]) -> SimulationRecord:
    """SimulationRecord built from the sample payload."""
    return SimulationRecord.from_payload(sample_payload)


@pytest.fixture(autouse=True)
def reset_settings():
    """Reset cached settings so environment overrides apply per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
