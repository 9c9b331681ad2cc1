"""
Pydantic schemas for simulation results fed into the report engine.

Field aliases follow the camelCase payload produced by the simulation UI.
Every field is lenient: absent or malformed values are coerced to defaults
instead of failing validation.
"""
import math
import numbers
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, List, Mapping, Optional, Union

from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from pydantic import BaseModel, ConfigDict, Field, field_validator

from firereport.exceptions import InvalidSimulationDataError

Number = Union[int, float]


def _finite_number(value: Any) -> Number:
    """Keep integers as int and other reals as float; 0 outside float range."""
    try:
        as_float = float(value)
    except (OverflowError, ValueError):
        return 0
    if not math.isfinite(as_float):
        return 0
    if isinstance(value, numbers.Integral):
        return int(value)
    return as_float


def coerce_number(value: Any) -> Number:
    """Coerce a loosely typed value to a finite number, falling back to 0."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (numbers.Real, Decimal)):
        return _finite_number(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            return _finite_number(int(text))
        except ValueError:
            pass
        try:
            return _finite_number(float(text))
        except ValueError:
            return 0
    return 0


def coerce_text(value: Any) -> Optional[str]:
    """
    Return stripped text, or None when the value is absent or blank.

    Falsy scalars such as 0 count as absent, and control characters that
    cannot be stored in a worksheet are removed.
    """
    if value is None:
        return None
    if isinstance(value, (bool, numbers.Number)) and not value:
        return None
    text = ILLEGAL_CHARACTERS_RE.sub("", str(value)).strip()
    return text or None


def coerce_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse a timestamp from a datetime, an ISO-8601 string or epoch milliseconds.

    Returns None for anything that cannot be parsed.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, (numbers.Real, Decimal)):
        try:
            millis = float(value)
        except (OverflowError, ValueError):
            return None
        if not math.isfinite(millis):
            return None
        try:
            return datetime.fromtimestamp(millis / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            return None
    return None


class IgnitionPoint(BaseModel):
    """A single fire origin placed on the map."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    latitude: Number = Field(0, alias="lat", description="Latitude in decimal degrees")
    longitude: Number = Field(0, alias="lng", description="Longitude in decimal degrees")
    intensity: Number = Field(0, description="Relative fire intensity")

    @field_validator("latitude", "longitude", "intensity", mode="before")
    @classmethod
    def _coerce_numbers(cls, value: Any) -> Number:
        return coerce_number(value)


class EnvironmentalParameters(BaseModel):
    """Weather and runtime parameters the simulation was run with."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    temperature: Number = Field(0, description="Air temperature in °C")
    humidity: Number = Field(0, description="Relative humidity in %")
    wind_speed: Number = Field(0, alias="windSpeed", description="Wind speed in km/h")
    wind_direction: Number = Field(0, alias="windDirection", description="Wind direction in degrees")
    simulation_speed: Optional[str] = Field(
        None, alias="simulationSpeed", description="Simulation speed label"
    )

    @field_validator("temperature", "humidity", "wind_speed", "wind_direction", mode="before")
    @classmethod
    def _coerce_numbers(cls, value: Any) -> Number:
        return coerce_number(value)

    @field_validator("simulation_speed", mode="before")
    @classmethod
    def _coerce_label(cls, value: Any) -> Optional[str]:
        return coerce_text(value)


class SimulationRecord(BaseModel):
    """Complete result of one fire simulation run."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    location: Optional[str] = Field(None, description="Simulated location name")
    volunteer_name: Optional[str] = Field(
        None, alias="volunteerName", description="Volunteer responsible for the run"
    )
    duration: Number = Field(0, description="Simulated duration in hours")
    fire_risk: Number = Field(0, alias="fireRisk", description="Computed fire risk (0-100 %)")
    volunteers: int = Field(0, description="Volunteers required")
    parameters: EnvironmentalParameters = Field(default_factory=EnvironmentalParameters)
    initial_fires: List[IgnitionPoint] = Field(default_factory=list, alias="initialFires")
    timestamp: Optional[datetime] = Field(None, description="When the simulation was run")

    @field_validator("location", "volunteer_name", mode="before")
    @classmethod
    def _coerce_texts(cls, value: Any) -> Optional[str]:
        return coerce_text(value)

    @field_validator("duration", "fire_risk", mode="before")
    @classmethod
    def _coerce_numbers(cls, value: Any) -> Number:
        return coerce_number(value)

    @field_validator("volunteers", mode="before")
    @classmethod
    def _coerce_count(cls, value: Any) -> int:
        return int(coerce_number(value))

    @field_validator("parameters", mode="before")
    @classmethod
    def _coerce_parameters(cls, value: Any) -> Any:
        if isinstance(value, EnvironmentalParameters):
            return value
        if isinstance(value, Mapping):
            return dict(value)
        return {}

    @field_validator("initial_fires", mode="before")
    @classmethod
    def _coerce_fires(cls, value: Any) -> list:
        if not isinstance(value, (list, tuple)):
            return []
        fires = []
        for point in value:
            if isinstance(point, IgnitionPoint):
                fires.append(point)
            elif isinstance(point, Mapping):
                fires.append(dict(point))
            else:
                fires.append({})
        return fires

    @field_validator("timestamp", mode="before")
    @classmethod
    def _coerce_timestamp(cls, value: Any) -> Optional[datetime]:
        return coerce_timestamp(value)

    @property
    def ignition_count(self) -> int:
        """Number of ignition points, i.e. trailing data rows in the report."""
        return len(self.initial_fires)

    @classmethod
    def from_payload(cls, data: Any) -> "SimulationRecord":
        """
        Build a record from a raw payload.

        Raises:
            InvalidSimulationDataError: If ``data`` is not a mapping or record.
        """
        if isinstance(data, SimulationRecord):
            return data
        if not isinstance(data, Mapping):
            raise InvalidSimulationDataError(type(data).__name__)
        return cls.model_validate(dict(data))
