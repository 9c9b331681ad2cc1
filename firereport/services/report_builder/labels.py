"""
Report text catalogs.

The Spanish catalog reproduces the report as it has always been archived;
the English catalog is a straight translation with the same layout.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict


@dataclass(frozen=True)
class Catalog:
    """All user-visible texts of a report, for one language."""

    language: str
    title: str
    sheet_name: str
    placeholder: str
    yes: str
    no: str
    date_format: str

    # General information
    section_general: str
    generation_date: str
    location: str
    responsible: str
    duration: str
    fire_risk: str
    volunteers: str

    # Environmental parameters
    section_environment: str
    temperature: str
    humidity: str
    wind_speed: str
    wind_direction: str
    simulation_speed: str

    # Risk assessment
    section_risk: str
    interpretation: str
    risk_very_high: str
    risk_high: str
    risk_moderate: str
    risk_low: str

    # Key factors
    section_factors: str
    initial_fires: str
    high_temperature: str
    low_humidity: str
    strong_wind: str

    # Ignition points table
    section_ignition: str
    column_index: str
    column_latitude: str
    column_longitude: str
    column_intensity: str

    def format_date(self, moment: datetime) -> str:
        """Render a generation timestamp in the catalog's locale style."""
        return self.date_format.format(d=moment)

    def yes_no(self, flag: bool) -> str:
        return self.yes if flag else self.no


SPANISH = Catalog(
    language="es",
    title="INFORME DE SIMULACIÓN DE INCENDIOS",
    sheet_name="Simulación de Incendios",
    placeholder="No especificado",
    yes="Sí",
    no="No",
    date_format="{d.day}/{d.month}/{d.year}, {d:%H:%M:%S}",
    section_general="Información General",
    generation_date="Fecha de generación",
    location="Ubicación",
    responsible="Responsable",
    duration="Duración de la simulación (horas)",
    fire_risk="Riesgo de incendio calculado (%)",
    volunteers="Voluntarios necesarios",
    section_environment="Parámetros Ambientales",
    temperature="Temperatura (°C)",
    humidity="Humedad relativa (%)",
    wind_speed="Velocidad del viento (km/h)",
    wind_direction="Dirección del viento (°)",
    simulation_speed="Velocidad de simulación",
    section_risk="Evaluación de Riesgo",
    interpretation="Interpretación",
    risk_very_high="Riesgo MUY ALTO - Acción inmediata requerida",
    risk_high="Riesgo ALTO - Precaución extrema",
    risk_moderate="Riesgo MODERADO - Monitoreo constante",
    risk_low="Riesgo BAJO - Vigilancia normal",
    section_factors="Factores Clave",
    initial_fires="# Focos iniciales",
    high_temperature="Temperatura elevada (>30°C)",
    low_humidity="Humedad baja (<40%)",
    strong_wind="Vientos fuertes (>25 km/h)",
    section_ignition="Ubicación de los Focos de Incendio",
    column_index="#",
    column_latitude="Latitud",
    column_longitude="Longitud",
    column_intensity="Intensidad",
)

ENGLISH = Catalog(
    language="en",
    title="FIRE SIMULATION REPORT",
    sheet_name="Fire Simulation",
    placeholder="Not specified",
    yes="Yes",
    no="No",
    date_format="{d.month}/{d.day}/{d.year}, {d:%H:%M:%S}",
    section_general="General Information",
    generation_date="Generated on",
    location="Location",
    responsible="Responsible",
    duration="Simulation duration (hours)",
    fire_risk="Computed fire risk (%)",
    volunteers="Volunteers needed",
    section_environment="Environmental Parameters",
    temperature="Temperature (°C)",
    humidity="Relative humidity (%)",
    wind_speed="Wind speed (km/h)",
    wind_direction="Wind direction (°)",
    simulation_speed="Simulation speed",
    section_risk="Risk Assessment",
    interpretation="Interpretation",
    risk_very_high="VERY HIGH risk – immediate action required",
    risk_high="HIGH risk – extreme caution",
    risk_moderate="MODERATE risk – constant monitoring",
    risk_low="LOW risk – normal vigilance",
    section_factors="Key Factors",
    initial_fires="# Initial fires",
    high_temperature="High temperature (>30°C)",
    low_humidity="Low humidity (<40%)",
    strong_wind="Strong winds (>25 km/h)",
    section_ignition="Ignition Points",
    column_index="#",
    column_latitude="Latitude",
    column_longitude="Longitude",
    column_intensity="Intensity",
)

CATALOGS: Dict[str, Catalog] = {catalog.language: catalog for catalog in (SPANISH, ENGLISH)}


def get_catalog(language: str) -> Catalog:
    """Look up a catalog by language code, falling back to Spanish."""
    return CATALOGS.get(language, SPANISH)
