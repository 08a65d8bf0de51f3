"""Open-Meteo payloads (snake_case on the wire, unlike the CMS)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class _OpenMeteoModel(BaseModel):
    model_config = ConfigDict(extra="allow", strict=True)


class GeocodingPlace(_OpenMeteoModel):
    latitude: float
    longitude: float
    name: str
    country: str | None = None
    timezone: str | None = None


class GeocodingResponse(_OpenMeteoModel):
    """``results`` is absent when nothing matched."""

    results: list[GeocodingPlace] | None = None


class CurrentConditions(_OpenMeteoModel):
    time: str | None = None
    temperature_2m: float
    apparent_temperature: float
    relative_humidity_2m: float
    wind_speed_10m: float
    wind_gusts_10m: float
    weather_code: int


class CurrentForecast(_OpenMeteoModel):
    latitude: float
    longitude: float
    timezone: str | None = None
    current: CurrentConditions


class DailySeries(_OpenMeteoModel):
    time: list[str]
    weather_code: list[int]
    temperature_2m_max: list[float]
    temperature_2m_min: list[float]
    precipitation_probability_max: list[float | None] | None = None


class WeeklyForecast(_OpenMeteoModel):
    latitude: float
    longitude: float
    timezone: str | None = None
    daily: DailySeries
