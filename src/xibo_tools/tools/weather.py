"""Weather tools backed by the public Open-Meteo APIs.

These do not touch the CMS: no CMS URL is required and no bearer token is
sent. Lookups by place name are two calls, geocoding then forecast; when
geocoding finds nothing the forecast is never requested.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, TypeAdapter

from ..core import Envelope, Failure, Success, ToolMetadata
from ..http import CmsParams, CmsTool, Endpoint, build_request, dispatch
from ..schemas import CurrentForecast, GeocodingResponse, WeeklyForecast

WEATHER_CONDITIONS: dict[int, str] = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Foggy",
    48: "Depositing rime fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    56: "Light freezing drizzle",
    57: "Dense freezing drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    66: "Light freezing rain",
    67: "Heavy freezing rain",
    71: "Slight snow fall",
    73: "Moderate snow fall",
    75: "Heavy snow fall",
    77: "Snow grains",
    80: "Slight rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    85: "Slight snow showers",
    86: "Heavy snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm with slight hail",
    99: "Thunderstorm with heavy hail",
}

CURRENT_FIELDS = "temperature_2m,apparent_temperature,relative_humidity_2m,wind_speed_10m,wind_gusts_10m,weather_code"
DAILY_FIELDS = "temperature_2m_max,temperature_2m_min,weather_code,precipitation_probability_max"
FORECAST_DAYS = 8

_OPEN_METEO = Endpoint("GET", "", authenticated=False)

_GEOCODING = TypeAdapter(GeocodingResponse)
_CURRENT = TypeAdapter(CurrentForecast)
_WEEKLY = TypeAdapter(WeeklyForecast)


def describe(code: int) -> str:
    return WEATHER_CONDITIONS.get(code, "Unknown")


def summarize_current(current: dict[str, Any]) -> dict[str, Any]:
    return {
        "temperature": current["temperature_2m"],
        "feelsLike": current["apparent_temperature"],
        "humidity": current["relative_humidity_2m"],
        "windSpeed": current["wind_speed_10m"],
        "windGust": current["wind_gusts_10m"],
        "conditions": describe(current["weather_code"]),
    }


def summarize_daily(daily: dict[str, Any]) -> list[dict[str, Any]]:
    probabilities = daily.get("precipitation_probability_max") or []
    return [
        {
            "date": date,
            "maxTemp": daily["temperature_2m_max"][i],
            "minTemp": daily["temperature_2m_min"][i],
            "conditions": describe(daily["weather_code"][i]),
            "precipitationProbability": probabilities[i] if i < len(probabilities) else None,
        }
        for i, date in enumerate(daily["time"])
    ]


class LocationParams(CmsParams):
    location: str = Field(..., min_length=1, description='City name, e.g. "Tokyo"')


class CoordinateParams(CmsParams):
    latitude: float = Field(..., ge=-90, le=90, description="Latitude in degrees")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude in degrees")


class _OpenMeteoTool(CmsTool[Any]):
    """Shared geocoding and forecast calls; subclasses compose them in ``_execute``."""

    endpoint = _OPEN_METEO

    async def _get(self, url: str, query: dict[str, Any], schema: TypeAdapter[Any]) -> Envelope:
        request = build_request(_OPEN_METEO, url, query)
        return await dispatch(
            self.context,
            request,
            schema=schema,
            operation=self.metadata.name,
            authenticated=self.endpoint.authenticated,
            log=self.log,
        )

    async def _geocode(self, location: str) -> dict[str, Any] | Failure:
        """First match for ``location``, or a not-found failure."""
        envelope = await self._get(
            self.context.settings.weather.geocoding_url,
            {"name": location, "count": 1},
            _GEOCODING,
        )
        if isinstance(envelope, Failure):
            return envelope
        results = envelope.data.get("results") or []
        if not results:
            self.log.warning("location not found", location=location)
            return Failure.not_found(f"Location '{location}' not found.", resource="location")
        return results[0]

    async def _forecast(self, latitude: float, longitude: float, schema: TypeAdapter[Any], **query: Any) -> Envelope:
        return await self._get(
            self.context.settings.weather.forecast_url,
            {"latitude": latitude, "longitude": longitude, **query},
            schema,
        )


class GetCurrentWeatherTool(_OpenMeteoTool):
    metadata = ToolMetadata(
        name="get_current_weather",
        description="Get the current weather for a location by name",
        category="weather",
    )
    params_schema = LocationParams

    async def _execute(self, params: LocationParams) -> Envelope:
        place = await self._geocode(params.location)
        if isinstance(place, Failure):
            return place
        envelope = await self._forecast(place["latitude"], place["longitude"], _CURRENT, current=CURRENT_FIELDS)
        if isinstance(envelope, Failure):
            return envelope
        return Success(data={**summarize_current(envelope.data["current"]), "location": place["name"]})


class GetWeatherByCoordinatesTool(_OpenMeteoTool):
    metadata = ToolMetadata(
        name="get_weather_by_coordinates",
        description="Get the current weather for a latitude/longitude pair",
        category="weather",
    )
    params_schema = CoordinateParams

    async def _execute(self, params: CoordinateParams) -> Envelope:
        envelope = await self._forecast(params.latitude, params.longitude, _CURRENT, current=CURRENT_FIELDS)
        if isinstance(envelope, Failure):
            return envelope
        coordinates = {"latitude": params.latitude, "longitude": params.longitude}
        return Success(data={**summarize_current(envelope.data["current"]), "coordinates": coordinates})


class GetWeeklyWeatherTool(_OpenMeteoTool):
    metadata = ToolMetadata(
        name="get_weekly_weather",
        description="Get an eight-day daily forecast for a location by name",
        category="weather",
    )
    params_schema = LocationParams

    async def _execute(self, params: LocationParams) -> Envelope:
        place = await self._geocode(params.location)
        if isinstance(place, Failure):
            return place
        envelope = await self._forecast(
            place["latitude"],
            place["longitude"],
            _WEEKLY,
            daily=DAILY_FIELDS,
            forecast_days=FORECAST_DAYS,
            timezone="auto",
        )
        if isinstance(envelope, Failure):
            return envelope
        forecasts = summarize_daily(envelope.data["daily"])
        if not forecasts:
            return Failure.not_found("No daily forecast available", resource="forecast")
        return Success(data={"forecasts": forecasts, "location": place["name"]})


TOOLS = (GetCurrentWeatherTool, GetWeatherByCoordinatesTool, GetWeeklyWeatherTool)
