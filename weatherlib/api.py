"""Client for the weatherapi.com HTTP API."""

from __future__ import annotations

import io
from typing import Any

import requests
from PIL import Image, UnidentifiedImageError

from weatherlib.models import Condition, Current, Forecast, Location, SearchLocation

_TIMEOUT = 30


class WeatherAPIError(Exception):
    """Raised when a request fails or its response cannot be understood."""


class WeatherAPI:
    """Blocking client for current weather, forecasts, location search and icons."""

    BASE_URL = "http://api.weatherapi.com/v1"

    def __init__(self, api_key: str, session: requests.Session | None = None) -> None:
        self._api_key = api_key
        self._session = session if session is not None else requests.Session()

    def _request(self, url: str, what: str, params: dict[str, Any] | None = None) -> requests.Response:
        try:
            response = self._session.get(url, params=params, timeout=_TIMEOUT)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise WeatherAPIError(f"Request for {what} failed: {exc}") from exc
        return response

    def _fetch_json(self, endpoint: str, what: str, **params: Any) -> Any:
        query = {"key": self._api_key, **params}
        response = self._request(f"{self.BASE_URL}/{endpoint}", what, query)
        try:
            return response.json()
        except ValueError as exc:
            raise WeatherAPIError(f"Response for {what} is not valid JSON") from exc

    @staticmethod
    def _section(payload: Any, key: str, what: str) -> Any:
        if not isinstance(payload, dict) or key not in payload:
            raise WeatherAPIError(f"Response for {what} has no {key!r} section")
        return payload[key]

    def get_current_weather(self, location: str) -> tuple[Current, Location]:
        """Return the current conditions and the resolved location."""
        what = "current weather"
        payload = self._fetch_json("current.json", what, q=location, aqi="no")
        try:
            loc = Location.from_dict(self._section(payload, "location", what))
            current = Current.from_dict(self._section(payload, "current", what))
        except (KeyError, TypeError) as exc:
            raise WeatherAPIError(f"Malformed response for {what}: {exc}") from exc
        return current, loc

    def get_condition_icon(self, condition: Condition) -> Image.Image:
        """Download and decode the icon image of a weather condition."""
        if not condition.icon:
            raise ValueError("condition has no icon URL")
        response = self._request("http:" + condition.icon, "condition icon")
        try:
            image = Image.open(io.BytesIO(response.content))
            image.load()
        except (UnidentifiedImageError, OSError) as exc:
            raise WeatherAPIError("Condition icon could not be decoded") from exc
        return image

    def get_forecast(self, location: str, days: int) -> tuple[Forecast, Current, Location]:
        """Return a forecast of ``days`` days with current conditions and location."""
        what = "forecast"
        payload = self._fetch_json(
            "forecast.json", what, q=location, days=int(days), aqi="no", alerts="no"
        )
        try:
            loc = Location.from_dict(self._section(payload, "location", what))
            current = Current.from_dict(self._section(payload, "current", what))
            forecast = Forecast.from_dict(self._section(payload, "forecast", what))
        except (KeyError, TypeError) as exc:
            raise WeatherAPIError(f"Malformed response for {what}: {exc}") from exc
        return forecast, current, loc

    def search_location(self, query: str) -> list[SearchLocation]:
        """Return locations matching a free-text query."""
        what = "location search"
        payload = self._fetch_json("search.json", what, q=query)
        if not isinstance(payload, list):
            raise WeatherAPIError(f"Response for {what} is not a list")
        try:
            return [SearchLocation.from_dict(item) for item in payload]
        except (KeyError, TypeError) as exc:
            raise WeatherAPIError(f"Malformed response for {what}: {exc}") from exc