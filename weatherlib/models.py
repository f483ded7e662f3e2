"""Data models for weatherapi.com responses and tile display settings."""

import dataclasses
import enum
from collections.abc import Mapping
from typing import Any, get_args, get_origin


def _is_model(tp: Any) -> bool:
    return isinstance(tp, type) and dataclasses.is_dataclass(tp) and hasattr(tp, "from_dict")


def _convert(tp: Any, raw: Any, where: str) -> Any:
    origin = get_origin(tp)
    if origin is list:
        if not isinstance(raw, list):
            raise TypeError(f"{where}: expected a JSON array, got {type(raw).__name__}")
        (item_type,) = get_args(tp)
        return [_convert(item_type, item, f"{where}[]") for item in raw]
    if _is_model(tp):
        return tp.from_dict(raw)
    if tp is str:
        if not isinstance(raw, str):
            raise TypeError(f"{where}: expected a string, got {type(raw).__name__}")
        return raw
    if tp in (int, float):
        if not isinstance(raw, (int, float)):
            raise TypeError(f"{where}: expected a number, got {type(raw).__name__}")
        return tp(raw)
    raise TypeError(f"{where}: unsupported field type {tp!r}")


def _dump(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return value.to_dict()
    if isinstance(value, list):
        return [_dump(item) for item in value]
    return value


def _from_dict(cls: Any, data: Any) -> Any:
    """Build a dataclass instance strictly from a decoded JSON object.

    Every field must be present; numbers are coerced to the declared numeric
    type and other mismatches raise ``TypeError``.
    """
    if not isinstance(data, Mapping):
        raise TypeError(f"{cls.__name__}: expected a JSON object, got {type(data).__name__}")
    values = {}
    for field in dataclasses.fields(cls):
        if field.name not in data:
            raise KeyError(f"{cls.__name__}: missing key {field.name!r}")
        values[field.name] = _convert(
            field.type, data[field.name], f"{cls.__name__}.{field.name}"
        )
    return cls(**values)


def _to_dict(obj: Any) -> dict[str, Any]:
    return {field.name: _dump(getattr(obj, field.name)) for field in dataclasses.fields(obj)}


@dataclasses.dataclass
class SearchLocation:
    id: int
    name: str
    region: str
    country: str
    lat: float
    lon: float
    url: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SearchLocation":
        """Build an instance from a decoded JSON object."""
        return _from_dict(cls, data)

    def to_dict(self) -> dict[str, Any]:
        """Return the instance as a JSON-compatible dictionary."""
        return _to_dict(self)

    def display_name(self) -> str:
        """Name, region and country joined by ", ", skipping empty parts."""
        return ", ".join(part for part in (self.name, self.region, self.country) if part)


@dataclasses.dataclass
class Location:
    name: str
    region: str
    country: str
    lat: float
    lon: float
    tz_id: str
    localtime_epoch: int
    localtime: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Location":
        """Build an instance from a decoded JSON object."""
        return _from_dict(cls, data)

    def to_dict(self) -> dict[str, Any]:
        """Return the instance as a JSON-compatible dictionary."""
        return _to_dict(self)


@dataclasses.dataclass
class Condition:
    code: int
    icon: str
    text: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Condition":
        """Build an instance from a decoded JSON object."""
        return _from_dict(cls, data)

    def to_dict(self) -> dict[str, Any]:
        """Return the instance as a JSON-compatible dictionary."""
        return _to_dict(self)


@dataclasses.dataclass
class Current:
    last_updated_epoch: int
    last_updated: str
    temp_c: float
    temp_f: float
    is_day: int
    condition: Condition
    wind_mph: float
    wind_kph: float
    wind_degree: int
    wind_dir: str
    pressure_mb: float
    pressure_in: float
    precip_mm: float
    precip_in: float
    humidity: float
    cloud: float
    feelslike_c: float
    feelslike_f: float
    windchill_c: float
    windchill_f: float
    heatindex_c: float
    heatindex_f: float
    dewpoint_c: float
    dewpoint_f: float
    vis_km: float
    vis_miles: float
    uv: float
    gust_mph: float
    gust_kph: float

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Current":
        """Build an instance from a decoded JSON object."""
        return _from_dict(cls, data)

    def to_dict(self) -> dict[str, Any]:
        """Return the instance as a JSON-compatible dictionary."""
        return _to_dict(self)


@dataclasses.dataclass
class Day:
    maxtemp_c: float
    maxtemp_f: float
    mintemp_c: float
    mintemp_f: float
    avgtemp_c: float
    avgtemp_f: float
    maxwind_mph: float
    maxwind_kph: float
    totalprecip_mm: float
    totalprecip_in: float
    totalsnow_cm: float
    avgvis_km: float
    avgvis_miles: float
    avghumidity: int
    daily_will_it_rain: int
    daily_chance_of_rain: int
    daily_will_it_snow: int
    daily_chance_of_snow: int
    condition: Condition
    uv: float

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Day":
        """Build an instance from a decoded JSON object."""
        return _from_dict(cls, data)

    def to_dict(self) -> dict[str, Any]:
        """Return the instance as a JSON-compatible dictionary."""
        return _to_dict(self)


@dataclasses.dataclass
class Astro:
    sunrise: str
    sunset: str
    moonrise: str
    moonset: str
    moon_phase: str
    moon_illumination: int
    is_moon_up: int
    is_sun_up: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Astro":
        """Build an instance from a decoded JSON object."""
        return _from_dict(cls, data)

    def to_dict(self) -> dict[str, Any]:
        """Return the instance as a JSON-compatible dictionary."""
        return _to_dict(self)


@dataclasses.dataclass
class Hour:
    time_epoch: int
    time: str
    temp_c: float
    temp_f: float
    is_day: int
    condition: Condition
    wind_mph: float
    wind_kph: float
    wind_degree: float
    wind_dir: str
    pressure_mb: float
    pressure_in: float
    precip_mm: float
    precip_in: float
    snow_cm: float
    humidity: int
    cloud: int
    feelslike_c: float
    feelslike_f: float
    windchill_c: float
    windchill_f: float
    heatindex_c: float
    heatindex_f: float
    dewpoint_c: float
    dewpoint_f: float
    will_it_rain: int
    chance_of_rain: int
    will_it_snow: int
    chance_of_snow: int
    vis_km: float
    vis_miles: float
    gust_mph: float
    gust_kph: float
    uv: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Hour":
        """Build an instance from a decoded JSON object."""
        return _from_dict(cls, data)

    def to_dict(self) -> dict[str, Any]:
        """Return the instance as a JSON-compatible dictionary."""
        return _to_dict(self)


@dataclasses.dataclass
class Forecastday:
    date: str
    date_epoch: int
    day: Day
    astro: Astro
    hour: list[Hour]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Forecastday":
        """Build an instance from a decoded JSON object."""
        return _from_dict(cls, data)

    def to_dict(self) -> dict[str, Any]:
        """Return the instance as a JSON-compatible dictionary."""
        return _to_dict(self)


@dataclasses.dataclass
class Forecast:
    forecastday: list[Forecastday]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Forecast":
        """Build an instance from a decoded JSON object."""
        return _from_dict(cls, data)

    def to_dict(self) -> dict[str, Any]:
        """Return the instance as a JSON-compatible dictionary."""
        return _to_dict(self)


class TileStyle(enum.IntEnum):
    """Layout of a current-weather tile."""

    NORMAL = 0
    COMPACT = 1


@dataclasses.dataclass
class TileSettings:
    """Display options for a current-weather tile."""

    style: TileStyle = TileStyle.NORMAL
    include_feels_like: bool = True
    include_high_low: bool = False
    celsius: bool = True