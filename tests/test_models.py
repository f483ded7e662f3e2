import copy
import dataclasses

import pytest

from weatherlib.models import (
    Astro,
    Condition,
    Current,
    Day,
    Forecast,
    Forecastday,
    Hour,
    Location,
    SearchLocation,
    TileSettings,
    TileStyle,
)

CONDITION = {"code": 1003, "icon": "//cdn.weatherapi.com/weather/64x64/day/116.png", "text": "Partly cloudy"}

LOCATION = {
    "name": "London",
    "region": "City of London, Greater London",
    "country": "United Kingdom",
    "lat": 51.52,
    "lon": -0.11,
    "tz_id": "Europe/London",
    "localtime_epoch": 1700000000,
    "localtime": "2023-11-14 22:13",
}

CURRENT = {
    "last_updated_epoch": 1700000000,
    "last_updated": "2023-11-14 22:00",
    "temp_c": 10.0,
    "temp_f": 50.0,
    "is_day": 0,
    "condition": CONDITION,
    "wind_mph": 5.6,
    "wind_kph": 9.0,
    "wind_degree": 240,
    "wind_dir": "WSW",
    "pressure_mb": 1012.0,
    "pressure_in": 29.88,
    "precip_mm": 0.0,
    "precip_in": 0.0,
    "humidity": 82.0,
    "cloud": 75.0,
    "feelslike_c": 8.5,
    "feelslike_f": 47.3,
    "windchill_c": 8.0,
    "windchill_f": 46.4,
    "heatindex_c": 10.0,
    "heatindex_f": 50.0,
    "dewpoint_c": 7.0,
    "dewpoint_f": 44.6,
    "vis_km": 10.0,
    "vis_miles": 6.0,
    "uv": 1.0,
    "gust_mph": 9.1,
    "gust_kph": 14.6,
}

DAY = {
    "maxtemp_c": 12.0, "maxtemp_f": 53.6, "mintemp_c": 6.0, "mintemp_f": 42.8,
    "avgtemp_c": 9.0, "avgtemp_f": 48.2, "maxwind_mph": 10.0, "maxwind_kph": 16.1,
    "totalprecip_mm": 1.2, "totalprecip_in": 0.05, "totalsnow_cm": 0.0,
    "avgvis_km": 9.5, "avgvis_miles": 5.0, "avghumidity": 80,
    "daily_will_it_rain": 1, "daily_chance_of_rain": 70,
    "daily_will_it_snow": 0, "daily_chance_of_snow": 0,
    "condition": CONDITION, "uv": 2.0,
}

ASTRO = {
    "sunrise": "07:15 AM", "sunset": "04:20 PM", "moonrise": "09:00 AM",
    "moonset": "05:30 PM", "moon_phase": "Waxing Crescent",
    "moon_illumination": 5, "is_moon_up": 0, "is_sun_up": 0,
}

HOUR = {
    "time_epoch": 1699920000, "time": "2023-11-14 00:00", "temp_c": 9.0, "temp_f": 48.2,
    "is_day": 0, "condition": CONDITION, "wind_mph": 6.0, "wind_kph": 9.7,
    "wind_degree": 230.0, "wind_dir": "SW", "pressure_mb": 1011.0, "pressure_in": 29.85,
    "precip_mm": 0.0, "precip_in": 0.0, "snow_cm": 0.0, "humidity": 85, "cloud": 60,
    "feelslike_c": 7.0, "feelslike_f": 44.6, "windchill_c": 7.0, "windchill_f": 44.6,
    "heatindex_c": 9.0, "heatindex_f": 48.2, "dewpoint_c": 6.5, "dewpoint_f": 43.7,
    "will_it_rain": 0, "chance_of_rain": 20, "will_it_snow": 0, "chance_of_snow": 0,
    "vis_km": 10.0, "vis_miles": 6.0, "gust_mph": 10.0, "gust_kph": 16.1, "uv": 1,
}

FORECASTDAY = {"date": "2023-11-14", "date_epoch": 1699920000, "day": DAY, "astro": ASTRO, "hour": [HOUR, HOUR]}

FORECAST = {"forecastday": [FORECASTDAY]}

SEARCH = {
    "id": 2801268,
    "name": "London",
    "region": "City of London, Greater London",
    "country": "United Kingdom",
    "lat": 51.52,
    "lon": -0.11,
    "url": "london-city-of-london-greater-london-united-kingdom",
}


@pytest.mark.parametrize(
    "model, data",
    [
        (SearchLocation, SEARCH),
        (Location, LOCATION),
        (Condition, CONDITION),
        (Current, CURRENT),
        (Day, DAY),
        (Astro, ASTRO),
        (Hour, HOUR),
        (Forecastday, FORECASTDAY),
        (Forecast, FORECAST),
    ],
)
def test_round_trip(model, data):
    assert model.from_dict(data).to_dict() == data


def test_nested_objects_are_models():
    forecast = Forecast.from_dict(FORECAST)
    day = forecast.forecastday[0]
    assert day.date == FORECASTDAY["date"]
    assert day.day.condition == Condition.from_dict(CONDITION)
    assert len(day.hour) == 2
    assert day.hour[0].chance_of_rain == HOUR["chance_of_rain"]
    assert day.astro.moon_phase == ASTRO["moon_phase"]


def test_current_fields():
    current = Current.from_dict(CURRENT)
    assert current.temp_c == CURRENT["temp_c"]
    assert current.condition.text == CONDITION["text"]
    assert current.wind_dir == CURRENT["wind_dir"]


def test_int_field_truncates_float():
    data = dict(CONDITION, code=1003.9)
    assert Condition.from_dict(data).code == 1003


def test_float_field_accepts_int():
    data = dict(LOCATION, lat=51)
    loc = Location.from_dict(data)
    assert loc.lat == 51
    assert isinstance(loc.lat, float)


def test_missing_key_raises():
    data = copy.deepcopy(LOCATION)
    del data["tz_id"]
    with pytest.raises(KeyError):
        Location.from_dict(data)


def test_missing_nested_key_raises():
    data = copy.deepcopy(CURRENT)
    del data["condition"]["icon"]
    with pytest.raises(KeyError):
        Current.from_dict(data)


def test_string_for_number_raises():
    with pytest.raises(TypeError):
        Condition.from_dict(dict(CONDITION, code="1003"))


def test_null_for_string_raises():
    with pytest.raises(TypeError):
        Condition.from_dict(dict(CONDITION, text=None))


def test_non_list_for_list_raises():
    with pytest.raises(TypeError):
        Forecast.from_dict({"forecastday": FORECASTDAY})


def test_non_mapping_raises():
    with pytest.raises(TypeError):
        Location.from_dict([LOCATION])


def test_extra_keys_ignored():
    data = dict(CONDITION, extra="value")
    assert Condition.from_dict(data).to_dict() == CONDITION


def test_display_name_joins_parts():
    loc = SearchLocation.from_dict(SEARCH)
    assert loc.display_name() == "London, City of London, Greater London, United Kingdom"


def test_display_name_skips_empty_parts():
    loc = SearchLocation.from_dict(dict(SEARCH, region=""))
    assert loc.display_name() == "London, United Kingdom"


def test_display_name_all_empty():
    loc = SearchLocation.from_dict(dict(SEARCH, name="", region="", country=""))
    assert loc.display_name() == ""


def test_tile_settings_defaults_and_replace():
    settings = TileSettings()
    assert settings == TileSettings(TileStyle.NORMAL, True, False, True)
    compact = dataclasses.replace(settings, style=TileStyle.COMPACT, celsius=False)
    assert compact.style is TileStyle(1)
    assert compact.include_feels_like is True
    assert settings.celsius is True