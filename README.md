# weatherlib

A small, blocking client for the weatherapi.com HTTP API. Responses are
decoded into plain dataclasses, which makes them easy to inspect, compare and
serialise.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Usage

```python
from weatherlib.api import WeatherAPI

api = WeatherAPI(api_key="placeholder")

# Current conditions for a place (a name, "lat,lon" or "id:<id>")
current, location = api.get_current_weather("London")
print(location.name, current.temp_c, current.condition.text)

# Forecast for several days
forecast, current, location = api.get_forecast("London", 3)
for day in forecast.forecastday:
    print(day.date, day.day.mintemp_c, day.day.maxtemp_c)

# Search for places
for place in api.search_location("Lon"):
    print(place.id, place.display_name())

# Icon for a condition, as a Pillow image
icon = api.get_condition_icon(current.condition)
```

`WeatherAPI(api_key, session=None)` takes an optional `requests.Session`; if
it is left out, one is created. Requests go to
`http://api.weatherapi.com/v1` with a 30-second timeout. Air-quality data and
alerts are not requested.

- `get_current_weather(location)` returns `(Current, Location)`.
- `get_forecast(location, days)` returns `(Forecast, Current, Location)`.
- `search_location(query)` returns a list of `SearchLocation`.
- `get_condition_icon(condition)` fetches the condition's icon URL (which the
  service gives without a scheme, so `http:` is put in front) and returns a
  decoded Pillow image.

### Errors

`weatherlib.api.WeatherAPIError` is raised when a request fails (network
error or HTTP error status), when a response is not valid JSON, when an
expected section is missing, or when a field is missing or of the wrong type.
`get_condition_icon` raises `ValueError` if the condition has no icon URL, and
`WeatherAPIError` if the downloaded data is not an image.

## Models

`weatherlib.models` holds the data types: `SearchLocation`, `Location`,
`Condition`, `Current`, `Day`, `Astro`, `Hour`, `Forecastday` and `Forecast`.
Each one is built with the class method `from_dict` and turned back into a
dictionary with `to_dict`. `from_dict` is strict: every field must be present
(`KeyError` otherwise), numbers are converted to the declared `int` or
`float`, and other type mismatches raise `TypeError`.

`SearchLocation.display_name()` joins name, region and country with `", "`,
leaving out empty parts.

`TileSettings` and `TileStyle` describe how a current-weather display should
look: `style` (`TileStyle.NORMAL` or `TileStyle.COMPACT`, default normal),
`include_feels_like` (default `True`), `include_high_low` (default `False`)
and `celsius` (default `True`).

## What this package does not do

It has no user interface: there is no weather tile, location picker or
settings window, and no command-line program. `TileSettings` is only a plain
settings record for such a display to use. Calls are synchronous; there is no
callback or event-driven interface, and nothing is cached.