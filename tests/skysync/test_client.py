"""Tests for the Open-Meteo and Nominatim client classes."""

from __future__ import annotations

import httpx
import pytest
import respx

from skysync import (
    AsyncNominatimClient,
    AsyncOpenMeteoClient,
    NominatimClient,
    OpenMeteoClient,
    SkySyncValidationError,
)
from skysync.client import WEATHER_FIELDS
from skysync.models.forecast import Forecast
from skysync.models.place import Place, ReversePlace
from tests.conftest import (
    NOMINATIM_URL,
    OPEN_METEO_URL,
    SAMPLE_FORECAST,
    SAMPLE_PLACE,
    SAMPLE_REVERSE,
    SAMPLE_REVERSE_ERROR,
)


class TestOpenMeteoClient:
    @respx.mock
    def test_forecast(self) -> None:
        respx.get(f"{OPEN_METEO_URL}/forecast").mock(
            return_value=httpx.Response(200, json=SAMPLE_FORECAST)
        )
        with OpenMeteoClient() as om:
            forecast = om.forecast(38.72, -9.14)
        assert isinstance(forecast, Forecast)
        assert forecast.current.temperature_2m == 21.4
        assert len(forecast.hourly) == 24

    @respx.mock
    def test_forecast_query(self) -> None:
        route = respx.get(f"{OPEN_METEO_URL}/forecast").mock(
            return_value=httpx.Response(200, json=SAMPLE_FORECAST)
        )
        with OpenMeteoClient() as om:
            om.forecast(38.72, -9.14)
        params = route.calls.last.request.url.params
        assert params["latitude"] == "38.72"
        assert params["longitude"] == "-9.14"
        assert params["current"] == ",".join(WEATHER_FIELDS)
        assert params["hourly"] == ",".join(WEATHER_FIELDS)
        assert params["forecast_days"] == "1"
        assert params["timezone"] == "auto"

    @respx.mock
    def test_custom_fields(self) -> None:
        route = respx.get(f"{OPEN_METEO_URL}/forecast").mock(
            return_value=httpx.Response(200, json={"latitude": 0.0, "longitude": 0.0})
        )
        with OpenMeteoClient() as om:
            forecast = om.forecast(0.0, 0.0, current=["temperature_2m"], hourly=[], forecast_days=3)
        params = route.calls.last.request.url.params
        assert params["current"] == "temperature_2m"
        assert "hourly" not in params
        assert params["forecast_days"] == "3"
        assert forecast.current is None
        assert forecast.hourly is None

    @respx.mock
    def test_mismatched_hourly_series(self) -> None:
        payload = {
            "hourly": {
                "time": ["2024-05-01T00:00", "2024-05-01T01:00"],
                "temperature_2m": [12.0],
            },
        }
        respx.get(f"{OPEN_METEO_URL}/forecast").mock(
            return_value=httpx.Response(200, json=payload)
        )
        with OpenMeteoClient() as om:
            with pytest.raises(SkySyncValidationError, match="Forecast"):
                om.forecast(0.0, 0.0)

    @respx.mock
    def test_custom_base_url(self) -> None:
        respx.get("https://meteo.example.com/v1/forecast").mock(
            return_value=httpx.Response(200, json=SAMPLE_FORECAST)
        )
        with OpenMeteoClient(base_url="https://meteo.example.com/v1") as om:
            forecast = om.forecast(38.72, -9.14)
        assert forecast.timezone == "Europe/Lisbon"


class TestNominatimClient:
    @respx.mock
    def test_search(self) -> None:
        route = respx.get(f"{NOMINATIM_URL}/search").mock(
            return_value=httpx.Response(200, json=[SAMPLE_PLACE])
        )
        with NominatimClient() as geo:
            places = geo.search("Lisbon")
        assert len(places) == 1
        assert isinstance(places[0], Place)
        assert places[0].lat == pytest.approx(38.7077507)
        params = route.calls.last.request.url.params
        assert params["format"] == "json"
        assert params["q"] == "Lisbon"
        assert params["limit"] == "1"

    @respx.mock
    def test_search_no_match(self) -> None:
        respx.get(f"{NOMINATIM_URL}/search").mock(
            return_value=httpx.Response(200, json=[])
        )
        with NominatimClient() as geo:
            assert geo.search("zzzzzz") == []

    @respx.mock
    def test_identifying_headers(self) -> None:
        route = respx.get(f"{NOMINATIM_URL}/search").mock(
            return_value=httpx.Response(200, json=[])
        )
        with NominatimClient(user_agent="SkySync-Test", language="pt") as geo:
            geo.search("Porto")
        headers = route.calls.last.request.headers
        assert headers["User-Agent"] == "SkySync-Test"
        assert headers["Accept-Language"] == "pt"

    @respx.mock
    def test_reverse(self) -> None:
        route = respx.get(f"{NOMINATIM_URL}/reverse").mock(
            return_value=httpx.Response(200, json=SAMPLE_REVERSE)
        )
        with NominatimClient() as geo:
            place = geo.reverse(38.7, -9.13)
        assert isinstance(place, ReversePlace)
        assert place.address.city == "Lisbon"
        params = route.calls.last.request.url.params
        assert params["lat"] == "38.7"
        assert params["lon"] == "-9.13"
        assert params["zoom"] == "10"
        assert params["addressdetails"] == "1"

    @respx.mock
    def test_reverse_unresolvable(self) -> None:
        respx.get(f"{NOMINATIM_URL}/reverse").mock(
            return_value=httpx.Response(200, json=SAMPLE_REVERSE_ERROR)
        )
        with NominatimClient() as geo:
            place = geo.reverse(0.0, -160.0)
        assert place.error == "Unable to geocode"
        assert place.address.place_name() is None

    @respx.mock
    def test_invalid_search_payload(self) -> None:
        respx.get(f"{NOMINATIM_URL}/search").mock(
            return_value=httpx.Response(200, json=[{"display_name": "no coordinates"}])
        )
        with NominatimClient() as geo:
            with pytest.raises(SkySyncValidationError):
                geo.search("nowhere")


class TestAsyncClients:
    @respx.mock
    @pytest.mark.asyncio
    async def test_forecast(self) -> None:
        respx.get(f"{OPEN_METEO_URL}/forecast").mock(
            return_value=httpx.Response(200, json=SAMPLE_FORECAST)
        )
        async with AsyncOpenMeteoClient() as om:
            forecast = await om.forecast(38.72, -9.14)
        assert forecast.current.weather_code == 2

    @respx.mock
    @pytest.mark.asyncio
    async def test_search(self) -> None:
        respx.get(f"{NOMINATIM_URL}/search").mock(
            return_value=httpx.Response(200, json=[SAMPLE_PLACE])
        )
        async with AsyncNominatimClient() as geo:
            places = await geo.search("Lisbon")
        assert places[0].short_name == "Lisbon, Lisboa"

    @respx.mock
    @pytest.mark.asyncio
    async def test_reverse(self) -> None:
        respx.get(f"{NOMINATIM_URL}/reverse").mock(
            return_value=httpx.Response(200, json=SAMPLE_REVERSE)
        )
        async with AsyncNominatimClient() as geo:
            place = await geo.reverse(38.7, -9.13)
        assert place.address.country == "Portugal"
