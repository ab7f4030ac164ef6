import asyncio

import httpx
import pytest

from weathernow.models.result_model import Ok, Err, ErrorKind
from weathernow.services.Geocoding_service import GeocodingService


def test_resolve_returns_first_result(open_meteo):
    result = asyncio.run(GeocodingService(open_meteo.client()).resolve("Kolkata"))

    assert isinstance(result, Ok)
    location = result.value
    assert location.name == "Kolkata"
    assert location.country_code == "IN"
    assert location.latitude == pytest.approx(22.56263)
    assert location.longitude == pytest.approx(88.36304)
    assert location.timezone == "Asia/Kolkata"
    assert location.display_name == "Kolkata, IN"


def test_resolve_sends_single_best_match_query(open_meteo):
    asyncio.run(GeocodingService(open_meteo.client()).resolve("São Paulo"))

    (request,) = open_meteo.geocode_requests
    assert request.method == "GET"
    assert request.url.path == "/v1/search"
    assert request.url.params["name"] == "São Paulo"
    assert request.url.params["count"] == "1"
    assert request.url.params["language"] == "en"
    assert request.url.params["format"] == "json"


def test_country_name_used_when_code_missing(open_meteo):
    open_meteo.geocode_body = {"results": [{"name": "Lagos", "latitude": 6.45, "longitude": 3.39, "country": "Nigeria", "timezone": "Africa/Lagos"}]}

    result = asyncio.run(GeocodingService(open_meteo.client()).resolve("Lagos"))

    assert result.value.country_code == "Nigeria"
    assert result.value.display_name == "Lagos, Nigeria"


def test_display_name_without_country(open_meteo):
    open_meteo.geocode_body = {"results": [{"name": "Atlantis", "latitude": 1.0, "longitude": 2.0}]}

    result = asyncio.run(GeocodingService(open_meteo.client()).resolve("Atlantis"))

    assert result.value.country_code == ""
    assert result.value.display_name == "Atlantis"
    assert result.value.timezone is None


@pytest.mark.parametrize("body", [{}, {"results": []}, {"generationtime_ms": 0.3}])
def test_no_results_is_not_found(open_meteo, body):
    open_meteo.geocode_body = body

    result = asyncio.run(GeocodingService(open_meteo.client()).resolve("Nowhereville123"))

    assert isinstance(result, Err)
    assert result.error.kind == ErrorKind.NOT_FOUND
    assert result.error.message == "City not found."


@pytest.mark.parametrize("status", [400, 404, 500, 503])
def test_bad_status_is_lookup_failed(open_meteo, status):
    open_meteo.geocode_status = status
    open_meteo.geocode_body = {"error": True, "reason": "boom"}

    result = asyncio.run(GeocodingService(open_meteo.client()).resolve("Kolkata"))

    assert isinstance(result, Err)
    assert result.error.kind == ErrorKind.LOOKUP_FAILED
    assert result.error.message == "Geocoding failed."


def test_transport_error_is_lookup_failed(open_meteo):
    open_meteo.raise_on_geocode = httpx.ConnectError("connection refused")

    result = asyncio.run(GeocodingService(open_meteo.client()).resolve("Kolkata"))

    assert result.error.kind == ErrorKind.LOOKUP_FAILED


@pytest.mark.parametrize("query", ["", "   "])
def test_blank_query_is_rejected(open_meteo, query):
    with pytest.raises(ValueError):
        asyncio.run(GeocodingService(open_meteo.client()).resolve(query))
    assert open_meteo.requests == []


@pytest.mark.parametrize("result", [
    {"latitude": 1.0, "longitude": 2.0},
    {"name": "Nulltown", "latitude": None, "longitude": 2.0},
    {"name": "Halftown", "latitude": 1.0},
    "Kolkata",
])
def test_unusable_first_result_is_lookup_failed(open_meteo, result):
    open_meteo.geocode_body = {"results": [result]}

    outcome = asyncio.run(GeocodingService(open_meteo.client()).resolve("X"))

    assert isinstance(outcome, Err)
    assert outcome.error.kind == ErrorKind.LOOKUP_FAILED
    assert outcome.error.message == "Geocoding failed."
