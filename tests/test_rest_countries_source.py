"""
Tests for the REST Countries remote source, with HTTP mocked by respx.
"""

import httpx
import pydantic
import pytest
import respx

from country_cache.repositories import RestCountriesSource

BASE_URL = "https://countries.test/v3.1"

EGYPT = {
    "name": {
        "common": "Egypt",
        "official": "Arab Republic of Egypt",
        "nativeName": {"ara": {"official": "جمهورية مصر العربية", "common": "مصر"}},
    },
    "capital": ["Cairo"],
    "currencies": {"EGP": {"name": "Egyptian pound", "symbol": "E£"}},
    "languages": {"ara": "Arabic"},
    "flags": {"png": "https://flagcdn.com/w320/eg.png", "svg": "https://flagcdn.com/eg.svg"},
    "latlng": [27.0, 30.0],
    "population": 102334403,
    "area": 1002450.0,
    "region": "Africa",
}

ANTARCTICA = {
    "name": {"common": "Antarctica", "official": "Antarctica"},
    "capital": [],
    "flags": {"png": "", "svg": ""},
    "latlng": [-90.0],
    "population": 1000,
    "region": "Antarctic",
}


def make_source():
    return RestCountriesSource(base_url=BASE_URL + "/", timeout=5)


@pytest.mark.asyncio
@respx.mock
async def test_fetch_requests_only_mapped_fields():
    """GET /all is restricted to the fields the mapping uses."""
    route = respx.get(f"{BASE_URL}/all").mock(return_value=httpx.Response(200, json=[EGYPT]))
    source = make_source()

    countries = await source.fetch()
    await source.close()

    assert route.called
    fields = route.calls.last.request.url.params["fields"]
    assert fields.split(",") == [
        "name",
        "capital",
        "currencies",
        "languages",
        "flags",
        "latlng",
        "population",
        "area",
        "region",
    ]
    assert [c.id for c in countries] == ["Egypt"]


@pytest.mark.asyncio
@respx.mock
async def test_fetch_maps_wire_format_to_entities():
    """First capital and currency are kept, languages flattened, coordinates paired."""
    respx.get(f"{BASE_URL}/all").mock(return_value=httpx.Response(200, json=[EGYPT, ANTARCTICA]))
    source = make_source()

    egypt, antarctica = await source.fetch()
    await source.close()

    assert egypt.id == "Egypt"
    assert egypt.name.official == "Arab Republic of Egypt"
    assert egypt.capital == "Cairo"
    assert egypt.currency.name == "Egyptian pound"
    assert egypt.currency.symbol == "E£"
    assert egypt.languages == ["Arabic"]
    assert egypt.flag_url == "https://flagcdn.com/w320/eg.png"
    assert (egypt.coordinates.latitude, egypt.coordinates.longitude) == (27.0, 30.0)
    assert egypt.population == 102334403
    assert egypt.formatted_area == "1,002,450 km²"

    assert antarctica.capital is None
    assert antarctica.currency is None
    assert antarctica.languages == []
    assert antarctica.flag_url is None
    assert antarctica.coordinates is None
    assert antarctica.area is None


@pytest.mark.asyncio
@respx.mock
async def test_fetch_raises_on_error_status():
    """Server errors propagate as httpx status errors."""
    respx.get(f"{BASE_URL}/all").mock(return_value=httpx.Response(500))
    source = make_source()

    with pytest.raises(httpx.HTTPStatusError):
        await source.fetch()
    await source.close()


@pytest.mark.asyncio
@respx.mock
async def test_fetch_raises_on_malformed_payload():
    """Payloads of the wrong shape fail validation."""
    respx.get(f"{BASE_URL}/all").mock(return_value=httpx.Response(200, json={"message": "oops"}))
    source = make_source()

    with pytest.raises(pydantic.ValidationError):
        await source.fetch()
    await source.close()


@pytest.mark.asyncio
@respx.mock
async def test_search_by_name_quotes_query():
    """The query is URL-encoded into the path."""
    route = respx.get(f"{BASE_URL}/name/united%20states").mock(
        return_value=httpx.Response(200, json=[EGYPT])
    )
    source = make_source()

    results = await source.search_by_name("united states")
    await source.close()

    assert route.called
    assert [c.id for c in results] == ["Egypt"]


@pytest.mark.asyncio
@respx.mock
async def test_search_by_name_not_found_is_empty():
    """The API answers 404 when nothing matches; that is an empty result."""
    respx.get(f"{BASE_URL}/name/atlantis").mock(
        return_value=httpx.Response(404, json={"status": 404, "message": "Not Found"})
    )
    source = make_source()

    assert await source.search_by_name("atlantis") == []
    await source.close()


@pytest.mark.asyncio
@respx.mock
async def test_search_by_name_raises_on_other_errors():
    """Statuses other than 404 are still errors."""
    respx.get(f"{BASE_URL}/name/egypt").mock(return_value=httpx.Response(503))
    source = make_source()

    with pytest.raises(httpx.HTTPStatusError):
        await source.search_by_name("egypt")
    await source.close()


@pytest.mark.asyncio
async def test_close_without_client_is_noop():
    """Closing before any request does nothing."""
    source = make_source()
    await source.close()
    await source.close()


@pytest.mark.asyncio
async def test_explicit_timeout_is_kept():
    """An explicit timeout, even zero, overrides the configured one."""
    source = RestCountriesSource(base_url=BASE_URL, timeout=0)

    assert source.client.timeout == httpx.Timeout(0)
    await source.close()
