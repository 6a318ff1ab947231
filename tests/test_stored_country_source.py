"""
Tests for the storage-backed local country source.
"""

from datetime import datetime, timezone

import pydantic
import pytest
from fakes import NOW

from country_cache.errors import NotFound
from country_cache.repositories import InMemoryStorage, StoredCountrySource


def make_source(storage=None, clock=lambda: NOW):
    """Local source over in-memory storage with fixed keys."""
    return StoredCountrySource(
        storage=storage or InMemoryStorage(),
        countries_key="test:countries",
        last_update_key="test:last_update",
        selected_key="test:selected",
        clock=clock,
    )


@pytest.mark.asyncio
async def test_fetch_without_collection_is_not_found():
    """An empty store has nothing to return."""
    source = make_source()

    assert not await source.exists()
    with pytest.raises(NotFound):
        await source.fetch()


@pytest.mark.asyncio
async def test_save_then_fetch_preserves_every_field(countries):
    """Countries come back equal, in order, with nested values intact."""
    source = make_source()

    await source.save(countries)
    loaded = await source.fetch()

    assert loaded == countries
    assert [c.population for c in loaded] == [c.population for c in countries]
    assert loaded[0].name.official == "United States of America"
    assert loaded[0].currency.symbol == "$"
    assert loaded[0].coordinates.longitude == -2.5
    assert loaded[2].languages == ["Testish"]


@pytest.mark.asyncio
async def test_save_stamps_last_update():
    """Saving records the clock instant, which survives the ISO round trip."""
    source = make_source()

    assert await source.get_last_update_time() is None
    await source.save([])

    assert await source.get_last_update_time() == NOW
    assert await source.exists()
    assert await source.fetch() == []


@pytest.mark.asyncio
async def test_naive_timestamp_is_read_back_naive():
    """A timestamp written without an offset is returned as stored."""
    storage = InMemoryStorage()
    await storage.save("test:last_update", b"2026-01-01T12:00:00")

    stamp = await make_source(storage).get_last_update_time()

    assert stamp == datetime(2026, 1, 1, 12, 0)
    assert stamp.tzinfo is None


@pytest.mark.asyncio
async def test_clear_removes_collection_and_timestamp(countries):
    """Clear removes both keys and leaves the selection alone."""
    source = make_source()
    await source.save(countries)
    await source.save_selected(countries[:1])

    await source.clear()

    assert not await source.exists()
    assert await source.get_last_update_time() is None
    assert await source.fetch_selected() == countries[:1]


@pytest.mark.asyncio
async def test_corrupt_collection_fails_to_decode():
    """Garbage under the collection key raises a validation error."""
    storage = InMemoryStorage()
    await storage.save("test:countries", b"not json")

    with pytest.raises(pydantic.ValidationError):
        await make_source(storage).fetch()


@pytest.mark.asyncio
async def test_selected_round_trip(france, japan):
    """The selection is stored separately and defaults to empty."""
    source = make_source()

    assert await source.fetch_selected() == []
    await source.save_selected([japan, france])
    assert await source.fetch_selected() == [japan, france]
    assert not await source.exists()

    await source.clear_selected()
    assert await source.fetch_selected() == []


@pytest.mark.asyncio
async def test_stamp_uses_source_clock():
    """The injected clock decides the stamp."""
    later = datetime(2030, 6, 1, tzinfo=timezone.utc)
    source = make_source(clock=lambda: later)

    await source.save([])

    assert await source.get_last_update_time() == later
