import asyncio
import gc
from unittest.mock import AsyncMock

import httpx
import pytest
import respx
from httpx import Response

from app.exceptions.custom import ErrorKind, EventDataError
from app.schemas.event_data import EventData
from app.services.event_data import EventDataCache, EventDataLoader
from app.services.sheets import SheetsService

META_URL = "https://sheets.test/meta.csv"
EVENTS_URL = "https://sheets.test/events.csv"
HOTELS_URL = "https://sheets.test/hotels.csv"
GUESTS_URL = "https://sheets.test/guests.csv"


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def _snapshot(city: str) -> EventData:
    return EventData(city=city)


# --- EventDataCache ---


async def test_cache_reuses_snapshot_within_ttl():
    clock = FakeClock()
    loader = AsyncMock(side_effect=[_snapshot("Jaipur"), _snapshot("Udaipur")])
    cache = EventDataCache(loader, ttl_seconds=300, clock=clock)

    first = await cache.get_snapshot()
    clock.now += 299
    second = await cache.get_snapshot()

    assert second is first
    assert second.city == "Jaipur"
    assert loader.await_count == 1


async def test_cache_rebuilds_after_ttl():
    clock = FakeClock()
    loader = AsyncMock(side_effect=[_snapshot("Jaipur"), _snapshot("Udaipur")])
    cache = EventDataCache(loader, ttl_seconds=300, clock=clock)

    await cache.get_snapshot()
    clock.now += 300
    refreshed = await cache.get_snapshot()

    assert refreshed.city == "Udaipur"
    assert loader.await_count == 2


async def test_cache_failure_keeps_previous_snapshot_and_retries():
    clock = FakeClock()
    error = EventDataError(ErrorKind.fetch, "boom", status_code=500)
    loader = AsyncMock(side_effect=[_snapshot("Jaipur"), error, _snapshot("Udaipur")])
    cache = EventDataCache(loader, ttl_seconds=300, clock=clock)

    await cache.get_snapshot()
    clock.now += 301
    with pytest.raises(EventDataError):
        await cache.get_snapshot()

    assert (await cache.get_snapshot()).city == "Udaipur"
    assert loader.await_count == 3


async def test_concurrent_misses_share_one_rebuild():
    release = asyncio.Event()
    calls = 0

    async def slow_loader() -> EventData:
        nonlocal calls
        calls += 1
        await release.wait()
        return _snapshot("Jaipur")

    cache = EventDataCache(slow_loader, ttl_seconds=300, clock=FakeClock())
    waiters = [asyncio.create_task(cache.get_snapshot()) for _ in range(5)]
    await asyncio.sleep(0)
    release.set()
    results = await asyncio.gather(*waiters)

    assert calls == 1
    assert all(r is results[0] for r in results)


async def test_cancelled_caller_does_not_cancel_rebuild():
    release = asyncio.Event()

    async def slow_loader() -> EventData:
        await release.wait()
        return _snapshot("Jaipur")

    cache = EventDataCache(slow_loader, ttl_seconds=300, clock=FakeClock())
    impatient = asyncio.create_task(cache.get_snapshot())
    patient = asyncio.create_task(cache.get_snapshot())
    await asyncio.sleep(0)
    impatient.cancel()
    release.set()

    assert (await patient).city == "Jaipur"


async def test_invalidate_forces_rebuild():
    loader = AsyncMock(side_effect=[_snapshot("Jaipur"), _snapshot("Udaipur")])
    cache = EventDataCache(loader, ttl_seconds=300, clock=FakeClock())

    await cache.get_snapshot()
    cache.invalidate()

    assert (await cache.get_snapshot()).city == "Udaipur"


# --- EventDataLoader ---


@respx.mock
async def test_loader_builds_snapshot_from_all_sheets():
    respx.get(META_URL).mock(return_value=Response(200, text="field,value\ncity,Jaipur\n"))
    respx.get(EVENTS_URL).mock(return_value=Response(200, text="key,name\nhaldi,Haldi\n"))
    respx.get(HOTELS_URL).mock(return_value=Response(200, text="name\nHotel Sunshine\n"))
    respx.get(GUESTS_URL).mock(return_value=Response(200, text="phone,name\n9876543210,Asha\n"))

    async with httpx.AsyncClient() as client:
        loader = EventDataLoader(
            SheetsService(client), META_URL, EVENTS_URL, HOTELS_URL, GUESTS_URL
        )
        data = await loader.load()

    assert data.city == "Jaipur"
    assert [e.name for e in data.events] == ["Haldi"]
    assert [h.name for h in data.hotels] == ["Hotel Sunshine"]
    assert [g.name for g in data.guests] == ["Asha"]


@respx.mock
async def test_loader_optional_sheets_unset():
    respx.get(META_URL).mock(return_value=Response(200, text="field,value\n"))
    respx.get(EVENTS_URL).mock(return_value=Response(200, text="key,name\n"))

    async with httpx.AsyncClient() as client:
        data = await EventDataLoader(SheetsService(client), META_URL, EVENTS_URL).load()

    assert data.hotels == ()
    assert data.guests == ()


@pytest.mark.parametrize("meta_url,events_url", [("", EVENTS_URL), (META_URL, "")])
async def test_loader_missing_required_url(meta_url, events_url):
    sheets = AsyncMock(spec=SheetsService)
    loader = EventDataLoader(sheets, meta_url, events_url)

    with pytest.raises(EventDataError) as exc_info:
        await loader.load()

    assert exc_info.value.kind == ErrorKind.configuration
    sheets.fetch_records.assert_not_awaited()


@respx.mock
async def test_loader_propagates_fetch_error():
    respx.get(META_URL).mock(return_value=Response(500, text="oops"))

    async with httpx.AsyncClient() as client:
        loader = EventDataLoader(SheetsService(client), META_URL, EVENTS_URL)
        with pytest.raises(EventDataError) as exc_info:
            await loader.load()

    assert exc_info.value.kind == ErrorKind.fetch


async def test_failed_rebuild_with_no_waiters_is_not_reported_as_unretrieved(caplog):
    release = asyncio.Event()

    async def failing_loader() -> EventData:
        await release.wait()
        raise EventDataError(ErrorKind.fetch, "boom")

    cache = EventDataCache(failing_loader, ttl_seconds=300, clock=FakeClock())
    waiter = asyncio.create_task(cache.get_snapshot())
    await asyncio.sleep(0)
    waiter.cancel()
    release.set()
    for _ in range(3):
        await asyncio.sleep(0)

    del waiter
    gc.collect()

    assert "exception was never retrieved" not in caplog.text
