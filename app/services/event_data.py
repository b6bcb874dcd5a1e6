import asyncio
import logging
import time
from collections.abc import Awaitable, Callable

from app.exceptions.custom import ErrorKind, EventDataError
from app.mappers.event_data_mapper import build_event_data
from app.schemas.event_data import EventData
from app.services.sheets import SheetsService

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 5 * 60


class EventDataLoader:
    """Pulls the four sheets and assembles a fresh snapshot."""

    def __init__(
        self,
        sheets: SheetsService,
        meta_url: str,
        events_url: str,
        hotels_url: str = "",
        guests_url: str = "",
    ):
        self._sheets = sheets
        self._meta_url = meta_url
        self._events_url = events_url
        self._hotels_url = hotels_url
        self._guests_url = guests_url

    async def load(self) -> EventData:
        if not self._meta_url or not self._events_url:
            raise EventDataError(
                ErrorKind.configuration,
                "META_CSV_URL or EVENTS_CSV_URL is not configured",
            )

        meta_rows = await self._sheets.fetch_records(self._meta_url)
        event_rows = await self._sheets.fetch_records(self._events_url)

        hotel_rows: list[dict[str, str]] = []
        if self._hotels_url:
            hotel_rows = await self._sheets.fetch_records(self._hotels_url)

        guest_rows: list[dict[str, str]] = []
        if self._guests_url:
            guest_rows = await self._sheets.fetch_records(self._guests_url)

        data = build_event_data(meta_rows, event_rows, hotel_rows, guest_rows)
        logger.info(
            "Built event data: %d events, %d hotels, %d guests",
            len(data.events), len(data.hotels), len(data.guests),
        )
        return data


def _retrieve_exception(task: asyncio.Task) -> None:
    if not task.cancelled():
        task.exception()


class EventDataCache:
    def __init__(
        self,
        loader: Callable[[], Awaitable[EventData]],
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._loader = loader
        self._ttl = ttl_seconds
        self._clock = clock
        self._snapshot: EventData | None = None
        self._loaded_at = 0.0
        self._refresh: asyncio.Task[EventData] | None = None

    def _is_fresh(self) -> bool:
        return (
            self._snapshot is not None
            and self._clock() - self._loaded_at < self._ttl
        )

    async def get_snapshot(self) -> EventData:
        if self._is_fresh():
            return self._snapshot

        # Callers that miss together wait on the same rebuild
        if self._refresh is None:
            self._refresh = asyncio.create_task(self._rebuild())
            # Every waiter may be cancelled before a failure lands
            self._refresh.add_done_callback(_retrieve_exception)
        return await asyncio.shield(self._refresh)

    def invalidate(self) -> None:
        self._snapshot = None

    async def _rebuild(self) -> EventData:
        started = self._clock()
        try:
            snapshot = await self._loader()
            self._snapshot, self._loaded_at = snapshot, started
            return snapshot
        finally:
            self._refresh = None
