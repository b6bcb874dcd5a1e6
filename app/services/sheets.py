import csv
import io
import logging

import httpx

from app.exceptions.custom import ErrorKind, EventDataError

logger = logging.getLogger(__name__)


def parse_csv(text: str) -> list[dict[str, str]]:
    """Parse CSV with a header row into trimmed, field-keyed records.

    Missing cells become "", cells past the header are dropped and
    rows with no content at all are skipped.
    """
    reader = csv.reader(io.StringIO(text.lstrip("\ufeff")))
    header: list[str] | None = None
    records: list[dict[str, str]] = []

    for row in reader:
        cells = [c.strip() for c in row]
        if not any(cells):
            continue
        if header is None:
            header = cells
            continue
        record = {
            name: cells[idx] if idx < len(cells) else ""
            for idx, name in enumerate(header)
            if name
        }
        records.append(record)

    return records


class SheetsService:
    def __init__(self, client: httpx.AsyncClient):
        self._client = client

    async def fetch_records(self, url: str) -> list[dict[str, str]]:
        try:
            resp = await self._client.get(url, follow_redirects=True)
        except httpx.HTTPError as exc:
            raise EventDataError(
                ErrorKind.fetch, f"Failed to fetch CSV from {url}: {exc!r}"
            ) from exc

        if resp.status_code >= 400:
            raise EventDataError(
                ErrorKind.fetch,
                f"Failed to fetch CSV from {url}: {resp.status_code}",
                status_code=resp.status_code,
            )

        try:
            records = parse_csv(resp.text)
        except csv.Error as exc:
            raise EventDataError(
                ErrorKind.parse, f"Malformed CSV from {url}: {exc}"
            ) from exc

        logger.debug("Loaded %d rows from %s", len(records), url)
        return records
