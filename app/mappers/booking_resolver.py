import re
from collections.abc import Sequence
from enum import StrEnum

from pydantic import BaseModel

from app.schemas.event_data import GuestBooking

# Optional leading "+", then 10-13 digits (with or without country code)
_PHONE_RE = re.compile(r"\+?[0-9]{10,13}")
_NON_DIGIT_RE = re.compile(r"[^0-9]")


class LookupStatus(StrEnum):
    no_phone = "no_phone"
    not_found = "not_found"
    found = "found"


class BookingLookup(BaseModel):
    status: LookupStatus
    phone: str | None = None  # normalized query
    guest: GuestBooking | None = None
    match_count: int = 0


def normalize_phone(raw: str | None) -> str:
    if not raw:
        return ""
    return _NON_DIGIT_RE.sub("", raw)


def extract_phone(message: str) -> str | None:
    """Return the first phone-like substring of the message, as written."""
    match = _PHONE_RE.search(message or "")
    return match.group(0) if match else None


def resolve_booking(message: str, guests: Sequence[GuestBooking]) -> BookingLookup:
    """Find the guest booking for the phone number mentioned in a message.

    A guest matches when its normalized phone ends with the normalized
    query, so "9876543210" finds a guest stored as "+91-9876543210" but not
    the other way around. The first match in roster order wins.
    """
    raw = extract_phone(message)
    if raw is None:
        return BookingLookup(status=LookupStatus.no_phone)

    query = normalize_phone(raw)
    matches = [
        g for g in guests
        if (stored := normalize_phone(g.phone)) and stored.endswith(query)
    ]
    if not matches:
        return BookingLookup(status=LookupStatus.not_found, phone=query)

    return BookingLookup(
        status=LookupStatus.found,
        phone=query,
        guest=matches[0],
        match_count=len(matches),
    )
