from app.schemas.event_data import (
    EmergencyContact,
    EventData,
    GuestBooking,
    Hotel,
    Stay,
    WeddingEvent,
)

Row = dict[str, str]


def _get(row: Row, key: str) -> str:
    return row.get(key) or ""


def build_meta(rows: list[Row]) -> dict[str, str]:
    """Collapse field/value rows into a dict; later rows win."""
    meta: dict[str, str] = {}
    for row in rows:
        field = _get(row, "field")
        if field:
            meta[field] = _get(row, "value")
    return meta


def map_event(row: Row) -> WeddingEvent:
    return WeddingEvent(
        key=_get(row, "key"),
        name=_get(row, "name"),
        date=_get(row, "date"),
        time=_get(row, "time"),
        venue=_get(row, "venue"),
        address=_get(row, "address"),
        map_link=_get(row, "mapLink"),
        dress_code=_get(row, "dressCode"),
    )


def map_hotel(row: Row) -> Hotel:
    return Hotel(
        name=_get(row, "name"),
        type=_get(row, "type"),
        address=_get(row, "address"),
        map_link=_get(row, "mapLink"),
        price_range=_get(row, "priceRange"),
        booking_link=_get(row, "bookingLink"),
        contact_person=_get(row, "contactPerson"),
        contact_phone=_get(row, "contactPhone"),
        notes=_get(row, "notes"),
    )


def map_guest(row: Row) -> GuestBooking:
    return GuestBooking(
        phone=_get(row, "phone"),
        name=_get(row, "name"),
        hotel_name=_get(row, "hotelName"),
        room_no=_get(row, "roomNo"),
        notes=_get(row, "notes"),
    )


def _build_stay(meta: dict[str, str]) -> Stay | None:
    if not meta.get("hotelName"):
        return None
    return Stay(
        hotel_name=meta["hotelName"],
        address=meta.get("hotelAddress", ""),
        map_link=meta.get("hotelMapLink", ""),
        check_in=meta.get("hotelCheckIn", ""),
        check_out=meta.get("hotelCheckOut", ""),
        contact_person=meta.get("hotelContactPerson", ""),
        contact_phone=meta.get("hotelContactPhone", ""),
    )


def _build_emergency_contact(meta: dict[str, str]) -> EmergencyContact | None:
    if not meta.get("emergencyName"):
        return None
    return EmergencyContact(
        name=meta["emergencyName"],
        phone=meta.get("emergencyPhone", ""),
    )


def build_event_data(
    meta_rows: list[Row],
    event_rows: list[Row],
    hotel_rows: list[Row],
    guest_rows: list[Row],
) -> EventData:
    meta = build_meta(meta_rows)
    return EventData(
        couple_names=meta.get("coupleNames", ""),
        wedding_name=meta.get("weddingName", ""),
        city=meta.get("city", ""),
        events=tuple(map_event(r) for r in event_rows),
        hotels=tuple(map_hotel(r) for r in hotel_rows),
        guests=tuple(map_guest(r) for r in guest_rows),
        stay=_build_stay(meta),
        emergency_contact=_build_emergency_contact(meta),
    )
