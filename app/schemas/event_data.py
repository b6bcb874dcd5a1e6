from __future__ import annotations

from pydantic import BaseModel


class GuestBooking(BaseModel):
    model_config = {"frozen": True}

    phone: str = ""
    name: str = ""
    hotel_name: str = ""
    room_no: str = ""
    notes: str = ""


class Hotel(BaseModel):
    model_config = {"frozen": True}

    name: str = ""
    type: str = ""
    address: str = ""
    map_link: str = ""
    price_range: str = ""
    booking_link: str = ""
    contact_person: str = ""
    contact_phone: str = ""
    notes: str = ""


class WeddingEvent(BaseModel):
    model_config = {"frozen": True}

    key: str = ""
    name: str = ""
    date: str = ""
    time: str = ""
    venue: str = ""
    address: str = ""
    map_link: str = ""
    dress_code: str = ""


class Stay(BaseModel):
    model_config = {"frozen": True}

    hotel_name: str
    address: str = ""
    map_link: str = ""
    check_in: str = ""
    check_out: str = ""
    contact_person: str = ""
    contact_phone: str = ""


class EmergencyContact(BaseModel):
    model_config = {"frozen": True}

    name: str
    phone: str = ""


class EventData(BaseModel):
    """Immutable snapshot of everything loaded from the sheets."""

    model_config = {"frozen": True}

    couple_names: str = ""
    wedding_name: str = ""
    city: str = ""
    events: tuple[WeddingEvent, ...] = ()
    hotels: tuple[Hotel, ...] = ()
    guests: tuple[GuestBooking, ...] = ()
    stay: Stay | None = None
    emergency_contact: EmergencyContact | None = None

    def find_hotel(self, name: str | None) -> Hotel | None:
        """Case-insensitive lookup by hotel name (the guest-booking join key)."""
        if not name:
            return None
        wanted = name.lower()
        for hotel in self.hotels:
            if hotel.name.lower() == wanted:
                return hotel
        return None
