from app.schemas.event_data import GuestBooking, Hotel

NO_BOOKING_REPLY = (
    "<strong>Hotel Booking:</strong>\n"
    "Aapke liye abhi tak koi hotel booking nahi hui hai.\n"
    "Agar aapko stay arrange karwana hai, please directly family se contact karein. \U0001f642"
)

COMPLETION_FALLBACK_REPLY = "Sorry, abhi main answer nahi de paa rahi hoon."

DATA_ERROR_REPLY = (
    "Oops, Babli Bua ko data load karne mein issue aa gaya. "
    "Please thodi der baad try karo."
)

GENERIC_ERROR_REPLY = (
    "Oops, Babli Bua abhi jawab nahi de paa rahi. "
    "Please thodi der baad try karo."
)

_DEFAULT_NOTES = "Enjoy your stay! \U0001f60a"


def _label(name: str, value: str) -> str:
    return f"<strong>{name}:</strong> {value}"


def build_booking_reply(guest: GuestBooking, hotel: Hotel | None) -> str:
    hotel = hotel or Hotel()
    contact = f"{hotel.contact_person or 'N/A'} ({hotel.contact_phone or 'N/A'})"
    lines = [
        f"<strong>Booking Found for {guest.name}:</strong>",
        _label("Hotel", hotel.name or guest.hotel_name or "N/A"),
        _label("Room", guest.room_no or "N/A"),
        _label("Address", hotel.address or "Address not available"),
        _label("Map", hotel.map_link or "Map link not available"),
        _label("Contact", contact),
        _label("Notes", guest.notes or hotel.notes or _DEFAULT_NOTES),
    ]
    return "\n".join(lines)
