from app.schemas.event_data import EventData

_SYSTEM_PROMPT_TEMPLATE = """\
You are "Babli", a friendly AI wedding assistant for the {wedding_name}.
You answer only questions about this wedding:

- Function dates, timings, venues, dress code
- Hotel stay details and general hotel options
- How to reach venues and hotels (use map links)
- Emergency/main contact person

Formatting rules (very important):
- Reply in a clean, multi-line format.
- Use simple HTML <strong> only for labels like:
  <strong>Mehendi Ceremony:</strong>
  <strong>Date:</strong> 10 February 2025
  <strong>Time:</strong> 11:00 AM
  <strong>Venue:</strong> Green Leaf Lawn, Jaipur
  <strong>Dress code:</strong> Green / Yellow Indian ethnic
  <strong>Map:</strong> https://maps.google.com/...
- For hotel info, you can respond like:
  <strong>Hotel:</strong> Hotel Sunshine (Main Hotel)
  <strong>Address:</strong> MI Road, Jaipur
  <strong>Price range:</strong> ₹3000–₹4500 per night
  <strong>Booking link:</strong> https://bookinglink.com/...
- Do NOT use markdown (**bold**, [links](url)) or other HTML tags.
- No bullet symbols like •. Just plain text with line breaks.
- Use light Hinglish (simple Hindi + English), friendly tone.
- Only include information relevant to the guest's question.
- If the question is not about this wedding, politely say you only know wedding details."""

_USER_PROMPT_TEMPLATE = """\
Here are all the current wedding details (from Google Sheets):

{context}

Guest message: "{message}"

Now answer as per the rules."""


def build_event_context(data: EventData) -> str:
    """Render the schedule, stay and hotel options as a plain-text document.

    Guest bookings are deliberately left out; they are only reachable
    through the phone lookup.
    """
    lines: list[str] = [
        f"Wedding: {data.wedding_name} in {data.city}",
        f"Couple: {data.couple_names}",
        "",
        "EVENT SCHEDULE:",
    ]
    for idx, e in enumerate(data.events, start=1):
        lines.append(
            f"{idx}. {e.name} ({e.key}) on {e.date} at {e.time}, "
            f"Venue: {e.venue}, Address: {e.address}, Map: {e.map_link}, "
            f"Dress code: {e.dress_code}"
        )

    lines.append("")
    if data.stay:
        s = data.stay
        lines.append(
            f"STAY: Hotel {s.hotel_name}, {s.address}, Map: {s.map_link}, "
            f"Check-in: {s.check_in}, Check-out: {s.check_out}, "
            f"Contact: {s.contact_person} ({s.contact_phone})."
        )

    if data.emergency_contact:
        c = data.emergency_contact
        lines.append(f"EMERGENCY CONTACT: {c.name}, Phone: {c.phone}.")

    lines.append("")
    if data.hotels:
        lines.append("HOTEL OPTIONS:")
        for idx, h in enumerate(data.hotels, start=1):
            lines.append(
                f"{idx}. {h.name} ({h.type or 'Hotel'}) - Address: {h.address}. "
                f"Map: {h.map_link}. Price: {h.price_range}. "
                f"Booking: {h.booking_link}. "
                f"Contact: {h.contact_person} ({h.contact_phone}). Notes: {h.notes}"
            )

    return "\n".join(lines)


def build_system_prompt(wedding_name: str) -> str:
    return _SYSTEM_PROMPT_TEMPLATE.format(wedding_name=wedding_name)


def build_user_prompt(context: str, message: str) -> str:
    return _USER_PROMPT_TEMPLATE.format(context=context, message=message)
