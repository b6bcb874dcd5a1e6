import logging

from app.mappers.booking_resolver import LookupStatus, resolve_booking
from app.mappers.prompt_builder import (
    build_event_context,
    build_system_prompt,
    build_user_prompt,
)
from app.mappers.reply_builder import (
    COMPLETION_FALLBACK_REPLY,
    NO_BOOKING_REPLY,
    build_booking_reply,
)
from app.services.claude import ClaudeService
from app.services.event_data import EventDataCache

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 500


class ChatService:
    def __init__(
        self,
        cache: EventDataCache,
        claude: ClaudeService,
        max_message_length: int = MAX_MESSAGE_LENGTH,
    ):
        self._cache = cache
        self._claude = claude
        self._max_message_length = max_message_length

    async def reply(self, message: str) -> str:
        message = message[: self._max_message_length]
        # One snapshot per request: lookup and hotel join must agree
        data = await self._cache.get_snapshot()

        lookup = resolve_booking(message, data.guests)

        if lookup.status == LookupStatus.not_found:
            logger.info("No booking for phone ending %s", lookup.phone[-4:])
            return NO_BOOKING_REPLY

        if lookup.status == LookupStatus.found:
            guest = lookup.guest
            if lookup.match_count > 1:
                logger.warning(
                    "Phone ending %s matches %d guests, using %s",
                    lookup.phone[-4:], lookup.match_count, guest.name,
                )
            hotel = data.find_hotel(guest.hotel_name)
            if hotel is None and guest.hotel_name:
                logger.warning("Hotel %r for guest %s not in hotel list", guest.hotel_name, guest.name)
            return build_booking_reply(guest, hotel)

        system_prompt = build_system_prompt(data.wedding_name)
        user_prompt = build_user_prompt(build_event_context(data), message)
        text = await self._claude.complete(system_prompt, user_prompt)
        return text or COMPLETION_FALLBACK_REPLY
