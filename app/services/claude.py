import logging

import anthropic
from anthropic import AsyncAnthropic

from app.exceptions.custom import CompletionError

logger = logging.getLogger(__name__)

MODEL = "claude-sonnet-4-20250514"
MAX_TOKENS = 400


class ClaudeService:
    def __init__(self, api_key: str, timeout: float = 30.0):
        self._client = AsyncAnthropic(api_key=api_key, timeout=timeout, max_retries=1)

    async def complete(self, system_prompt: str, user_prompt: str) -> str | None:
        """Return the text of the first content block, or None when blank."""
        try:
            response = await self._client.messages.create(
                model=MODEL,
                max_tokens=MAX_TOKENS,
                system=system_prompt,
                messages=[{"role": "user", "content": user_prompt}],
            )
        except anthropic.APIStatusError as exc:
            raise CompletionError(exc.message, status_code=exc.status_code) from exc
        except anthropic.APIError as exc:
            raise CompletionError(exc.message) from exc

        if not response.content:
            logger.warning("Claude returned no content blocks")
            return None
        text = getattr(response.content[0], "text", None)
        return text.strip() if text and text.strip() else None
