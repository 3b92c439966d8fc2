# services/chat.py
"""Chat completion backends for the /api/chat endpoint."""
from __future__ import annotations

import logging
from typing import Protocol, Sequence

from anthropic import AsyncAnthropic, APIError

from services import config

logger = logging.getLogger("uvicorn")


class ChatBackendError(RuntimeError):
    """The upstream completion service failed."""


class ChatBackend(Protocol):
    async def complete(self, messages: Sequence[dict[str, str]]) -> str: ...


class AnthropicChatBackend:
    def __init__(self, client: AsyncAnthropic, model: str, max_tokens: int, system: str):
        self.client = client
        self.model = model
        self.max_tokens = max_tokens
        self.system = system

    async def complete(self, messages: Sequence[dict[str, str]]) -> str:
        try:
            response = await self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                system=self.system,
                messages=list(messages),
            )
        except APIError as e:
            logger.warning(f"[chat] upstream error: {e}")
            raise ChatBackendError(str(e)) from e
        return "".join(block.text for block in response.content if block.type == "text")


def create_chat_backend() -> ChatBackend | None:
    """Backend from configuration, or None when no API key is configured."""
    if not config.ANTHROPIC_API_KEY:
        return None
    return AnthropicChatBackend(
        AsyncAnthropic(api_key=config.ANTHROPIC_API_KEY),
        model=config.CHAT_MODEL,
        max_tokens=config.CHAT_MAX_TOKENS,
        system=config.CHAT_SYSTEM_PROMPT,
    )
