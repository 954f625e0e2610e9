"""
Mock chat panel.

There is no model behind this: every prompt gets the same canned reply after
a fixed delay. The reply is a coroutine so the caller can await it and knows
exactly when the conversation has settled.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import List, Optional

from config import ChatConfig as Config

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChatMessage:
    sender: str  # "system" | "user" | "assistant"
    text: str


class ChatSession:
    """In-memory conversation with a delayed demo reply."""

    def __init__(self,
                 welcome: Optional[str] = None,
                 reply_text: Optional[str] = None,
                 reply_delay: Optional[float] = None):
        # Read config at call time so start-up overrides apply
        if welcome is None:
            welcome = Config.WELCOME
        if reply_text is None:
            reply_text = Config.DEMO_REPLY
        if reply_delay is None:
            reply_delay = Config.REPLY_DELAY_SECONDS
        self.reply_text = reply_text
        self.reply_delay = reply_delay
        self.messages: List[ChatMessage] = [ChatMessage("system", welcome)]

    def post(self, prompt: str) -> Optional[ChatMessage]:
        """Append a user message. Blank prompts are ignored."""
        if not prompt or not prompt.strip():
            return None
        message = ChatMessage("user", prompt)
        self.messages.append(message)
        return message

    async def reply(self) -> ChatMessage:
        await asyncio.sleep(self.reply_delay)
        message = ChatMessage("assistant", self.reply_text)
        self.messages.append(message)
        log.info("Chat reply sent (%d messages)", len(self.messages))
        return message

    async def send(self, prompt: str) -> Optional[ChatMessage]:
        """Post a prompt and wait for the reply; None if the prompt was blank."""
        if self.post(prompt) is None:
            return None
        return await self.reply()
