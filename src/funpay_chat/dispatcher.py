"""
Command dispatcher — polls for new messages and answers exact-match commands.
"""

import asyncio
import logging
from typing import Mapping, Optional

from funpay_chat.client import AsyncFunPay
from funpay_chat.errors import NetworkError
from funpay_chat.models.message import FOUND, Message, PollResult

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL_S = 1.0


class CommandDispatcher:
    def __init__(
        self,
        client: AsyncFunPay,
        commands: Mapping[str, str],
        poll_interval: float = DEFAULT_POLL_INTERVAL_S,
    ):
        self._client = client
        self._commands = dict(commands)
        self._poll_interval = poll_interval

    async def handle(self, message: Message) -> bool:
        """Reply if the text is a known command. Matching is exact and case-sensitive."""
        response = self._commands.get(message.text)
        if response is None:
            return False
        try:
            await self._client.send_message(message.chat_id, response)
        except NetworkError as e:
            logger.warning("Failed to answer %r in chat %s: %s", message.text, message.chat_id, e)
            return False
        logger.info("Answered command %r in chat %s (%s)", message.text, message.chat_id, message.author)
        return True

    async def run_once(self) -> PollResult:
        result = await self._client.check_chats()
        if result.status == FOUND and result.message is not None:
            await self.handle(result.message)
        return result

    async def run(self, max_cycles: Optional[int] = None) -> None:
        """Init the session, then poll on a fixed interval.

        Init errors propagate; poll-cycle errors are logged and the loop continues.
        """
        if not self._client.csrf_token:
            await self._client.init()
        logger.info("Client activated, watching chats every %.1fs", self._poll_interval)
        cycles = 0
        while max_cycles is None or cycles < max_cycles:
            await self.run_once()
            cycles += 1
            if max_cycles is None or cycles < max_cycles:
                await asyncio.sleep(self._poll_interval)
