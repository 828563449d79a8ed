"""
AsyncFunPay — main client. One poll cycle fetches the chat list, then the
chat detail, then tracks the latest message; nothing runs in parallel.
"""

import logging
from typing import Optional

import httpx

from funpay_chat.errors import FunPayError
from funpay_chat.models.message import PollResult
from funpay_chat.responder import Responder
from funpay_chat.scanner import find_active_chat, find_latest_message, parse_message_node
from funpay_chat.session import SessionManager
from funpay_chat.tracker import DEFAULT_IGNORED_AUTHOR, MessageTracker
from funpay_chat.transport.http import DEFAULT_BASE_URL, HttpClient

logger = logging.getLogger(__name__)

CHAT_LIST_PATH = "/chat/"


class AsyncFunPay:
    """Async FunPay chat client."""

    def __init__(
        self,
        golden_key: str,
        base_url: str = DEFAULT_BASE_URL,
        ignored_author: Optional[str] = DEFAULT_IGNORED_AUTHOR,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.http = HttpClient(golden_key, base_url=base_url, transport=transport)
        self.session = SessionManager(self.http)
        self.tracker = MessageTracker(ignored_author=ignored_author)
        self.responder = Responder(self.http, self.session)

    async def __aenter__(self) -> "AsyncFunPay":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    @property
    def csrf_token(self) -> Optional[str]:
        return self.session.csrf_token

    async def init(self) -> str:
        """Obtain the csrf token. AuthError and NetworkError propagate."""
        return await self.session.init()

    async def check_chats(self) -> PollResult:
        """Run one poll cycle. Never raises; failures come back as PollResult.failed."""
        try:
            chat_list = await self.http.get_document(CHAT_LIST_PATH)
            chat_id = find_active_chat(chat_list)
            if not chat_id:
                return PollResult.no_update()

            chat_page = await self.http.get_document(CHAT_LIST_PATH, params={"node": chat_id})
            node = find_latest_message(chat_page)
            scanned = parse_message_node(node) if node is not None else None
        except FunPayError as e:
            logger.warning("Chat poll failed: %s", e)
            return PollResult.failed(e)
        except Exception as e:
            logger.exception("Unexpected error while scanning chats")
            return PollResult.failed(e)

        message = self.tracker.observe(chat_id, scanned)
        if message is None:
            return PollResult.no_update()
        logger.debug("New message %s from %s in chat %s", message.id, message.author, message.chat_id)
        return PollResult.found(message)

    async def send_message(self, chat_id: str, text: str) -> str:
        return await self.responder.send(chat_id, text)

    def get_chat_name(self, chat_id: str) -> str:
        return self.tracker.get_chat_name(chat_id)

    async def close(self) -> None:
        await self.http.close()
