"""
Message tracker — deduplicates the latest message and resolves its author.

Holds one global last-seen message id (not keyed by chat) and a chat-id to
author-name cache that only ever grows.
"""

import logging
from typing import Optional

from funpay_chat.models.message import Message, ScannedMessage

logger = logging.getLogger(__name__)

DEFAULT_IGNORED_AUTHOR = "Brissal"
UNKNOWN_CHAT_NAME = "Unknown"


class MessageTracker:
    def __init__(self, ignored_author: Optional[str] = DEFAULT_IGNORED_AUTHOR):
        self._ignored_author = ignored_author
        self._chat_names: dict[str, str] = {}
        self._last_message_id = ""

    @property
    def last_message_id(self) -> str:
        return self._last_message_id

    @property
    def chat_names(self) -> dict[str, str]:
        return dict(self._chat_names)

    def get_chat_name(self, chat_id: str) -> str:
        return self._chat_names.get(chat_id, UNKNOWN_CHAT_NAME)

    def observe(self, chat_id: str, scanned: Optional[ScannedMessage]) -> Optional[Message]:
        """Return the message if it is new and attributable, else None.

        A new message id is consumed even when the message is not emitted,
        so a blank-author system entry is dropped once instead of forever
        reprocessed.
        """
        if not chat_id or scanned is None:
            return None
        if scanned.id == self._last_message_id:
            return None
        self._last_message_id = scanned.id

        author = scanned.author
        if author:
            self._chat_names[chat_id] = author
        else:
            author = self._chat_names.get(chat_id, "")

        if not author:
            logger.debug("Dropping message %s in chat %s: no author", scanned.id, chat_id)
            return None
        if author == self._ignored_author:
            return None
        return Message(id=scanned.id, author=author, text=scanned.text, chat_id=chat_id)
