"""
Chat scanner — locates the active chat and its latest message in scraped pages.

A missing container is "nothing found", never an error.
"""

from typing import Optional

from bs4 import BeautifulSoup, Tag

from funpay_chat.models.message import ScannedMessage

CONTACT_LIST = "div.contact-list"
MESSAGE_ITEMS = "div.chat-message-list div.chat-msg-item"
AUTHOR_LINK = "div.media-user-name a.chat-msg-author-link"
MESSAGE_TEXT = "div.chat-msg-body div.chat-msg-text"


def find_active_chat(doc: BeautifulSoup) -> str:
    """Chat id of the first contact in the list, or "" if there is none.

    The list is ordered by activity, so the first entry is taken as the most
    recently active chat. This is a heuristic: it is not necessarily the chat
    a message was addressed to.
    """
    contacts = doc.select_one(CONTACT_LIST)
    if contacts is None:
        return ""
    first = contacts.find("a")
    if not isinstance(first, Tag):
        return ""
    return str(first.get("data-id", "") or "")


def find_latest_message(doc: BeautifulSoup) -> Optional[Tag]:
    """Last message item in document order, or None."""
    items = doc.select(MESSAGE_ITEMS)
    return items[-1] if items else None


def _text_of(node: Tag, selector: str) -> str:
    found = node.select_one(selector)
    return found.get_text().strip() if found is not None else ""


def parse_message_node(node: Tag) -> ScannedMessage:
    # System and anonymized entries have no author link
    return ScannedMessage(
        id=str(node.get("id", "") or ""),
        author=_text_of(node, AUTHOR_LINK),
        text=_text_of(node, MESSAGE_TEXT),
    )
