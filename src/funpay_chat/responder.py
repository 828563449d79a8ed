"""
Responder — posts outgoing chat messages to /runner/.
"""

import json

from funpay_chat.errors import NotAuthenticated
from funpay_chat.session import SessionManager
from funpay_chat.transport.http import HttpClient

RUNNER_PATH = "/runner/"


def build_message_form(chat_id: str, text: str, csrf_token: str) -> dict[str, str]:
    request = {"action": "chat_message", "data": {"node": chat_id, "content": text}}
    return {
        "request": json.dumps(request, ensure_ascii=False, separators=(",", ":")),
        "csrf_token": csrf_token,
    }


class Responder:
    def __init__(self, http: HttpClient, session: SessionManager):
        self._http = http
        self._session = session

    async def send(self, chat_id: str, text: str) -> str:
        """Send `text` to `chat_id` and return the raw response body.

        The body is not inspected: an application-level rejection looks the
        same as success to the caller.
        """
        token = self._session.csrf_token
        if not token:
            raise NotAuthenticated()
        return await self._http.post_form(RUNNER_PATH, build_message_form(chat_id, text, token))
