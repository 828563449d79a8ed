"""
Session manager — obtains the CSRF token from the landing page.

The token lives in an HTML-entity-encoded JSON blob:
    <body data-app-data="{&quot;csrf-token&quot;:&quot;...&quot;}">
It is not refreshed automatically; call init() again if sends go stale.
"""

import html
import logging
from typing import Optional

from pydantic import ValidationError

from funpay_chat.errors import AuthError
from funpay_chat.models.session import AppData
from funpay_chat.transport.http import HttpClient

logger = logging.getLogger(__name__)

APP_DATA_MARKER = 'data-app-data="'


def extract_app_data(page: str) -> AppData:
    start = page.find(APP_DATA_MARKER)
    if start == -1:
        raise AuthError("data-app-data not found on the landing page")
    start += len(APP_DATA_MARKER)
    end = page.find('"', start)
    if end == -1:
        raise AuthError("data-app-data is malformed")
    try:
        return AppData.model_validate_json(html.unescape(page[start:end]))
    except ValidationError as e:
        raise AuthError(f"data-app-data is not valid JSON: {e}") from e


class SessionManager:
    def __init__(self, http: HttpClient):
        self._http = http
        self._csrf_token: Optional[str] = None

    @property
    def csrf_token(self) -> Optional[str]:
        return self._csrf_token

    @property
    def authenticated(self) -> bool:
        return bool(self._csrf_token)

    async def init(self) -> str:
        """Fetch `/` and store the csrf token. Network errors propagate unchanged."""
        page = await self._http.get_text("/")
        app_data = extract_app_data(page)
        if not app_data.csrf_token:
            raise AuthError("csrf-token not found in data-app-data")
        self._csrf_token = app_data.csrf_token
        logger.info("Session initialized")
        return self._csrf_token
