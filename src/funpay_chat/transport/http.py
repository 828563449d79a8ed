"""
HTTP client for funpay.com — page fetching and form posting.

Every request carries the golden key cookie and a desktop browser
User-Agent; the site rejects clients without a convincing identity.
"""

import logging
from typing import Any, Optional

import httpx
from bs4 import BeautifulSoup

from funpay_chat.errors import NetworkError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://funpay.com"
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/128.0.0.0 Safari/537.36"
)


class HttpClient:
    def __init__(
        self,
        golden_key: str,
        base_url: str = DEFAULT_BASE_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._golden_key = golden_key
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={"User-Agent": USER_AGENT, "Cookie": f"golden_key={golden_key};"},
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            resp = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise NetworkError(f"{method} {path} failed: {e}") from e
        if resp.status_code >= 400:
            raise NetworkError(f"HTTP {resp.status_code}: {resp.text[:200]}", status_code=resp.status_code)
        logger.debug("%s %s -> %s", method, resp.request.url, resp.status_code)
        return resp

    async def get_text(self, path: str, params: Optional[dict[str, str]] = None) -> str:
        resp = await self._request("GET", path, params=params)
        return resp.text

    async def get_document(self, path: str, params: Optional[dict[str, str]] = None) -> BeautifulSoup:
        """GET a page and return it as a parsed document tree."""
        return BeautifulSoup(await self.get_text(path, params=params), "html.parser")

    async def post_form(self, path: str, fields: dict[str, str]) -> str:
        """POST an application/x-www-form-urlencoded body, return the raw response text."""
        resp = await self._request("POST", path, data=fields)
        return resp.text

    async def close(self) -> None:
        await self._client.aclose()
