"""Shared fixtures: HTML builders and an in-memory FunPay site behind httpx.MockTransport."""

import html
import json
from typing import Optional
from urllib.parse import parse_qs

import httpx
import pytest

from funpay_chat import AsyncFunPay

BASE_URL = "https://funpay.test"


def landing_page(token: Optional[str] = "tok123") -> str:
    data: dict = {"userId": 42, "locale": "en"}
    if token is not None:
        data["csrf-token"] = token
    return f'<html><body data-app-data="{html.escape(json.dumps(data))}"><p>hi</p></body></html>'


def chat_list_page(*chat_ids: str) -> str:
    items = "".join(
        f'<a href="{BASE_URL}/chat/?node={cid}" class="contact-item" data-id="{cid}">'
        f'<div class="media-user-name">user {cid}</div></a>'
        for cid in chat_ids
    )
    return f'<html><body><div class="contact-list custom-scroll">{items}</div></body></html>'


def message_item(msg_id: str, author: Optional[str], text: str) -> str:
    author_html = (
        f'<div class="media-user-name"><a href="#" class="chat-msg-author-link">{author}</a></div>'
        if author is not None else ""
    )
    return (
        f'<div class="chat-msg-item" id="{msg_id}">{author_html}'
        f'<div class="chat-msg-body"><div class="chat-msg-text">{text}</div></div></div>'
    )


def chat_page(*messages: tuple) -> str:
    items = "".join(message_item(*m) for m in messages)
    return f'<html><body><div class="chat-message-list">{items}</div></body></html>'


class FakeSite:
    """Serves configurable pages and records every request."""

    def __init__(self) -> None:
        self.landing = landing_page()
        self.chat_list = chat_list_page()
        self.chats: dict[str, str] = {}
        self.runner_response = '{"response":false}'
        self.fail_paths: dict[str, int] = {}
        self.requests: list[httpx.Request] = []
        self.posts: list[dict[str, list[str]]] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path in self.fail_paths:
            return httpx.Response(self.fail_paths[path], text="server error")
        if request.method == "POST" and path == "/runner/":
            self.posts.append(parse_qs(request.content.decode()))
            return httpx.Response(200, text=self.runner_response)
        if path == "/":
            return httpx.Response(200, text=self.landing)
        if path == "/chat/":
            node = request.url.params.get("node")
            if node is None:
                return httpx.Response(200, text=self.chat_list)
            return httpx.Response(200, text=self.chats.get(node, chat_page()))
        return httpx.Response(404, text="not found")

    def paths(self) -> list[str]:
        return [r.url.raw_path.decode("ascii") for r in self.requests]


@pytest.fixture
def site() -> FakeSite:
    return FakeSite()


@pytest.fixture
def client(site: FakeSite) -> AsyncFunPay:
    return AsyncFunPay("secret-key", base_url=BASE_URL, transport=httpx.MockTransport(site.handler))
