"""Mock-transport helpers for webhook tests."""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx

DONATION_URL = "https://hooks.test/webhook/donation"

# Valid JSON that the stdlib decoder still refuses.
HUGE_INTEGER_BODY = "1" * 5000
DEEPLY_NESTED_BODY = "[" * 100_000 + "]" * 100_000


class RecordingTransport:
    """Wraps a handler in `httpx.MockTransport` and keeps every request seen."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []
        self._handler = handler
        self.transport = httpx.MockTransport(self._record)

    def _record(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self.transport)

    @property
    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


def json_response(status_code: int, payload: object) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload)

    return handler


def text_response(status_code: int, text: str) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=text)

    return handler


def raising(exc_factory: Callable[[httpx.Request], Exception]) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        raise exc_factory(request)

    return handler
