"""
Pytest configuration and fixtures for extendz tests.
"""
from __future__ import annotations

import json
import logging
import threading
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional

import httpx
import pytest

from extendz import ExtendClient

TESTDATA = Path(__file__).parent / "testdata"

BASE_URL = "https://api.test.paywithextend.com"
TEST_EMAIL = "_@gmail.com"
TEST_PASSWORD = "P4$sW0rD"
TEST_TOKEN = "abc123DEF456ghi789JKL012"
TEST_REFRESH_TOKEN = "ref123DEF456ghi789JKL012"
TEST_VIRTUAL_CARD_ID = "vc_1234"

Handler = Callable[[httpx.Request], httpx.Response]


def load_testdata(name: str) -> Any:
    """Load a JSON payload from tests/testdata."""
    return json.loads((TESTDATA / name).read_text())


def request_json(request: httpx.Request) -> Any:
    """Decode the JSON body of a recorded request, or None when it has none."""
    if not request.content:
        return None
    return json.loads(request.content)


def wait_until(predicate: Callable[[], bool], timeout: float = 2.0, interval: float = 0.005) -> bool:
    """Poll ``predicate`` until it returns True or ``timeout`` elapses."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(interval)
    return predicate()


@dataclass
class _MockEntry:
    method: str
    target: str
    handler: Handler
    repeat: bool = False


class FakeExtendAPI:
    """In-process Extend API served through ``httpx.MockTransport``.

    Responses are matched on method and path (including the query string).
    Queued entries are consumed in order; an entry added with ``repeat=True``
    answers every matching request. Sign in, renewal and sign out have
    defaults so tests only need to queue what they exercise.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: list[_MockEntry] = []
        self.requests: list[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)
        self.http_client = httpx.Client(transport=self.transport)

    def add_response(
        self,
        *,
        method: str,
        path: str,
        json: Any = None,
        content: Optional[bytes] = None,
        status_code: int = 200,
        repeat: bool = False,
    ) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if json is not None:
                return httpx.Response(status_code, json=json)
            return httpx.Response(status_code, content=content or b"")

        self.add_handler(handler, method=method, path=path, repeat=repeat)

    def add_exception(
        self,
        exception: Exception,
        *,
        method: str,
        path: str,
        repeat: bool = False,
    ) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise exception

        self.add_handler(handler, method=method, path=path, repeat=repeat)

    def add_handler(self, handler: Handler, *, method: str, path: str, repeat: bool = False) -> None:
        with self._lock:
            self._entries.append(_MockEntry(method.upper(), path, handler, repeat))

    def requests_to(self, method: str, path: str) -> list[httpx.Request]:
        with self._lock:
            return [r for r in self.requests if _matches(r, method, path)]

    def last_request(self) -> httpx.Request:
        with self._lock:
            return self.requests[-1]

    def close(self) -> None:
        self.http_client.close()

    def _handle(self, request: httpx.Request) -> httpx.Response:
        with self._lock:
            self.requests.append(request)
            handler = self._pop_match(request)
        if handler is not None:
            return handler(request)
        return self._default(request)

    def _pop_match(self, request: httpx.Request) -> Optional[Handler]:
        for idx, entry in enumerate(self._entries):
            if _matches(request, entry.method, entry.target):
                if not entry.repeat:
                    self._entries.pop(idx)
                return entry.handler
        return None

    def _default(self, request: httpx.Request) -> httpx.Response:
        if _matches(request, "POST", "/signin") or _matches(request, "POST", "/renewauth"):
            return httpx.Response(
                200,
                json={"user": {"email": TEST_EMAIL}, "token": TEST_TOKEN, "refreshToken": TEST_REFRESH_TOKEN},
            )
        if _matches(request, "DELETE", "/signout"):
            return httpx.Response(200)
        raise AssertionError(f"No mocked response for {request.method} {request.url}")


def _matches(request: httpx.Request, method: str, target: str) -> bool:
    return request.method == method.upper() and request.url.raw_path.decode("ascii") == target


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo ``setup_logging`` so log records reach caplog again."""
    yield
    package_logger = logging.getLogger("extendz")
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the developer's EXTEND_* variables out of the tests."""
    for name in (
        "EXTEND_EMAIL",
        "EXTEND_PASSWORD",
        "EXTEND_API_BASE_URL",
        "EXTEND_REQUEST_TIMEOUT",
        "EXTEND_TOKEN_VALIDITY_SECONDS",
        "EXTEND_LOG_LEVEL",
        "EXTEND_LOG_JSON",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_api():
    """Fake Extend API."""
    api = FakeExtendAPI()
    yield api
    api.close()


@pytest.fixture
def client(fake_api):
    """Signed in client backed by the fake API."""
    c = ExtendClient(BASE_URL, TEST_EMAIL, TEST_PASSWORD, http_client=fake_api.http_client)
    yield c
    c.close()
