"""
Shared fixtures for the posts feed tests.

Requests never leave the process: every web service is built over an
``httpx.MockTransport`` driven by a StubServer.
"""

import sys
from pathlib import Path
from dataclasses import dataclass
from typing import Callable, List

import httpx
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from posts_feed import errors as feed_errors
from posts_feed.api import errors as web_errors
from posts_feed.api.client import PostsWebService
from posts_feed.config import APIConfig


STUB_BASE_URL = "http://stub.test"


class StubServer:
    """Counts requests and answers each one with the configured reply."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._reply: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json=[])
        )

    @property
    def calls(self) -> int:
        return len(self.requests)

    def respond_json(self, payload, status_code: int = 200) -> None:
        self._reply = lambda request: httpx.Response(status_code, json=payload)

    def respond_content(self, content: bytes, status_code: int = 200) -> None:
        self._reply = lambda request: httpx.Response(status_code, content=content)

    def fail_with(self, error_type, message: str = "") -> None:
        def reply(request):
            raise error_type(message, request=request)
        self._reply = reply

    def respond_with(self, build: Callable[[httpx.Request], httpx.Response]) -> None:
        self._reply = build

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._reply(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def stub_server():
    """Create a StubServer."""
    return StubServer()


@pytest.fixture
def api_config():
    """API settings pointing at the stub server."""
    return APIConfig(base_url=STUB_BASE_URL, posts_endpoint="/posts")


@pytest.fixture
def web_service(api_config, stub_server):
    """Create a PostsWebService wired to the stub server."""
    return PostsWebService(api_config=api_config, transport=stub_server.transport)


@dataclass
class BrokenReply:
    """A server reply that must still end in exactly one Failure."""
    apply: Callable[[StubServer], None]
    web_kind: type
    feed_kind: type


def _corrupt_content_encoding(stub: StubServer) -> None:
    stub.respond_with(lambda request: httpx.Response(
        200,
        headers={"Content-Encoding": "gzip"},
        stream=httpx.ByteStream(b"not gzip at all"),
    ))


def _over_deep_json(stub: StubServer) -> None:
    stub.respond_content(b"[" * 100000 + b"]" * 100000)


def _too_many_redirects(stub: StubServer) -> None:
    # A RequestError that is not a TransportError
    stub.fail_with(httpx.TooManyRedirects, "exceeded maximum allowed redirects")


@pytest.fixture(
    params=[
        BrokenReply(_corrupt_content_encoding, web_errors.Decode, feed_errors.Serialization),
        BrokenReply(_over_deep_json, web_errors.Decode, feed_errors.Serialization),
        BrokenReply(_too_many_redirects, web_errors.Transport, feed_errors.NoInternetConnection),
    ],
    ids=["corrupt-content-encoding", "over-deep-json", "too-many-redirects"],
)
def broken_reply(request, stub_server):
    """Configure the stub server with a reply the client cannot use."""
    request.param.apply(stub_server)
    return request.param
