"""
Integration Test Fixtures

Deterministic HTTP messages and event chains shared by the test suite.
All fixtures are explicit - no random generation, no network.
"""

from typing import Optional, Tuple

import httpx

from http_sequence import Diagram, RequestEvent, ResponseEvent


JSON = "application/json"
JSON_UTF8 = "application/json; charset=utf-8"


# =============================================================================
# MESSAGE FACTORIES
# =============================================================================

def create_request(
    method: str,
    url: str,
    body: Optional[bytes] = None,
    content_type: Optional[str] = None
) -> httpx.Request:
    headers = {"Content-Type": content_type} if content_type else None
    return httpx.Request(method, url, content=body, headers=headers)


def create_response(
    status_code: int,
    body: Optional[bytes] = None,
    content_type: Optional[str] = None
) -> httpx.Response:
    headers = {"Content-Type": content_type} if content_type else None
    return httpx.Response(status_code, content=body, headers=headers)


class BrokenStream(httpx.SyncByteStream):
    """Body stream that fails mid-read, like a reset connection."""

    def __iter__(self):
        yield b'{"partial":'
        raise OSError("connection reset by peer")


class UnreadAsyncStream(httpx.AsyncByteStream):
    """Async body that has not been awaited yet."""

    async def __aiter__(self):
        yield b"{}"


# =============================================================================
# EVENT CHAINS
# =============================================================================

def create_chain_events() -> Tuple[object, ...]:
    """
    one -> two -> three and back, terminal status 201.

    Mirrors the classic four-hop example with relative URLs.
    """
    return (
        RequestEvent("one", "two", create_request("POST", "/x")),
        RequestEvent("two", "three", create_request("POST", "/y")),
        ResponseEvent("three", "two", create_response(200)),
        ResponseEvent("two", "one", create_response(201)),
    )


CHAIN_NOTATION = (
    "one->two: (1) POST /x\n"
    "two->three: (2) POST /y\n"
    "three->>two: (3) 200\n"
    "two->>one: (4) 201\n"
)


def create_chain_diagram(renderer=None) -> Diagram:
    """Four-hop diagram with a body on every message."""
    return (
        Diagram(renderer=renderer)
        .title("title")
        .subtitle("subTitle")
        .request("one", "two",
                 create_request("POST", "http://two", b'{"email": "a@b.com"}', JSON))
        .request("two", "three",
                 create_request("POST", "http://three", b'{"username": "a@b.com"}', JSON))
        .response("three", "two",
                  create_response(200, b'{"id":7}', JSON))
        .response("two", "one",
                  create_response(201, b"created", "text/plain"))
    )
