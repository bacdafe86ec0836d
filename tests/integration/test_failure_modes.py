"""
Failure Mode Tests

AXIOM UNDER TEST:
=================
All failures surface as typed errors from render().
No retries, no partial pages, no degraded output.
"""

import pytest
import httpx

from http_sequence import (
    Diagram, DumpError, ErrorCode, NoTerminalResponseError, ResponseEvent,
    SequenceError, TransformError,
)

from .fixtures import BrokenStream, UnreadAsyncStream, create_request, create_response


class TestTerminalResponse:

    def test_request_only_chain(self):
        diagram = Diagram().title("title").subtitle("subTitle").request(
            "one", "two", create_request("POST", "http://two", b'{"email": "a@b.com"}'))

        with pytest.raises(NoTerminalResponseError) as ctx:
            diagram.render()

        assert "was not a response" in str(ctx.value)
        assert ctx.value.position == 1

    def test_status_checked_before_bodies_are_read(self):
        reads = []

        def body():
            reads.append(True)
            yield b"payload"

        diagram = Diagram().request("one", "two", httpx.Request("POST", "http://two", content=body()))

        with pytest.raises(NoTerminalResponseError):
            diagram.render()

        assert reads == []


class TestCaptureFailures:

    def test_broken_body_stream(self):
        diagram = (
            Diagram()
            .request("one", "two", create_request("GET", "/"))
            .response("two", "one", httpx.Response(200, stream=BrokenStream()))
        )

        with pytest.raises(DumpError) as ctx:
            diagram.render()

        assert ctx.value.code == ErrorCode.BODY_READ_FAILED
        assert ctx.value.position == 2

    def test_unread_async_body(self):
        diagram = Diagram().response("two", "one", httpx.Response(200, stream=UnreadAsyncStream()))

        with pytest.raises(DumpError):
            diagram.render()

    def test_malformed_message(self):
        diagram = (
            Diagram()
            .append(ResponseEvent("two", "one", object()))
            .response("two", "one", create_response(200))
        )

        with pytest.raises(DumpError) as ctx:
            diagram.build_model()

        assert ctx.value.code == ErrorCode.DUMP_FAILED
        assert ctx.value.position == 1


class TestUnknownEvents:

    def test_unknown_event_before_terminal_response(self):
        diagram = (
            Diagram()
            .append({"source": "one", "target": "two"})
            .response("two", "one", create_response(200))
        )

        with pytest.raises(TransformError) as ctx:
            diagram.render()

        assert ctx.value.position == 1

    def test_all_errors_share_a_root(self):
        for error in (DumpError("x"), TransformError("x"), NoTerminalResponseError("x")):
            assert isinstance(error, SequenceError)
