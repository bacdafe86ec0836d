"""
Wire Transcript Capture
=======================

Turns one httpx request or response into a TranscriptEntry:
a header dump (start line + header fields) and a separately captured body.

PRINCIPLES:
===========
1. The header dump never contains the body
2. No body is not an error: it yields an empty string
3. Bodies are read through httpx's buffering read(), so the caller's
   message stays readable afterwards (`message.content` still works)
4. Only an exact Content-Type match triggers JSON pretty-printing
"""

from __future__ import annotations
from typing import List, Optional, Union
import codecs
import email.message
import json

import httpx

from ..config import CaptureConfig
from ..contracts.base import DumpError, ErrorCode
from ..contracts.events import TranscriptEntry


CRLF = "\r\n"
REQUEST_PROTOCOL = "HTTP/1.1"


# =============================================================================
# HEADER DUMPS
# =============================================================================

def dump_request_head(request: httpx.Request) -> str:
    """
    Serialize the request line and headers in HTTP/1.1 framing.

    Example:
        POST /x HTTP/1.1
        Host: two
        Content-Type: application/json
    """
    if not isinstance(request, httpx.Request):
        raise DumpError(f"cannot serialize {type(request).__name__} as an HTTP request")

    try:
        target = request.url.raw_path.decode("ascii")
        start_line = f"{request.method} {target} {REQUEST_PROTOCOL}"
        return _frame(start_line, _header_lines(request.headers))
    except (UnicodeError, TypeError, ValueError) as exc:
        raise DumpError(f"cannot serialize request head: {exc}") from exc


def dump_response_head(response: httpx.Response) -> str:
    """Serialize the status line and headers in HTTP/1.1 framing."""
    if not isinstance(response, httpx.Response):
        raise DumpError(f"cannot serialize {type(response).__name__} as an HTTP response")

    try:
        status_line = f"{response.http_version} {response.status_code}"
        if response.reason_phrase:
            status_line = f"{status_line} {response.reason_phrase}"
        return _frame(status_line, _header_lines(response.headers))
    except (UnicodeError, TypeError, ValueError) as exc:
        raise DumpError(f"cannot serialize response head: {exc}") from exc


def _header_lines(headers: httpx.Headers) -> List[str]:
    encoding = headers.encoding
    return [
        f"{name.decode(encoding)}: {value.decode(encoding)}"
        for name, value in headers.raw
    ]


def _frame(start_line: str, header_lines: List[str]) -> str:
    lines = [start_line] + header_lines
    return CRLF.join(lines) + CRLF + CRLF


# =============================================================================
# BODY CAPTURE
# =============================================================================

def drain_body(message: Union[httpx.Request, httpx.Response]) -> bytes:
    """
    Read the complete body of a message.

    Sync streams are read via `read()`, which caches the content on the
    message. Async streams must already have been read by the caller
    (`await message.aread()`); the engine never awaits.
    """
    if isinstance(message.stream, httpx.SyncByteStream):
        try:
            return message.read()
        except (httpx.StreamError, httpx.HTTPError, OSError) as exc:
            raise DumpError(
                f"failed to read body: {exc}",
                code=ErrorCode.BODY_READ_FAILED,
            ) from exc

    try:
        return message.content
    except httpx.StreamError as exc:
        raise DumpError(
            "asynchronous body stream must be read before capture",
            code=ErrorCode.BODY_READ_FAILED,
        ) from exc


class WireCapturer:
    """
    Captures transcript entries for requests and responses.

    GUARANTEES:
    ===========
    1. Header dump and body capture are independent
    2. Deterministic: same message = identical entry, on every call
    3. Failures surface as DumpError; nothing is retried
    """

    def __init__(self, config: Optional[CaptureConfig] = None):
        self._config = config or CaptureConfig()

    def capture(self, message: Union[httpx.Request, httpx.Response]) -> TranscriptEntry:
        """Capture either kind of message."""
        if isinstance(message, httpx.Request):
            return self.capture_request(message)
        if isinstance(message, httpx.Response):
            return self.capture_response(message)
        raise DumpError(f"cannot serialize {type(message).__name__}: not an HTTP message")

    def capture_request(self, request: httpx.Request) -> TranscriptEntry:
        header = dump_request_head(request)
        return TranscriptEntry(header=header, body=self._capture_body(request))

    def capture_response(self, response: httpx.Response) -> TranscriptEntry:
        header = dump_response_head(response)
        return TranscriptEntry(header=header, body=self._capture_body(response))

    def _capture_body(self, message: Union[httpx.Request, httpx.Response]) -> str:
        body = drain_body(message)
        if not body:
            return ""
        return self.format_body(body, first_content_type(message.headers))

    def format_body(self, body: bytes, content_type: Optional[str]) -> str:
        """
        Render body bytes as text.

        Decoded with the charset declared in `content_type` (UTF-8 when
        none is declared or it is unknown). Pretty-printed only when
        `content_type` equals the configured JSON type exactly;
        `application/json; charset=utf-8` stays raw.
        Bodies that claim JSON but do not parse are kept raw.
        """
        text = body.decode(declared_charset(content_type) or "utf-8", errors="replace")
        if content_type != self._config.json_content_type:
            return text

        try:
            return indent_json(text, self._config.json_indent)
        except ValueError:
            return text


# =============================================================================
# TEXT HELPERS
# =============================================================================

def first_content_type(headers: httpx.Headers) -> Optional[str]:
    """First Content-Type value; repeated headers are not comma-joined."""
    values = headers.get_list("Content-Type")
    return values[0] if values else None


def declared_charset(content_type: Optional[str]) -> Optional[str]:
    """Charset parameter of a Content-Type value, if it names a known codec."""
    if not content_type:
        return None
    message = email.message.Message()
    message["content-type"] = content_type
    charset = message.get_content_charset()
    if charset is None:
        return None
    try:
        return codecs.lookup(charset).name
    except LookupError:
        return None


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def indent_json(text: str, indent: int) -> str:
    """
    Re-indent a JSON document without re-serializing it.

    Only whitespace outside string literals changes: duplicate keys,
    numeric spellings and escapes are kept exactly as sent.
    Raises ValueError when `text` is not valid JSON.
    """
    json.loads(text, parse_constant=_reject_constant)

    pad = " " * indent
    out: List[str] = []
    depth = 0
    in_string = False
    escaped = False
    opened = False

    for ch in text:
        if in_string:
            out.append(ch)
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue

        if ch in " \t\r\n":
            continue

        if opened and ch not in "]}":
            opened = False
            depth += 1
            out.append("\n" + pad * depth)

        if ch == '"':
            in_string = True
            out.append(ch)
        elif ch in "[{":
            out.append(ch)
            opened = True
        elif ch == ",":
            out.append(",\n" + pad * depth)
        elif ch == ":":
            out.append(": ")
        elif ch in "]}":
            if opened:
                # empty container stays compact
                opened = False
            else:
                depth -= 1
                out.append("\n" + pad * depth)
            out.append(ch)
        else:
            out.append(ch)

    return "".join(out)
