"""
Sequence Notation
=================

Line grammar consumed by js-sequence-diagrams:

    request-line  := SOURCE "->"  TARGET ": (" N ") " METHOD " " URL
    response-line := SOURCE "->>" TARGET ": (" N ") " STATUSCODE

The arrow token is the only signal separating a response edge from a
request edge. N is the 1-based position in the log, shared by both kinds.
"""

from __future__ import annotations

import httpx


REQUEST_ARROW = "->"
RESPONSE_ARROW = "->>"


def request_line(source: str, target: str, position: int, request: httpx.Request) -> str:
    return f"{source}{REQUEST_ARROW}{target}: ({position}) {request.method} {request.url}\n"


def response_line(source: str, target: str, position: int, response: httpx.Response) -> str:
    return f"{source}{RESPONSE_ARROW}{target}: ({position}) {response.status_code}\n"
