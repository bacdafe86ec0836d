"""
Wire capture layer.

RESPONSIBILITY: header dumps and body capture for single HTTP messages
MUST NOT: know about participants, positions or notation
"""

from .transcript import (
    WireCapturer,
    dump_request_head,
    dump_response_head,
    drain_body,
)

__all__ = [
    'WireCapturer',
    'dump_request_head',
    'dump_response_head',
    'drain_body',
]
