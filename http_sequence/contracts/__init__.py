"""
Contracts shared by every layer.

Layers import types from here and never from each other's implementations.
"""

from .base import (
    ErrorCode,
    SequenceError,
    DumpError,
    TransformError,
    NoTerminalResponseError,
    Tier,
)
from .events import (
    RequestEvent,
    ResponseEvent,
    HttpEvent,
    TranscriptEntry,
    FinalStatus,
    RenderModel,
)

__all__ = [
    'ErrorCode',
    'SequenceError',
    'DumpError',
    'TransformError',
    'NoTerminalResponseError',
    'Tier',
    'RequestEvent',
    'ResponseEvent',
    'HttpEvent',
    'TranscriptEntry',
    'FinalStatus',
    'RenderModel',
]
