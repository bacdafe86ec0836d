"""
HTTP Sequence Diagrams

Records an ordered chain of HTTP exchanges between named participants and
renders it as a sequence diagram with wire transcripts.

LAYER STRUCTURE:
================

1. CONTRACTS (contracts/)
   - Events, transcript entries, render model, error taxonomy
   - No behavior

2. CAPTURE (capture/)
   - Responsibility: header dump + body capture for one httpx message
   - MUST NOT: know about positions or participants

3. CORE (core/)
   - Responsibility: event log, notation, terminal status classification
   - Outputs: notation string, transcripts, FinalStatus

4. PRESENTATION (presentation/)
   - Responsibility: substitute a RenderModel into an HTML page
   - MUST NOT: compute anything

The Diagram builder (diagram.py) wires the layers together.
"""

from .config import CaptureConfig, DiagramConfig, PageConfig
from .contracts import (
    ErrorCode,
    SequenceError,
    DumpError,
    TransformError,
    NoTerminalResponseError,
    Tier,
    RequestEvent,
    ResponseEvent,
    HttpEvent,
    TranscriptEntry,
    FinalStatus,
    RenderModel,
)
from .capture import WireCapturer
from .core import HttpEventLog, classify, final_status, transform
from .presentation import HtmlPageRenderer, PageRenderer
from .diagram import Diagram

__version__ = "1.0.0"

__all__ = [
    'Diagram',
    'DiagramConfig',
    'CaptureConfig',
    'PageConfig',
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
    'WireCapturer',
    'HttpEventLog',
    'classify',
    'final_status',
    'transform',
    'HtmlPageRenderer',
    'PageRenderer',
]
