"""
Core sequence engine.

RESPONSIBILITY: notation generation and terminal status
ALLOWED INPUTS: RequestEvent / ResponseEvent
OUTPUTS: notation string, TranscriptEntry tuple, FinalStatus
"""

from .event_log import HttpEventLog, transform, final_status
from .notation import REQUEST_ARROW, RESPONSE_ARROW, request_line, response_line
from .status import classify

__all__ = [
    'HttpEventLog',
    'transform',
    'final_status',
    'REQUEST_ARROW',
    'RESPONSE_ARROW',
    'request_line',
    'response_line',
    'classify',
]
