"""
Base Contracts and Shared Types

Foundational types shared by every layer of the sequence engine:
the error taxonomy and the severity tier used for the summary badge.

BOUNDARY ENFORCEMENT:
=====================
- No behavior beyond trivial derivations (badge class, error formatting)
- No dependencies on capture, core or presentation modules
"""

from __future__ import annotations
from enum import Enum, auto
from typing import Optional


# =============================================================================
# ERROR STATES (Explicit, never silent)
# =============================================================================

class ErrorCode(Enum):
    """
    Explicit error codes for every failure the engine can surface.
    """
    # Wire capture errors
    DUMP_FAILED = auto()
    BODY_READ_FAILED = auto()

    # Event log errors
    UNKNOWN_EVENT = auto()
    NO_TERMINAL_RESPONSE = auto()


class SequenceError(Exception):
    """
    Root of all engine failures.

    Carries the error code and, where known, the 1-based position of the
    offending event in the log.
    """

    def __init__(self, code: ErrorCode, message: str, position: Optional[int] = None):
        self.code = code
        self.message = message
        self.position = position
        super().__init__(self._format())

    def _format(self) -> str:
        if self.position is None:
            return self.message
        return f"event ({self.position}): {self.message}"

    def at_position(self, position: int) -> 'SequenceError':
        """Bind this error to an event position and return it for re-raising."""
        self.position = position
        self.args = (self._format(),)
        return self


class DumpError(SequenceError):
    """Message could not be serialized or its body stream could not be drained."""

    def __init__(self, message: str, position: Optional[int] = None,
                 code: ErrorCode = ErrorCode.DUMP_FAILED):
        super().__init__(code, message, position)


class TransformError(SequenceError):
    """Event log contained something that is neither a request nor a response."""

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(ErrorCode.UNKNOWN_EVENT, message, position)


class NoTerminalResponseError(SequenceError):
    """Non-empty log whose last event is not a response."""

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(ErrorCode.NO_TERMINAL_RESPONSE, message, position)


# =============================================================================
# SEVERITY TIERS
# =============================================================================

class Tier(Enum):
    """
    Severity of the terminal status of a chain.

    The value doubles as the presentation token suffix.
    """
    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"

    @property
    def badge_class(self) -> str:
        return f"badge badge-{self.value}"
