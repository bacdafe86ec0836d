"""
HTTP Event Log
==============

Append-only, ordered record of request/response events and the
transformation of that record into notation plus wire transcripts.

INVARIANTS:
- Insertion order is the chronological order of the exchange
- No updates or deletes - append only
- transform() yields exactly one notation line and one transcript entry
  per event, index-aligned with the log
- final_status() is stricter than transform(): a trailing request makes
  the status undefined but the chain is still renderable as notation

Structural checks (request/response pairing, participant names) are the
caller's responsibility and are NOT enforced here.
"""

from __future__ import annotations
from typing import Iterator, List, Optional, Sequence, Tuple

from ..capture.transcript import WireCapturer
from ..contracts.base import DumpError, NoTerminalResponseError, TransformError
from ..contracts.events import (
    FinalStatus, HttpEvent, RequestEvent, ResponseEvent, TranscriptEntry
)
from .notation import request_line, response_line
from .status import classify


# =============================================================================
# TRANSFORMATION
# =============================================================================

def transform(
    events: Sequence[HttpEvent],
    capturer: Optional[WireCapturer] = None
) -> Tuple[str, Tuple[TranscriptEntry, ...]]:
    """
    Render events into (notation, transcripts).

    Aborts on the first failure with no partial output. DumpError from
    the capturer is re-raised with the offending event's position.
    """
    capturer = capturer or WireCapturer()
    lines: List[str] = []
    entries: List[TranscriptEntry] = []

    for position, event in enumerate(events, start=1):
        try:
            if isinstance(event, RequestEvent):
                entry = capturer.capture_request(event.request)
                line = request_line(event.source, event.target, position, event.request)
            elif isinstance(event, ResponseEvent):
                entry = capturer.capture_response(event.response)
                line = response_line(event.source, event.target, position, event.response)
            else:
                raise TransformError(
                    f"received {type(event).__name__}, expected RequestEvent or ResponseEvent",
                    position=position,
                )
        except DumpError as exc:
            raise exc.at_position(position)

        lines.append(line)
        entries.append(entry)

    return "".join(lines), tuple(entries)


def final_status(events: Sequence[HttpEvent]) -> FinalStatus:
    """
    Terminal status of the chain.

    Empty log -> FinalStatus(-1, SUCCESS). Otherwise only the last event
    is inspected and it must be a response.
    """
    if not events:
        code = FinalStatus.NO_EVENTS
        return FinalStatus(code=code, tier=classify(code))

    last = events[-1]
    if not isinstance(last, ResponseEvent):
        raise NoTerminalResponseError(
            f"final http event was not a response (got {type(last).__name__})",
            position=len(events),
        )

    code = last.response.status_code
    return FinalStatus(code=code, tier=classify(code))


# =============================================================================
# EVENT LOG
# =============================================================================

class HttpEventLog:
    """
    Append-only event log.

    GUARANTEES:
    ===========
    1. NO updates - events are kept exactly as appended
    2. NO deletes - log only grows
    3. Deterministic - same events in same order -> same transform output

    NOT THREAD-SAFE: appends are unguarded list mutations.
    """

    def __init__(self, events: Optional[Sequence[HttpEvent]] = None):
        self._events: List[HttpEvent] = list(events or ())

    def append(self, event: HttpEvent) -> HttpEvent:
        """
        Append an event. This is the ONLY write operation.

        No validation: the log accepts whatever the caller supplies and
        transform() rejects unknown variants later.
        """
        self._events.append(event)
        return event

    @property
    def events(self) -> Tuple[HttpEvent, ...]:
        """Immutable snapshot of the log."""
        return tuple(self._events)

    @property
    def last(self) -> Optional[HttpEvent]:
        return self._events[-1] if self._events else None

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[HttpEvent]:
        return iter(self.events)

    def transform(
        self,
        capturer: Optional[WireCapturer] = None
    ) -> Tuple[str, Tuple[TranscriptEntry, ...]]:
        return transform(self._events, capturer)

    def final_status(self) -> FinalStatus:
        return final_status(self._events)
