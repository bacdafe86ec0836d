"""
Event and Output Contracts

Immutable types flowing between the builder, the event log and the
page renderer.

FLOW:
=====
Diagram (builder) --RequestEvent/ResponseEvent--> EventLog
EventLog --TranscriptEntry, FinalStatus, notation--> RenderModel
RenderModel --> PageRenderer

Participants are plain strings. No registry, no uniqueness: they are
only ever used as notation text.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Tuple, Union

import httpx

from .base import Tier


# =============================================================================
# EXCHANGE EVENTS
# =============================================================================

@dataclass(frozen=True)
class RequestEvent:
    """
    One request travelling from `source` to `target`.

    The request is consumed by reference; its body is buffered on the
    message itself when captured.
    """
    source: str
    target: str
    request: httpx.Request


@dataclass(frozen=True)
class ResponseEvent:
    """One response travelling from `source` back to `target`."""
    source: str
    target: str
    response: httpx.Response


HttpEvent = Union[RequestEvent, ResponseEvent]


# =============================================================================
# DERIVED OUTPUTS
# =============================================================================

@dataclass(frozen=True)
class TranscriptEntry:
    """
    Wire transcript for a single event.

    `header` is the start line plus header fields, never the body.
    `body` is empty when the message carries no content.
    """
    header: str
    body: str = ""


@dataclass(frozen=True)
class FinalStatus:
    """Terminal status of a chain. Code -1 means the log was empty."""
    code: int
    tier: Tier

    NO_EVENTS = -1

    @property
    def is_sentinel(self) -> bool:
        return self.code == self.NO_EVENTS


@dataclass(frozen=True)
class RenderModel:
    """
    Structured model handed to the page renderer.

    DETERMINISTIC:
    Same builder state = identical model. Holds no reference back to
    the event log; `entries` is index-aligned with the log.
    """
    title: str
    subtitle: str
    name: str
    tier: Tier
    status_code: str
    notation: str
    entries: Tuple[TranscriptEntry, ...] = field(default_factory=tuple)
    metadata: Any = None

    @property
    def badge_class(self) -> str:
        return self.tier.badge_class
