"""
Sequence Diagram Builder
========================

Fluent facade assembling a diagram from a title, subtitle, metadata and
an ordered chain of HTTP events, then rendering it.

Usage:
    html = (
        Diagram()
        .title("checkout")
        .subtitle("happy path")
        .request("web", "orders", httpx.Request("POST", "http://orders/checkout"))
        .response("orders", "web", httpx.Response(201))
        .render()
    )

Every setter mutates this builder and returns it. Nothing is validated
at append time; render() fails atomically if the chain is malformed.
"""

from __future__ import annotations
from typing import Any, Optional, Tuple
import logging

import httpx

from .capture.transcript import WireCapturer
from .config import DiagramConfig
from .contracts.events import HttpEvent, RenderModel, RequestEvent, ResponseEvent
from .core.event_log import HttpEventLog
from .presentation.page import HtmlPageRenderer, PageRenderer


logger = logging.getLogger(__name__)


class Diagram:
    """
    Builder for one sequence diagram.

    NOT THREAD-SAFE: share an instance across writers only with
    external synchronization.
    """

    def __init__(
        self,
        config: Optional[DiagramConfig] = None,
        renderer: Optional[PageRenderer] = None
    ):
        self._config = config or DiagramConfig()
        self._renderer = renderer or HtmlPageRenderer(self._config.page)
        self._capturer = WireCapturer(self._config.capture)

        self._title = ""
        self._subtitle = ""
        self._name = ""
        self._metadata: Any = None
        self._log = HttpEventLog()

    # -------------------------------------------------------------------------
    # Fluent setters
    # -------------------------------------------------------------------------

    def title(self, title: str) -> 'Diagram':
        self._title = title
        return self

    def subtitle(self, subtitle: str) -> 'Diagram':
        self._subtitle = subtitle
        return self

    def name(self, name: str) -> 'Diagram':
        self._name = name
        return self

    def metadata(self, metadata: Any) -> 'Diagram':
        """Attach an opaque payload. Passed through to the model untouched."""
        self._metadata = metadata
        return self

    def request(self, source: str, target: str, request: httpx.Request) -> 'Diagram':
        self._log.append(RequestEvent(source=source, target=target, request=request))
        return self

    def response(self, source: str, target: str, response: httpx.Response) -> 'Diagram':
        self._log.append(ResponseEvent(source=source, target=target, response=response))
        return self

    def append(self, event: HttpEvent) -> 'Diagram':
        """Append a pre-built event."""
        self._log.append(event)
        return self

    @property
    def events(self) -> Tuple[HttpEvent, ...]:
        return self._log.events

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def build_model(self) -> RenderModel:
        """
        Compute the render model.

        Order matters: terminal status is checked before any transcript
        is captured, so a chain without a terminal response fails
        without touching any body.
        """
        status = self._log.final_status()
        notation, entries = self._log.transform(self._capturer)

        return RenderModel(
            title=self._title,
            subtitle=self._subtitle,
            name=self._name,
            tier=status.tier,
            status_code=str(status.code),
            notation=notation,
            entries=entries,
            metadata=self._metadata,
        )

    def render(self) -> str:
        """Build the model and hand it to the page renderer."""
        logger.debug("rendering diagram %r with %d events", self._name or self._title, len(self._log))
        model = self.build_model()
        output = self._renderer.render(model)
        logger.debug("rendered diagram %r: status=%s tier=%s",
                     self._name or self._title, model.status_code, model.tier.value)
        return output
