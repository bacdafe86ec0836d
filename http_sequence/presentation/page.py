"""
HTML Page Renderer
==================

Substitutes a finished RenderModel into a standalone HTML page:
status badge, js-sequence-diagrams drawing and a wire transcript table.

No logic beyond substitution and escaping:
- all text content is HTML-escaped
- the notation is embedded as a JavaScript string literal
- metadata is embedded verbatim as a JSON script block
"""

from __future__ import annotations
from typing import Any, Optional, Protocol
import html
import json

from ..config import PageConfig
from ..contracts.events import RenderModel, TranscriptEntry


class PageRenderer(Protocol):
    """Anything that turns a RenderModel into displayable output."""

    def render(self, model: RenderModel) -> str:
        ...


def _script_literal(value: str) -> str:
    """JSON-encode a string for use inside an inline <script>."""
    return json.dumps(value).replace("</", "<\\/")


def metadata_blob(metadata: Any) -> Optional[str]:
    """
    Text for the metaJson script block, or None when there is nothing to embed.

    Strings are treated as pre-encoded JSON; other values are encoded.
    Either way `</` becomes `<\\/` so the block cannot be closed early.
    """
    if metadata is None or metadata == "":
        return None
    blob = metadata if isinstance(metadata, str) else json.dumps(metadata)
    return blob.replace("</", "<\\/")


class HtmlPageRenderer:
    """Default PageRenderer producing a Bootstrap-styled HTML document."""

    def __init__(self, config: Optional[PageConfig] = None):
        self._config = config or PageConfig()

    def render(self, model: RenderModel) -> str:
        cfg = self._config
        document_title = model.name or model.title

        stylesheets = "\n".join(
            f'    <link rel="stylesheet" href="{html.escape(href)}">' for href in cfg.stylesheets
        )
        scripts = "\n".join(
            f'    <script src="{html.escape(src)}"></script>' for src in cfg.head_scripts
        )
        rows = "".join(
            self._render_row(number, entry)
            for number, entry in enumerate(model.entries, start=1)
        )

        blob = metadata_blob(model.metadata)
        meta_block = (
            f'<script type="application/json" id="metaJson">{blob}</script>\n'
            if blob is not None else ""
        )
        draw_options = json.dumps({"theme": cfg.diagram_theme, "font-size": cfg.diagram_font_size})

        return f'''<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8">
    <title>{html.escape(document_title)}</title>
{stylesheets}
{scripts}
</head>
<body>
<!-- THIS CODE IS AUTOGENERATED. DO NOT EDIT -->
<div class="container-fluid">
    <h1>{html.escape(model.title)}</h1>
    <span class="{html.escape(model.badge_class)}">{html.escape(model.status_code)}</span>
    <p class="lead">{html.escape(model.subtitle)}</p>

    <div class="card text-center">
        <div class="card-body">
            <div id="d" class="justify-content-center"></div>
        </div>
    </div>

    <br><br>
    <p class="lead">Request/Response wire representation</p>

    <table class="table">
        <thead>
        <tr>
            <th scope="col">#</th>
            <th scope="col">Payload</th>
        </tr>
        </thead>
        <tbody>
{rows}        </tbody>
    </table>
</div>
<script>
    Diagram.parse({_script_literal(model.notation)}).drawSVG("d", {draw_options});
</script>
<style>
    body {{
        padding-top: 2rem;
        padding-bottom: 2rem;
    }}
</style>
{meta_block}<script src="{html.escape(cfg.highlight_script)}"></script>
<script>hljs.initHighlightingOnLoad();</script>
</body>
</html>'''

    def _render_row(self, number: int, entry: TranscriptEntry) -> str:
        body = (
            f'<pre><code class="json">{html.escape(entry.body)}</code></pre>\n'
            if entry.body else ""
        )
        return (
            f'        <tr>\n'
            f'            <th scope="row">{number}</th>\n'
            f'            <td>\n'
            f'<pre>{html.escape(entry.header)}</pre>\n'
            f'{body}'
            f'            </td>\n'
            f'        </tr>\n'
        )
