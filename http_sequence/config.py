"""
Configuration

Unified configuration for wire capture and page rendering.
Defaults reproduce the classic output; environment overrides exist for
demo setups that want a different indentation or diagram theme.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple
import os


ENV_PREFIX = "HTTP_SEQUENCE_"


@dataclass(frozen=True)
class CaptureConfig:
    """
    Wire capture settings.

    `json_content_type` is compared by exact string equality against the
    message's Content-Type header. No MIME parsing.
    """
    json_content_type: str = "application/json"
    json_indent: int = 4


@dataclass(frozen=True)
class PageConfig:
    """Assets and drawing options used by the HTML page renderer."""
    stylesheets: Tuple[str, ...] = (
        "https://stackpath.bootstrapcdn.com/bootstrap/4.1.2/css/bootstrap.min.css",
        "https://cdnjs.cloudflare.com/ajax/libs/highlight.js/9.12.0/styles/github.min.css",
    )
    head_scripts: Tuple[str, ...] = (
        "https://cdnjs.cloudflare.com/ajax/libs/underscore.js/1.8.3/underscore-min.js",
        "https://cdnjs.cloudflare.com/ajax/libs/raphael/2.2.7/raphael.min.js",
        "https://bramp.github.io/js-sequence-diagrams/js/sequence-diagram-min.js",
        "https://code.jquery.com/jquery-3.3.1.slim.min.js",
        "https://cdnjs.cloudflare.com/ajax/libs/popper.js/1.14.3/umd/popper.min.js",
        "https://stackpath.bootstrapcdn.com/bootstrap/4.1.2/js/bootstrap.min.js",
    )
    highlight_script: str = "https://cdn.jsdelivr.net/gh/highlightjs/cdn-release@9.13.1/build/highlight.min.js"
    diagram_theme: str = "simple"
    diagram_font_size: int = 14


@dataclass
class DiagramConfig:
    """Unified configuration for the whole engine."""
    capture: CaptureConfig = None
    page: PageConfig = None

    def __post_init__(self):
        self.capture = self.capture or CaptureConfig()
        self.page = self.page or PageConfig()

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> 'DiagramConfig':
        """
        Build a config from HTTP_SEQUENCE_* variables.

        Recognised:
        - HTTP_SEQUENCE_JSON_INDENT
        - HTTP_SEQUENCE_JSON_CONTENT_TYPE
        - HTTP_SEQUENCE_DIAGRAM_THEME
        """
        env = os.environ if environ is None else environ

        capture = CaptureConfig(
            json_content_type=env.get(
                f"{ENV_PREFIX}JSON_CONTENT_TYPE", CaptureConfig.json_content_type
            ),
            json_indent=_int_from_env(
                env, f"{ENV_PREFIX}JSON_INDENT", CaptureConfig.json_indent
            ),
        )
        page = PageConfig(
            diagram_theme=env.get(f"{ENV_PREFIX}DIAGRAM_THEME", PageConfig.diagram_theme),
        )
        return cls(capture=capture, page=page)


def _int_from_env(env, key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None
