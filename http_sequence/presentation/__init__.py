"""
Presentation layer.

RESPONSIBILITY: turn a finished RenderModel into a displayable page
MUST NOT: look at events or compute status
"""

from .page import PageRenderer, HtmlPageRenderer, metadata_blob

__all__ = [
    'PageRenderer',
    'HtmlPageRenderer',
    'metadata_blob',
]
