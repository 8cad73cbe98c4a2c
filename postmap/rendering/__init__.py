"""
Hand-off to the map renderer.

postmap does not fetch tiles or encode images. This sub-package describes
what a renderer must offer (RenderContext) and how a validated request is
applied to it (configure_context).
"""

from .context import RenderContext, configure_context

__all__ = [
    "RenderContext",
    "configure_context",
]
