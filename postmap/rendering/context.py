"""
Render context contract.

The rasteriser that fetches tiles and draws the map lives outside this
package. It is modelled here as a RenderContext protocol, and
configure_context() applies a GeneratedConfig to one. Rendering itself is
left to the caller, which owns timeouts, caching and image encoding.
"""

import logging
from typing import Any, Optional, Protocol, Tuple

from ..codec.markers import Marker
from ..codec.points import LatLng
from ..translation.envelope import GeneratedConfig
from ..translation.overlays import TileProvider
from ..translation.paths import Path

logger = logging.getLogger("postmap.rendering.context")


class RenderContext(Protocol):
    """Operations a static map renderer exposes to postmap."""
    
    def set_center(self, center: LatLng) -> None: ...
    
    def set_zoom(self, zoom: int) -> None: ...
    
    def add_marker(self, marker: Marker) -> None: ...
    
    def add_path(self, path: Path) -> None: ...
    
    def add_tile_provider(self, provider: TileProvider) -> None: ...
    
    def override_attribution(self, text: str) -> None: ...
    
    def render(self, width: int, height: int) -> Any: ...


def configure_context(
    generated: GeneratedConfig,
    context: RenderContext,
    attribution: Optional[str] = None
) -> Tuple[int, int]:
    """
    Apply a generated configuration to a render context.
    
    Args:
        generated: Output of build_generated_config()
        context: Renderer to configure
        attribution: Attribution text to set; ignored (replaced by an empty
            string) when the request disabled attribution
        
    Returns:
        (width, height) to pass to context.render()
    """
    context.set_center(generated.center)
    context.set_zoom(generated.zoom)
    
    for provider in generated.overlays:
        context.add_tile_provider(provider)
    for marker in generated.markers:
        context.add_marker(marker)
    for path in generated.paths:
        context.add_path(path)
    
    if generated.disable_attribution:
        context.override_attribution("")
    elif attribution is not None:
        context.override_attribution(attribution)
    
    logger.debug(
        f"Configured render context: {len(generated.overlays)} overlay(s), "
        f"{len(generated.markers)} marker(s), {len(generated.paths)} path(s)"
    )
    return generated.width, generated.height
