"""
Overlay translation.

Overlay URL templates use the positional placeholders {0} (zoom), {1} (x
tile) and {2} (y tile). They are rewritten into the named str.format fields
{z}, {x} and {y} and turned into tile providers whose name is the SHA-256
hex digest of the rewritten template, so identical templates always map to
the same tile source.
"""

import hashlib
import logging
from dataclasses import dataclass
from typing import List, Sequence

from ..constants import OVERLAY_PLACEHOLDERS, TILE_SIZE
from ..exceptions import MissingPlaceholderError

logger = logging.getLogger("postmap.translation.overlays")


@dataclass(frozen=True)
class TileProvider:
    """A tile source addressed by a {z}/{x}/{y} URL template."""
    
    name: str
    url_pattern: str
    tile_size: int = TILE_SIZE
    
    def tile_url(self, zoom: int, x: int, y: int) -> str:
        """Fill the URL template for one tile."""
        return self.url_pattern.format(z=zoom, x=x, y=y)


def rewrite_pattern(pattern: str) -> str:
    """
    Validate placeholders and rewrite them to named format fields.
    
    Placeholders are checked in the order {0}, {1}, {2}; the first missing
    one is reported. Every occurrence of a placeholder is replaced.
    
    Raises:
        MissingPlaceholderError: If a placeholder is absent.
    """
    for placeholder in OVERLAY_PLACEHOLDERS:
        if placeholder not in pattern:
            raise MissingPlaceholderError(placeholder, pattern)
    
    for placeholder, field_name in OVERLAY_PLACEHOLDERS.items():
        pattern = pattern.replace(placeholder, field_name)
    return pattern


def pattern_identifier(rewritten: str) -> str:
    """Lowercase hex SHA-256 digest of a rewritten pattern."""
    return hashlib.sha256(rewritten.encode("utf-8")).hexdigest()


def translate_overlays(patterns: Sequence[str]) -> List[TileProvider]:
    """
    Convert overlay URL templates into tile providers.
    
    Duplicate templates produce duplicate providers with the same name.
    
    Raises:
        MissingPlaceholderError: For the first template lacking a placeholder.
    """
    result = []
    for pattern in patterns:
        try:
            rewritten = rewrite_pattern(pattern)
        except MissingPlaceholderError as e:
            logger.warning(str(e))
            raise
        
        provider = TileProvider(
            name=pattern_identifier(rewritten),
            url_pattern=rewritten,
            tile_size=TILE_SIZE,
        )
        logger.debug(f"Overlay {provider.name[:12]}: {provider.url_pattern}")
        result.append(provider)
    
    return result
