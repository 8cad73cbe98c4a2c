"""
Request translation for postmap.

Turns a map request envelope into a validated render configuration. Each
kind of request item has its own translator:

- markers: MarkerDescriptor -> marker spec string -> Marker
- paths: PathDescriptor -> Path with defaulted color and weight
- overlays: URL template -> TileProvider named by content hash
- envelope: bounds check plus assembly of the above into GeneratedConfig
"""

from .markers import MarkerDescriptor, translate_markers
from .paths import Path, PathDescriptor, translate_paths
from .overlays import TileProvider, pattern_identifier, rewrite_pattern, translate_overlays
from .envelope import Envelope, GeneratedConfig, build_generated_config, check_bounds

__all__ = [
    "MarkerDescriptor",
    "translate_markers",
    "Path",
    "PathDescriptor",
    "translate_paths",
    "TileProvider",
    "pattern_identifier",
    "rewrite_pattern",
    "translate_overlays",
    "Envelope",
    "GeneratedConfig",
    "build_generated_config",
    "check_bounds",
]
