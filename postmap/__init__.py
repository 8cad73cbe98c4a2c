"""
postmap - Validate static map requests and build render configurations.

A map request (center, zoom, markers, paths, tile overlays, output size) is
posted as JSON. postmap checks it against the configured bounds, resolves
marker specs, path colors and overlay templates, and produces an immutable
configuration that a static map renderer can consume.

Quick Start:
    >>> from postmap import build_map_config
    >>> 
    >>> generated = build_map_config({
    ...     "center": {"lat": 45.0, "lon": -122.0},
    ...     "zoom": 10,
    ...     "width": 640,
    ...     "height": 480,
    ...     "markers": [{"size": "mid", "color": "0xff0000",
    ...                  "coord": {"lat": 45.0, "lon": -122.0}}],
    ...     "overlays": ["https://tiles.example.com/{0}/{1}/{2}.png"],
    ... })
    >>> generated.overlays[0].tile_url(10, 163, 366)
    'https://tiles.example.com/10/163/366.png'

Advanced Usage:
    >>> from postmap import Config, Envelope, configure_context
    >>> 
    >>> config = Config.from_max_size("2048x2048")
    >>> generated = Envelope.from_json(text).to_generated_config(config)
    >>> width, height = configure_context(generated, renderer, config.attribution)
    >>> image = renderer.render(width, height)
"""

__version__ = "0.1.0"

from .logging_config import setup_logging
setup_logging()

from .config import Config, parse_size
from .codec import LatLng, Marker, Point, parse_color, parse_marker_locations
from .translation import (
    Envelope,
    GeneratedConfig,
    MarkerDescriptor,
    Path,
    PathDescriptor,
    TileProvider,
    build_generated_config,
)
from .rendering import RenderContext, configure_context
from .api import build_map_config, load_envelope

from .exceptions import (
    PostMapError,
    BoundsExceededError,
    InvalidMarkerSpecError,
    InvalidColorError,
    MissingPlaceholderError,
    InvalidEnvelopeError,
    InvalidParameterError,
)

__all__ = [
    "__version__",
    
    # Config
    "Config",
    "parse_size",
    
    # Value types
    "Point",
    "LatLng",
    "Marker",
    "Path",
    "TileProvider",
    "parse_color",
    "parse_marker_locations",
    
    # Requests
    "Envelope",
    "MarkerDescriptor",
    "PathDescriptor",
    "GeneratedConfig",
    "build_generated_config",
    "build_map_config",
    "load_envelope",
    
    # Renderer hand-off
    "RenderContext",
    "configure_context",
    
    # Exceptions
    "PostMapError",
    "BoundsExceededError",
    "InvalidMarkerSpecError",
    "InvalidColorError",
    "MissingPlaceholderError",
    "InvalidEnvelopeError",
    "InvalidParameterError",
]
