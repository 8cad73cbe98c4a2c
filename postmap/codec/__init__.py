"""
Codecs for the rendering engine's value types.

These are the engine-side capabilities the request translators call into:

- points: degree pairs to engine coordinates and canonical "<lat>,<lon>" text
- colors: color names and hex strings to RGBA tuples
- markers: the pipe-delimited marker spec grammar
"""

from .points import Point, LatLng, to_engine_coordinate, to_engine_coordinates, to_canonical_string
from .colors import parse_color
from .markers import Marker, parse_marker_spec, parse_marker_locations

__all__ = [
    "Point",
    "LatLng",
    "to_engine_coordinate",
    "to_engine_coordinates",
    "to_canonical_string",
    "parse_color",
    "Marker",
    "parse_marker_spec",
    "parse_marker_locations",
]
