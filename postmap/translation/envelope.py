"""
Request envelope parsing and render configuration assembly.

The envelope is the JSON document a client posts to request a map:

    {
      "center": {"lat": 53.55, "lon": 10.0},
      "zoom": 12,
      "markers": [{"size": "mid", "color": "0xff0000", "coord": {"lat": .., "lon": ..}}],
      "width": 800, "height": 600,
      "disable_attribution": false,
      "overlays": ["https://tiles.example.com/{0}/{1}/{2}.png"],
      "paths": [{"size": 3.0, "color": "blue", "positions": [{"lat": .., "lon": ..}, ...]}]
    }

Absent fields take zero values. Assembly checks the output size first and
then translates markers, overlays and paths in that order; the first error
aborts the whole request and propagates as raised by the translator.
"""

import json
import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from ..codec.colors import parse_color
from ..codec.markers import Marker
from ..codec.points import LatLng, Point, to_engine_coordinate
from ..config import Config
from ..exceptions import BoundsExceededError, InvalidEnvelopeError
from .markers import MarkerDescriptor, translate_markers
from .overlays import TileProvider, translate_overlays
from .paths import Path, PathDescriptor, translate_paths

logger = logging.getLogger("postmap.translation.envelope")


# ============================================================================
# Wire field decoding
# ============================================================================

def _number(value: Any, where: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidEnvelopeError(f"{where} must be a number, got {value!r}")
    try:
        number = float(value)
    except OverflowError:
        number = math.inf
    if not math.isfinite(number):
        raise InvalidEnvelopeError(f"{where} must be finite, got {value!r}")
    return number


def _integer(value: Any, where: str) -> int:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidEnvelopeError(f"{where} must be an integer, got {value!r}")
    return value


def _string(value: Any, where: str) -> str:
    if not isinstance(value, str):
        raise InvalidEnvelopeError(f"{where} must be a string, got {value!r}")
    return value


def _boolean(value: Any, where: str) -> bool:
    if not isinstance(value, bool):
        raise InvalidEnvelopeError(f"{where} must be a boolean, got {value!r}")
    return value


def _array(value: Any, where: str) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise InvalidEnvelopeError(f"{where} must be an array, got {value!r}")
    return value


def _object(value: Any, where: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise InvalidEnvelopeError(f"{where} must be an object, got {value!r}")
    return value


def _point(value: Any, where: str) -> Point:
    data = _object(value, where)
    return Point(
        lat=_number(data.get("lat", 0.0), f"{where}.lat"),
        lon=_number(data.get("lon", 0.0), f"{where}.lon"),
    )


# ============================================================================
# Envelope and generated configuration
# ============================================================================

@dataclass(frozen=True)
class Envelope:
    """
    A parsed map request.
    
    Attributes:
        center: Map center
        zoom: Zoom level
        markers: Marker descriptors
        width: Requested output width in pixels
        height: Requested output height in pixels
        disable_attribution: Whether to suppress the attribution text
        overlays: Overlay URL templates with {0}/{1}/{2} placeholders
        paths: Path descriptors
    """
    
    center: Point = field(default_factory=lambda: Point(0.0, 0.0))
    zoom: int = 0
    markers: Tuple[MarkerDescriptor, ...] = ()
    width: int = 0
    height: int = 0
    disable_attribution: bool = False
    overlays: Tuple[str, ...] = ()
    paths: Tuple[PathDescriptor, ...] = ()
    
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Envelope":
        """
        Build an Envelope from a decoded JSON document.
        
        Raises:
            InvalidEnvelopeError: If the document or one of its fields has
                the wrong shape.
        """
        if not isinstance(data, Mapping):
            raise InvalidEnvelopeError(
                f"envelope must be a JSON object, got {type(data).__name__}"
            )
        
        markers = []
        for i, raw in enumerate(_array(data.get("markers"), "markers")):
            where = f"markers[{i}]"
            raw = _object(raw, where)
            markers.append(MarkerDescriptor(
                coord=_point(raw.get("coord"), f"{where}.coord"),
                size=_string(raw.get("size", ""), f"{where}.size"),
                color=_string(raw.get("color", ""), f"{where}.color"),
            ))
        
        paths = []
        for i, raw in enumerate(_array(data.get("paths"), "paths")):
            where = f"paths[{i}]"
            raw = _object(raw, where)
            positions = tuple(
                _point(p, f"{where}.positions[{j}]")
                for j, p in enumerate(_array(raw.get("positions"), f"{where}.positions"))
            )
            paths.append(PathDescriptor(
                positions=positions,
                weight=_number(raw.get("size", 0.0), f"{where}.size"),
                color=_string(raw.get("color", ""), f"{where}.color"),
            ))
        
        overlays = tuple(
            _string(p, f"overlays[{i}]")
            for i, p in enumerate(_array(data.get("overlays"), "overlays"))
        )
        
        return cls(
            center=_point(data.get("center"), "center"),
            zoom=_integer(data.get("zoom", 0), "zoom"),
            markers=tuple(markers),
            width=_integer(data.get("width", 0), "width"),
            height=_integer(data.get("height", 0), "height"),
            disable_attribution=_boolean(data.get("disable_attribution", False), "disable_attribution"),
            overlays=overlays,
            paths=tuple(paths),
        )
    
    @classmethod
    def from_json(cls, text: str) -> "Envelope":
        """Parse an Envelope from JSON text."""
        try:
            data = json.loads(text)
        except ValueError as e:
            raise InvalidEnvelopeError(f"envelope is not valid JSON: {e}") from e
        return cls.from_dict(data)
    
    def to_generated_config(self, config: Optional[Config] = None) -> "GeneratedConfig":
        """Shortcut for build_generated_config(self, config)."""
        return build_generated_config(self, config)


@dataclass(frozen=True)
class GeneratedConfig:
    """The validated render configuration for one request."""
    
    center: LatLng
    zoom: int
    markers: Tuple[Marker, ...]
    paths: Tuple[Path, ...]
    overlays: Tuple[TileProvider, ...]
    width: int
    height: int
    disable_attribution: bool
    
    def to_dict(self) -> Dict[str, Any]:
        """JSON-safe representation with coordinates in degrees."""
        def latlng(p: LatLng) -> Dict[str, float]:
            return {"lat": p.lat_degrees, "lon": p.lng_degrees}
        
        return {
            "center": latlng(self.center),
            "zoom": self.zoom,
            "width": self.width,
            "height": self.height,
            "disable_attribution": self.disable_attribution,
            "markers": [
                {
                    "position": latlng(m.position),
                    "size": m.size,
                    "color": list(m.color),
                    "label": m.label,
                }
                for m in self.markers
            ],
            "overlays": [
                {"name": o.name, "tile_size": o.tile_size, "url_pattern": o.url_pattern}
                for o in self.overlays
            ],
            "paths": [
                {
                    "positions": [latlng(p) for p in path.positions],
                    "color": list(path.color),
                    "weight": path.weight,
                }
                for path in self.paths
            ],
        }


def check_bounds(width: int, height: int, config: Config) -> None:
    """
    Raises:
        BoundsExceededError: If width or height is above the configured maximum.
    """
    if width > config.max_width or height > config.max_height:
        logger.warning(
            f"Rejecting {width}x{height} map, bounds are {config.max_width}x{config.max_height}"
        )
        raise BoundsExceededError(width, height, config.max_width, config.max_height)


def build_generated_config(envelope: Envelope, config: Optional[Config] = None) -> GeneratedConfig:
    """
    Validate an envelope and assemble its render configuration.
    
    The size check runs before anything else. Markers, overlays and paths
    are then translated in that order and the first failure is raised
    unchanged; no partial configuration is ever returned.
    
    Args:
        envelope: Parsed request
        config: Bounds and defaults (default: Config())
        
    Returns:
        GeneratedConfig for the request
        
    Raises:
        BoundsExceededError: Output size above the configured maximum
        InvalidMarkerSpecError: A marker fails the marker grammar
        MissingPlaceholderError: An overlay lacks {0}, {1} or {2}
        InvalidColorError: A path color cannot be resolved
    """
    if config is None:
        config = Config()
    
    check_bounds(envelope.width, envelope.height, config)
    
    markers = translate_markers(envelope.markers)
    overlays = translate_overlays(envelope.overlays)
    paths = translate_paths(
        envelope.paths,
        default_color=parse_color(config.default_path_color),
        default_weight=config.default_path_weight,
    )
    
    logger.info(
        f"Assembled {envelope.width}x{envelope.height} map at zoom {envelope.zoom}: "
        f"{len(markers)} marker(s), {len(overlays)} overlay(s), {len(paths)} path(s)"
    )
    
    return GeneratedConfig(
        center=to_engine_coordinate(envelope.center),
        zoom=envelope.zoom,
        markers=tuple(markers),
        paths=tuple(paths),
        overlays=tuple(overlays),
        width=envelope.width,
        height=envelope.height,
        disable_attribution=envelope.disable_attribution,
    )
