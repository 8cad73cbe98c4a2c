"""
Marker spec grammar.

A marker spec is a pipe-delimited string of style segments followed by one
or more locations:

    size:mid|color:0xff0000|label:A|45.000000,-122.000000|45.1,-122.1

Recognised style keys are ``size`` (tiny, small, mid or a positive number),
``color`` (anything parse_color accepts) and ``label``. Every other segment
must be a "<lat>,<lon>" pair in decimal degrees. One Marker is produced per
location, all sharing the style of the spec.
"""

import logging
import math
from dataclasses import dataclass
from typing import Iterable, List

from .colors import RGBA, parse_color
from .points import LatLng, Point, to_engine_coordinate
from ..constants import (
    DEFAULT_MARKER_COLOR,
    DEFAULT_MARKER_SIZE,
    MARKER_KEY_SEPARATOR,
    MARKER_SEGMENT_SEPARATOR,
    MARKER_SIZES,
)
from ..exceptions import InvalidMarkerSpecError

logger = logging.getLogger("postmap.codec.markers")


@dataclass(frozen=True)
class Marker:
    """A resolved map marker as handed to the render context."""
    
    position: LatLng
    size: float = DEFAULT_MARKER_SIZE
    color: RGBA = DEFAULT_MARKER_COLOR
    label: str = ""


def _parse_size(value: str) -> float:
    if value in MARKER_SIZES:
        return MARKER_SIZES[value]
    try:
        size = float(value)
    except ValueError:
        raise ValueError(
            f"unknown size {value!r}, expected one of {', '.join(MARKER_SIZES)} or a number"
        ) from None
    if not size > 0:
        raise ValueError(f"size must be positive, got {value!r}")
    return size


def _parse_location(segment: str) -> LatLng:
    parts = segment.split(",")
    if len(parts) != 2:
        raise ValueError(f"expected '<lat>,<lon>', got {segment!r}")
    try:
        lat, lon = float(parts[0]), float(parts[1])
    except ValueError:
        raise ValueError(f"non-numeric coordinate {segment!r}") from None
    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise ValueError(f"non-finite coordinate {segment!r}")
    return to_engine_coordinate(Point(lat, lon))


def parse_marker_spec(spec: str) -> List[Marker]:
    """
    Parse one marker spec string.
    
    Args:
        spec: Pipe-delimited marker spec
        
    Returns:
        One Marker per location in the spec
        
    Raises:
        ValueError: If the spec does not follow the grammar
    """
    size = DEFAULT_MARKER_SIZE
    color = DEFAULT_MARKER_COLOR
    label = ""
    positions: List[LatLng] = []
    
    for segment in spec.split(MARKER_SEGMENT_SEPARATOR):
        if not segment:
            raise ValueError("empty segment")
        
        if MARKER_KEY_SEPARATOR in segment:
            key, value = segment.split(MARKER_KEY_SEPARATOR, 1)
            if key == "size":
                size = _parse_size(value)
            elif key == "color":
                color = parse_color(value)
            elif key == "label":
                label = value
            else:
                raise ValueError(f"unknown key {key!r}")
        else:
            positions.append(_parse_location(segment))
    
    if not positions:
        raise ValueError("no location given")
    
    return [Marker(position=p, size=size, color=color, label=label) for p in positions]


def parse_marker_locations(specs: Iterable[str]) -> List[Marker]:
    """
    Parse a list of marker spec strings into markers.
    
    Raises:
        InvalidMarkerSpecError: For the first spec that fails to parse; no
            partial result is returned.
    """
    markers: List[Marker] = []
    for spec in specs:
        try:
            markers.extend(parse_marker_spec(spec))
        except ValueError as e:
            logger.warning(f"Rejecting marker spec {spec!r}: {e}")
            raise InvalidMarkerSpecError(spec, str(e)) from e
    return markers
