"""
Marker translation.

Request markers are serialised into the marker spec grammar and then parsed
by the engine's marker parser, so the wire format and the textual spec
format accept exactly the same markers.
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence

from ..codec.markers import Marker, parse_marker_locations
from ..codec.points import Point, to_canonical_string
from ..constants import MARKER_SEGMENT_SEPARATOR

logger = logging.getLogger("postmap.translation.markers")


@dataclass(frozen=True)
class MarkerDescriptor:
    """A marker as described by a request: optional size and color, one point."""
    
    coord: Point
    size: str = ""
    color: str = ""
    
    def to_spec_string(self) -> str:
        """
        Serialise to "size:<s>|color:<c>|<lat>,<lon>", omitting unset fields.
        
        Example:
            >>> MarkerDescriptor(Point(1, 2)).to_spec_string()
            '1.000000,2.000000'
        """
        parts = []
        if self.size:
            parts.append(f"size:{self.size}")
        if self.color:
            parts.append(f"color:{self.color}")
        parts.append(to_canonical_string(self.coord))
        return MARKER_SEGMENT_SEPARATOR.join(parts)


def translate_markers(descriptors: Sequence[MarkerDescriptor]) -> List[Marker]:
    """
    Convert request markers into engine markers.
    
    Raises:
        InvalidMarkerSpecError: If any serialised marker fails the grammar.
    """
    specs = [d.to_spec_string() for d in descriptors]
    logger.debug(f"Translating {len(specs)} marker(s): {specs}")
    return parse_marker_locations(specs)
