"""
Path translation.

Each request path becomes a polyline with a uniform stroke color and
weight. Point order is kept since it defines drawing order. Zero and
one-point paths are passed through; whether they draw anything is up to the
rendering engine.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from ..codec.colors import RGBA, parse_color
from ..codec.points import LatLng, Point, to_engine_coordinates
from ..constants import DEFAULT_PATH_COLOR, DEFAULT_PATH_WEIGHT
from ..exceptions import InvalidColorError

logger = logging.getLogger("postmap.translation.paths")


@dataclass(frozen=True)
class PathDescriptor:
    """A path as described by a request. A weight of 0 means "unset"."""
    
    positions: Tuple[Point, ...] = field(default_factory=tuple)
    weight: float = 0.0
    color: str = ""


@dataclass(frozen=True)
class Path:
    """A resolved polyline as handed to the render context."""
    
    positions: Tuple[LatLng, ...]
    color: RGBA = DEFAULT_PATH_COLOR
    weight: float = DEFAULT_PATH_WEIGHT


def translate_paths(
    descriptors: Sequence[PathDescriptor],
    default_color: RGBA = DEFAULT_PATH_COLOR,
    default_weight: float = DEFAULT_PATH_WEIGHT
) -> List[Path]:
    """
    Convert request paths into engine paths.
    
    Args:
        descriptors: Request paths in drawing order
        default_color: Color for paths without one
        default_weight: Weight for paths without one (or with weight 0)
        
    Returns:
        One Path per descriptor, in input order
        
    Raises:
        InvalidColorError: On the first color name that cannot be resolved;
            the parser error is chained as the cause.
    """
    result = []
    for index, descriptor in enumerate(descriptors):
        color = default_color
        if descriptor.color:
            try:
                color = parse_color(descriptor.color)
            except ValueError as e:
                logger.warning(f"Path {index}: bad color name {descriptor.color!r}")
                raise InvalidColorError(descriptor.color, e) from e
        
        weight = descriptor.weight if descriptor.weight != 0 else default_weight
        
        path = Path(
            positions=tuple(to_engine_coordinates(descriptor.positions)),
            color=color,
            weight=weight,
        )
        logger.debug(
            f"Path {index}: {len(path.positions)} point(s), color={path.color}, weight={path.weight}"
        )
        result.append(path)
    
    return result
