"""
Color string parsing for markers and paths.

Accepts the hex forms used by static map URLs ("0xRRGGBB", "0xRRGGBBAA",
"#RRGGBB", "#RRGGBBAA") and the named colors in Matplotlib's color
registry. Other Matplotlib color specs (grayscale strings, shorthand hex,
"none", cycle references) are rejected. Colors are returned as 8-bit RGBA
tuples.
"""

import logging
import re
from typing import Tuple

import matplotlib.colors as mcolors

logger = logging.getLogger("postmap.codec.colors")

RGBA = Tuple[int, int, int, int]

_HEX_RE = re.compile(r"^(?:0[xX]|#)([0-9a-fA-F]{6}(?:[0-9a-fA-F]{2})?)$")


def _to_byte(component: float) -> int:
    return int(round(component * 255))


def _is_named_color(name: str) -> bool:
    named = mcolors.get_named_colors_mapping()
    return name in named or name.lower() in named


def parse_color(value: str) -> RGBA:
    """
    Resolve a color string to an RGBA tuple of 0-255 integers.
    
    Args:
        value: Color name or hex specification
        
    Returns:
        (red, green, blue, alpha) tuple
        
    Raises:
        ValueError: If the string is empty or not a known color
        
    Example:
        >>> parse_color("0xff0000")
        (255, 0, 0, 255)
        >>> parse_color("blue")
        (0, 0, 255, 255)
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError("cannot parse empty color string")
    
    text = value.strip()
    match = _HEX_RE.match(text)
    if match is not None:
        text = "#" + match.group(1)
    elif not _is_named_color(text):
        logger.debug(f"Color {value!r} is neither 6/8-digit hex nor a named color")
        raise ValueError(f"cannot parse color string: {value}")
    
    try:
        rgba = mcolors.to_rgba(text)
    except ValueError as e:
        raise ValueError(f"cannot parse color string: {value}") from e
    
    return tuple(_to_byte(c) for c in rgba)
