"""
Constants and fixed parameters for the postmap package.

This module defines tile provider parameters, marker and path style defaults,
the overlay placeholder rewrite table, and the default output size bounds
used throughout the package.
"""

# ============================================================================
# Output Bounds
# ============================================================================

DEFAULT_MAX_WIDTH = 1024  # pixels
DEFAULT_MAX_HEIGHT = 1024  # pixels

# ============================================================================
# Tile Providers
# ============================================================================

# The rendering engine only supports a single fixed tile edge size.
TILE_SIZE = 256  # pixels

# Overlay URL placeholders in check order, mapped to the named str.format
# fields used by TileProvider.tile_url().
OVERLAY_PLACEHOLDERS = {
    "{0}": "{z}",  # zoom
    "{1}": "{x}",  # x tile
    "{2}": "{y}",  # y tile
}

DEFAULT_ATTRIBUTION = "Map data © OpenStreetMap contributors"

# ============================================================================
# Path Styling
# ============================================================================

DEFAULT_PATH_WEIGHT = 5.0
DEFAULT_PATH_COLOR = (255, 0, 0, 255)  # opaque red

# ============================================================================
# Marker Styling
# ============================================================================

MARKER_SIZES = {
    "tiny": 8.0,
    "small": 12.0,
    "mid": 16.0,
}

DEFAULT_MARKER_SIZE = MARKER_SIZES["mid"]
DEFAULT_MARKER_COLOR = (255, 0, 0, 255)

# Marker spec grammar
MARKER_SEGMENT_SEPARATOR = "|"
MARKER_KEY_SEPARATOR = ":"

# Fractional digits used in canonical "<lat>,<lon>" strings
COORDINATE_PRECISION = 6
