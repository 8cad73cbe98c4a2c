"""
Main API module for the postmap package.

This module provides the user-facing entry points. `build_map_config()`
accepts a request in any of its usual forms (decoded JSON, JSON text or an
Envelope) and returns the validated render configuration.

Example:
    >>> from postmap import build_map_config, Config
    >>> 
    >>> generated = build_map_config(
    ...     {
    ...         "center": {"lat": 53.55, "lon": 10.0},
    ...         "zoom": 12,
    ...         "width": 800,
    ...         "height": 600,
    ...         "markers": [{"color": "blue", "coord": {"lat": 53.55, "lon": 10.0}}],
    ...     },
    ...     config=Config(max_width=1024, max_height=1024),
    ... )
    >>> len(generated.markers)
    1
"""

import logging
import sys
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from .config import Config
from .exceptions import InvalidEnvelopeError
from .translation.envelope import Envelope, GeneratedConfig, build_generated_config

logger = logging.getLogger(__name__)


def load_envelope(path: Union[str, Path]) -> Envelope:
    """
    Read a request envelope from a JSON file.
    
    Args:
        path: File path, or "-" to read standard input
        
    Returns:
        Parsed Envelope
        
    Raises:
        InvalidEnvelopeError: If the file cannot be read or is not a valid
            envelope
    """
    if str(path) == "-":
        logger.debug("Reading envelope from stdin")
        return Envelope.from_json(sys.stdin.read())
    
    path = Path(path)
    logger.debug(f"Reading envelope from {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise InvalidEnvelopeError(f"Failed to read envelope {path}: {e}") from e
    return Envelope.from_json(text)


def build_map_config(
    envelope: Union[Envelope, Mapping[str, Any], str],
    config: Optional[Config] = None
) -> GeneratedConfig:
    """
    Validate a map request and build its render configuration.
    
    Args:
        envelope: An Envelope, a decoded JSON object, or JSON text
        config: Optional Config object; if None, uses default configuration
        
    Returns:
        GeneratedConfig ready to be applied to a render context
        
    Raises:
        InvalidEnvelopeError: If the request document is malformed
        BoundsExceededError: If the requested size is too large
        InvalidMarkerSpecError: If a marker is invalid
        MissingPlaceholderError: If an overlay template lacks a placeholder
        InvalidColorError: If a path color is unknown
    """
    if isinstance(envelope, str):
        envelope = Envelope.from_json(envelope)
    elif not isinstance(envelope, Envelope):
        envelope = Envelope.from_dict(envelope)
    
    if config is None:
        config = Config()
        logger.debug("Using default configuration")
    
    return build_generated_config(envelope, config)
