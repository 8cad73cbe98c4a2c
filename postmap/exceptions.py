"""
Custom exceptions for the postmap package.

This module defines exception classes for every way a map request can be
rejected while it is translated into a render configuration. All of them
derive from PostMapError so callers (HTTP handlers, the CLI) can map the
whole family to a single response.
"""


class PostMapError(Exception):
    """Base exception class for all postmap errors."""
    pass


class BoundsExceededError(PostMapError):
    """
    Raised when the requested output size is larger than allowed.
    
    The check happens before any marker, overlay or path is looked at.
    """
    
    def __init__(self, width: int, height: int, max_width: int, max_height: int):
        self.width = width
        self.height = height
        self.max_width = max_width
        self.max_height = max_height
        super().__init__(
            f"map size exceeds allowed bounds of {max_width}x{max_height}"
        )


class InvalidMarkerSpecError(PostMapError):
    """
    Raised when a marker spec string does not match the marker grammar.
    
    This covers unknown segment keys, bad sizes or colors, non-numeric
    coordinates and specs without any location.
    """
    
    def __init__(self, spec: str, reason: str):
        self.spec = spec
        self.reason = reason
        super().__init__(f"invalid marker spec {spec!r}: {reason}")


class InvalidColorError(PostMapError):
    """Raised when a path color name cannot be resolved."""
    
    def __init__(self, color: str, cause: Exception):
        self.color = color
        super().__init__(f"bad color name {color!r}: {cause}")


class MissingPlaceholderError(PostMapError):
    """Raised when an overlay URL pattern lacks {0}, {1} or {2}."""
    
    def __init__(self, placeholder: str, pattern: str):
        self.placeholder = placeholder
        self.pattern = pattern
        super().__init__(
            f"placeholder {placeholder!r} not found in pattern {pattern!r}"
        )


class InvalidEnvelopeError(PostMapError):
    """
    Raised when a request document is structurally malformed.
    
    This typically occurs for unreadable JSON, a top-level value that is
    not an object, or fields holding values of the wrong type.
    """
    pass


class InvalidParameterError(PostMapError):
    """
    Raised for invalid configuration values.
    
    Used for non-positive size bounds or malformed "WxH" size strings.
    """
    pass
