"""
Configuration management for the postmap package.

This module provides the settings the request translation depends on: the
maximum output size, path style defaults and the attribution text. Bounds
are handed to the assembler explicitly through a Config instance rather
than read from module-level state. Overlay tiles are always TILE_SIZE.
"""

import json
import re
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Tuple

import yaml

from .codec.colors import parse_color
from .constants import (
    DEFAULT_ATTRIBUTION,
    DEFAULT_MAX_HEIGHT,
    DEFAULT_MAX_WIDTH,
    DEFAULT_PATH_WEIGHT,
)
from .exceptions import InvalidParameterError

_SIZE_RE = re.compile(r"^\s*(\d+)\s*[xX]\s*(\d+)\s*$")


def parse_size(value: str) -> Tuple[int, int]:
    """Parse a "<width>x<height>" string such as "1024x768".
    
    Raises:
        InvalidParameterError: If the string is not two positive integers
            joined by "x".
    """
    match = _SIZE_RE.match(value or "")
    if match is None:
        raise InvalidParameterError(
            f"Invalid size {value!r}. Expected WIDTHxHEIGHT, e.g. 1024x1024"
        )
    width, height = int(match.group(1)), int(match.group(2))
    if width <= 0 or height <= 0:
        raise InvalidParameterError(f"Size must be positive, got {value!r}")
    return width, height


@dataclass
class Config:
    """Configuration for map request translation.
    
    Attributes:
        max_width: Largest accepted output width in pixels.
        max_height: Largest accepted output height in pixels.
        default_path_weight: Stroke weight for paths that do not set one.
        default_path_color: Color name used for paths that do not set one.
        attribution: Attribution text handed to the render context unless a
            request disables it.
    """
    
    max_width: int = DEFAULT_MAX_WIDTH
    max_height: int = DEFAULT_MAX_HEIGHT
    default_path_weight: float = DEFAULT_PATH_WEIGHT
    default_path_color: str = "red"
    attribution: str = DEFAULT_ATTRIBUTION
    
    @property
    def max_size(self) -> Tuple[int, int]:
        """(max_width, max_height) tuple."""
        return self.max_width, self.max_height
    
    @classmethod
    def from_max_size(cls, value: str, **kwargs) -> "Config":
        """Build a Config whose bounds come from a "WxH" string."""
        max_width, max_height = parse_size(value)
        return cls(max_width=max_width, max_height=max_height, **kwargs)
    
    @classmethod
    def load_from_file(cls, path: Path) -> "Config":
        """Load configuration from a YAML or JSON file.
        
        A "max_size" key holding a "WxH" string is accepted in place of
        max_width/max_height.
        
        Args:
            path: Path to configuration file (.yaml, .yml, or .json).
            
        Returns:
            Config instance with loaded settings.
            
        Raises:
            ValueError: If file format is not supported.
            FileNotFoundError: If file does not exist.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")
        
        with open(path, 'r', encoding='utf-8') as f:
            if path.suffix in ['.yaml', '.yml']:
                data = yaml.safe_load(f) or {}
            elif path.suffix == '.json':
                data = json.load(f)
            else:
                raise ValueError(f"Unsupported file format: {path.suffix}. Use .yaml, .yml, or .json")
        
        if 'max_size' in data:
            data['max_width'], data['max_height'] = parse_size(str(data.pop('max_size')))
        
        return cls(**data)
    
    def save_to_file(self, path: Path) -> None:
        """Save configuration to a YAML or JSON file.
        
        Args:
            path: Path where configuration should be saved.
            
        Raises:
            ValueError: If file format is not supported.
        """
        path = Path(path)
        if path.suffix not in ['.yaml', '.yml', '.json']:
            raise ValueError(f"Unsupported file format: {path.suffix}. Use .yaml, .yml, or .json")
        path.parent.mkdir(parents=True, exist_ok=True)
        
        data = asdict(self)
        with open(path, 'w', encoding='utf-8') as f:
            if path.suffix == '.json':
                json.dump(data, f, indent=2, ensure_ascii=False)
            else:
                yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
    
    def validate(self) -> bool:
        """Validate configuration parameters.
        
        Returns:
            True if configuration is valid.
            
        Raises:
            InvalidParameterError: If any configuration parameter is invalid.
        """
        if not isinstance(self.max_width, int) or self.max_width <= 0:
            raise InvalidParameterError("max_width must be a positive integer")
        
        if not isinstance(self.max_height, int) or self.max_height <= 0:
            raise InvalidParameterError("max_height must be a positive integer")
        
        if self.default_path_weight <= 0:
            raise InvalidParameterError("default_path_weight must be positive")
        
        try:
            parse_color(self.default_path_color)
        except ValueError as e:
            raise InvalidParameterError(f"default_path_color is not a valid color: {e}") from e
        
        return True


def get_default_config() -> Config:
    """Get a Config instance with default settings."""
    return Config()
