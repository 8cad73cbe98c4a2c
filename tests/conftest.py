"""Shared fixtures for postmap tests."""

import copy
from typing import Any, Dict

import pytest

from postmap.config import Config


SAMPLE_ENVELOPE: Dict[str, Any] = {
    "center": {"lat": 45.0, "lon": -122.0},
    "zoom": 11,
    "width": 640,
    "height": 480,
    "disable_attribution": False,
    "markers": [
        {"size": "mid", "color": "0xff0000", "coord": {"lat": 45.0, "lon": -122.0}},
        {"coord": {"lat": 45.1, "lon": -122.1}},
    ],
    "overlays": [
        "https://tiles.example.com/{0}/{1}/{2}.png",
    ],
    "paths": [
        {
            "size": 2.5,
            "color": "blue",
            "positions": [
                {"lat": 45.0, "lon": -122.0},
                {"lat": 45.05, "lon": -122.05},
                {"lat": 45.1, "lon": -122.1},
            ],
        },
        {"positions": []},
    ],
}


@pytest.fixture
def envelope_data() -> Dict[str, Any]:
    """A valid request document; each test gets its own copy."""
    return copy.deepcopy(SAMPLE_ENVELOPE)


@pytest.fixture
def config() -> Config:
    """Configuration with small, explicit bounds."""
    return Config(max_width=1024, max_height=768)
