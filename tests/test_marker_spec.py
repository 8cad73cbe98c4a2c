"""Unit tests for the marker spec grammar."""

import pytest

from postmap.codec.markers import Marker, parse_marker_locations, parse_marker_spec
from postmap.codec.points import LatLng
from postmap.exceptions import InvalidMarkerSpecError, PostMapError


class TestParseMarkerSpec:
    """Test parse_marker_spec()."""
    
    def test_full_spec(self):
        markers = parse_marker_spec("size:mid|color:0xff0000|45.000000,-122.000000")
        assert markers == [
            Marker(position=LatLng.from_degrees(45.0, -122.0), size=16.0, color=(255, 0, 0, 255))
        ]
    
    def test_location_only_uses_defaults(self):
        [marker] = parse_marker_spec("1.000000,2.000000")
        assert marker.size == 16.0
        assert marker.color == (255, 0, 0, 255)
        assert marker.label == ""
    
    @pytest.mark.parametrize("name,size", [("tiny", 8.0), ("small", 12.0), ("mid", 16.0), ("20", 20.0)])
    def test_sizes(self, name, size):
        [marker] = parse_marker_spec(f"size:{name}|0,0")
        assert marker.size == size
    
    def test_label(self):
        [marker] = parse_marker_spec("label:A|color:blue|10,20")
        assert marker.label == "A"
        assert marker.color == (0, 0, 255, 255)
    
    def test_multiple_locations_share_style(self):
        markers = parse_marker_spec("size:small|color:blue|1,2|3,4")
        assert len(markers) == 2
        assert {m.size for m in markers} == {12.0}
        assert {m.color for m in markers} == {(0, 0, 255, 255)}
        assert markers[0].position.lat_degrees == pytest.approx(1.0)
        assert markers[1].position.lat_degrees == pytest.approx(3.0)
    
    @pytest.mark.parametrize("spec", [
        "",
        "size:mid",
        "size:huge|1,2",
        "size:-4|1,2",
        "color:not-a-color|1,2",
        "shape:star|1,2",
        "1,2,3",
        "north,east",
        "1,2||3,4",
        "nan,0",
        "0,inf",
    ])
    def test_rejects_bad_specs(self, spec):
        with pytest.raises(ValueError):
            parse_marker_spec(spec)


class TestParseMarkerLocations:
    """Test parse_marker_locations()."""
    
    def test_flattens_specs_in_order(self):
        markers = parse_marker_locations(["1,1", "size:tiny|2,2|3,3"])
        assert [round(m.position.lat_degrees) for m in markers] == [1, 2, 3]
        assert [m.size for m in markers] == [16.0, 8.0, 8.0]
    
    def test_empty_list(self):
        assert parse_marker_locations([]) == []
    
    def test_first_bad_spec_is_reported(self):
        with pytest.raises(InvalidMarkerSpecError) as exc_info:
            parse_marker_locations(["1,1", "size:huge|2,2", "color:nope|3,3"])
        
        assert exc_info.value.spec == "size:huge|2,2"
        assert "size:huge|2,2" in str(exc_info.value)
        assert isinstance(exc_info.value, PostMapError)
        assert isinstance(exc_info.value.__cause__, ValueError)
