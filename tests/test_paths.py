"""Unit tests for path translation."""

import pytest

from postmap.codec.points import Point
from postmap.exceptions import InvalidColorError
from postmap.translation.paths import PathDescriptor, translate_paths


class TestTranslatePaths:
    """Test translate_paths()."""
    
    def test_defaults(self):
        [path] = translate_paths([PathDescriptor(positions=(Point(1, 2), Point(3, 4)))])
        assert path.weight == 5.0
        assert path.color == (255, 0, 0, 255)
    
    def test_explicit_style(self):
        [path] = translate_paths([PathDescriptor(positions=(), weight=2.5, color="0x0000ff")])
        assert path.weight == 2.5
        assert path.color == (0, 0, 255, 255)
    
    def test_zero_weight_means_default(self):
        [path] = translate_paths([PathDescriptor(weight=0.0)])
        assert path.weight == 5.0
    
    def test_custom_defaults(self):
        [path] = translate_paths(
            [PathDescriptor()],
            default_color=(0, 0, 0, 255),
            default_weight=1.0,
        )
        assert path.color == (0, 0, 0, 255)
        assert path.weight == 1.0
    
    def test_positions_keep_order(self):
        points = (Point(10, 10), Point(-10, 20), Point(5, -30))
        [path] = translate_paths([PathDescriptor(positions=points)])
        assert [(p.lat_degrees, p.lng_degrees) for p in path.positions] == [
            pytest.approx((10, 10)),
            pytest.approx((-10, 20)),
            pytest.approx((5, -30)),
        ]
    
    @pytest.mark.parametrize("count", [0, 1])
    def test_degenerate_paths_pass_through(self, count):
        points = tuple(Point(float(i), float(i)) for i in range(count))
        [path] = translate_paths([PathDescriptor(positions=points)])
        assert len(path.positions) == count
    
    def test_one_path_per_descriptor(self):
        paths = translate_paths([
            PathDescriptor(color="blue"),
            PathDescriptor(),
            PathDescriptor(weight=9.0),
        ])
        assert [p.color for p in paths] == [(0, 0, 255, 255), (255, 0, 0, 255), (255, 0, 0, 255)]
        assert [p.weight for p in paths] == [5.0, 5.0, 9.0]
    
    def test_empty(self):
        assert translate_paths([]) == []
    
    def test_bad_color_aborts_translation(self):
        with pytest.raises(InvalidColorError) as exc_info:
            translate_paths([
                PathDescriptor(color="blue"),
                PathDescriptor(color="not-a-color"),
                PathDescriptor(color="also-bad"),
            ])
        
        err = exc_info.value
        assert err.color == "not-a-color"
        assert "bad color name 'not-a-color'" in str(err)
        assert isinstance(err.__cause__, ValueError)
