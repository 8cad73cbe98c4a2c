"""\
Basic Request Example

Loads examples/request.json, builds the render configuration and applies it
to a stand-in renderer that just records what it was told.

Usage:
  python examples/basic_request.py
"""

from pathlib import Path

from postmap import Config, PostMapError, configure_context, build_map_config, load_envelope


class RecordingRenderer:
    """Prints every call instead of drawing a map."""

    def set_center(self, center):
        print(f"center: {center.lat_degrees:.4f}, {center.lng_degrees:.4f}")

    def set_zoom(self, zoom):
        print(f"zoom: {zoom}")

    def add_marker(self, marker):
        print(f"marker: size={marker.size} color={marker.color}")

    def add_path(self, path):
        print(f"path: {len(path.positions)} points, weight={path.weight}")

    def add_tile_provider(self, provider):
        print(f"overlay {provider.name[:12]}: {provider.tile_url(13, 4324, 2644)}")

    def override_attribution(self, text):
        print(f"attribution: {text!r}")

    def render(self, width, height):
        print(f"render {width}x{height}")


def main() -> int:
    config = Config.from_max_size("1024x1024")
    envelope = load_envelope(Path(__file__).with_name("request.json"))

    try:
        generated = build_map_config(envelope, config)
    except PostMapError as e:
        print(f"Request rejected: {e}")
        return 1

    renderer = RecordingRenderer()
    width, height = configure_context(generated, renderer, config.attribution)
    renderer.render(width, height)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
