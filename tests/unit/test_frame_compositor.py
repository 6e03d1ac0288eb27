"""
Unit tests for frame compositing, bezel artwork and segment export.

A tiny 100x160 device profile keeps every render fast; pixel checks use
solid-colour content so expected values are exact.
"""
from pathlib import Path

import pytest
from PIL import Image

from mockup_scroller.core.models import FrameRenderSpec, Segment
from mockup_scroller.media.bezel import build_bezel, build_screen_mask, rgba
from mockup_scroller.media.exceptions import FrameRenderingError
from mockup_scroller.media.frame_compositor import FrameCompositor, crop_window, resize_to_width

RED = (255, 0, 0, 255)
BACKGROUND = rgba("#0B0F13")
BODY = rgba("#0D0F12")


@pytest.fixture
def compositor(small_profile):
    return FrameCompositor(small_profile, compress_level=1)


@pytest.fixture
def spec(tmp_path):
    return FrameRenderSpec(input_path=tmp_path / "page.png", base_name="page", out_dir=tmp_path)


def solid(width, height, color=RED):
    return Image.new("RGBA", (width, height), color)


class TestResizeAndCrop:

    def test_resize_keeps_aspect_ratio(self, make_screenshot):
        content = resize_to_width(make_screenshot(width=300, height=900), 80)
        assert content.size == (80, 240)
        assert content.mode == "RGBA"

    def test_resize_noop_when_already_sized(self, make_screenshot):
        content = resize_to_width(make_screenshot(width=300, height=900), 300)
        assert content.size == (300, 900)

    def test_crop_inside_content(self):
        window = crop_window(solid(80, 300), 100, 80, 120, "#0B0F13")
        assert window.size == (80, 120)
        assert window.getpixel((40, 119)) == RED

    def test_crop_pads_past_bottom(self):
        window = crop_window(solid(80, 100), 50, 80, 120, "#0B0F13")
        assert window.size == (80, 120)
        assert window.getpixel((40, 49)) == RED
        assert window.getpixel((40, 50)) == BACKGROUND
        assert window.getpixel((40, 119)) == BACKGROUND

    def test_crop_offset_beyond_content(self):
        window = crop_window(solid(80, 100), 500, 80, 120, "#0B0F13")
        assert window.getpixel((0, 0)) == BACKGROUND


class TestBezel:

    def test_screen_mask_rounded(self, small_profile):
        mask = build_screen_mask(small_profile)
        assert mask.size == small_profile.viewport_size
        assert mask.mode == "L"
        assert mask.getpixel((0, 0)) == 0
        assert mask.getpixel((40, 60)) == 255

    def test_bezel_cuts_out_screen(self, small_profile):
        bezel = build_bezel(small_profile)
        assert bezel.size == small_profile.canvas_size
        # outside the body is transparent
        assert bezel.getpixel((0, 0))[3] == 0
        # inside the screen is transparent
        assert bezel.getpixel((50, 80))[3] == 0
        # body between canvas edge and screen is opaque body colour
        assert bezel.getpixel((5, 80)) == BODY

    def test_bezel_cached_per_profile(self, small_profile):
        assert build_bezel(small_profile) is build_bezel(small_profile)


class TestFrameCompositor:

    def test_render_frame_shows_content_in_viewport(self, compositor, small_profile):
        frame = compositor.render_frame(solid(80, 300), 0)
        assert frame.size == small_profile.canvas_size
        assert frame.getpixel((50, 80)) == RED
        assert frame.getpixel((0, 0)) == BACKGROUND
        assert frame.getpixel((5, 80)) == BODY

    def test_mask_screen_clears_corners(self, compositor):
        masked = compositor.mask_screen(solid(80, 120))
        assert masked.getpixel((0, 0))[3] == 0
        assert masked.getpixel((40, 60)) == RED

    def test_render_scroll_frames_writes_numbered_pngs(self, compositor, spec, tmp_path):
        frames_dir = tmp_path / "frames"
        frames_dir.mkdir()

        count = compositor.render_scroll_frames(solid(80, 200), [0, 40, 80], frames_dir, spec)

        assert count == 3
        names = sorted(p.name for p in frames_dir.iterdir())
        assert names == ["page.000000.png", "page.000001.png", "page.000002.png"]
        with Image.open(frames_dir / names[0]) as img:
            assert img.size == (100, 160)
            assert img.mode == "RGB"

    def test_render_failure_reports_frame(self, compositor, spec, tmp_path):
        with pytest.raises(FrameRenderingError) as exc_info:
            compositor.render_scroll_frames(solid(80, 200), [0], tmp_path / "missing_dir", spec)
        assert exc_info.value.frame_index == 0

    def test_framed_segments_numbered_from_one(self, compositor, spec):
        segments = [Segment(0, 120), Segment(20, 140)]
        paths = compositor.render_framed_segments(solid(80, 140), segments, spec)

        assert [p.name for p in paths] == ["page.framed.1.png", "page.framed.2.png"]
        for path in paths:
            with Image.open(path) as img:
                assert img.size == (100, 160)

    def test_screen_segments_exact_size_and_padded(self, compositor, spec):
        content = solid(80, 240)
        paths = compositor.render_screen_segments(content, [Segment(0, 200), Segment(100, 240)], spec, 200)

        assert [p.name for p in paths] == ["page.screen.1.png", "page.screen.2.png"]
        with Image.open(paths[1]) as img:
            assert img.size == (80, 200)
            # square corners: no mask applied
            assert img.getpixel((0, 0)) == RED[:3]
            assert img.getpixel((40, 150)) == BACKGROUND[:3]

    def test_framed_segment_write_failure_reports_segment(self, compositor, tmp_path):
        spec = FrameRenderSpec(input_path=tmp_path / "page.png", base_name="page", out_dir=tmp_path / "missing")
        with pytest.raises(FrameRenderingError, match="framed segment 1") as exc_info:
            compositor.render_framed_segments(solid(80, 140), [Segment(0, 120)], spec)
        assert exc_info.value.frame_index == 1
        assert exc_info.value.file_path == str(tmp_path / "page.png")

    def test_screen_segment_write_failure_reports_segment(self, compositor, tmp_path):
        spec = FrameRenderSpec(input_path=tmp_path / "page.png", base_name="page", out_dir=tmp_path / "missing")
        with pytest.raises(FrameRenderingError, match="screen segment 1") as exc_info:
            compositor.render_screen_segments(solid(80, 240), [Segment(0, 200)], spec, 200)
        assert exc_info.value.frame_index == 1

    def test_from_settings_uses_configured_png_options(self, small_profile):
        compositor = FrameCompositor.from_settings(small_profile)
        assert 0 <= compositor.compress_level <= 9
        assert compositor.profile == small_profile


class TestFrameRenderSpec:

    def test_output_names(self, tmp_path):
        spec = FrameRenderSpec(input_path=Path("in.png"), base_name="home", out_dir=tmp_path)
        assert spec.gif_path == tmp_path / "home.framed.scroll.gif"
        assert spec.framed_segment_path(3) == tmp_path / "home.framed.3.png"
        assert spec.screen_segment_path(1) == tmp_path / "home.screen.1.png"
        assert spec.frame_pattern == "home.%06d.png"
        assert spec.frame_name(12) == "home.000012.png"
