"""
Frame compositing for framed scroll animations and segment exports.

For each offset the resized content is cropped to the viewport, padded when
it runs past the bottom of the page, masked to the rounded screen shape and
placed on the device canvas under the bezel. Raster work is done with Pillow.
"""

from pathlib import Path
from typing import List, Optional, Sequence, Union
import logging

from PIL import Image, ImageChops

from mockup_scroller.core.device_profile import DeviceProfile
from mockup_scroller.core.models import FrameRenderSpec, Segment
from .bezel import build_bezel, build_screen_mask, rgba
from .exceptions import FrameRenderingError

logger = logging.getLogger(__name__)


def resize_to_width(input_path: Union[str, Path], target_width: int) -> Image.Image:
    """
    Load an image and scale it to ``target_width`` keeping its aspect ratio.

    Returns:
        RGBA content image
    """
    with Image.open(input_path) as img:
        img = img.convert('RGBA')
        width, height = img.size
        target_height = max(1, round(height * target_width / width))
        if (width, height) == (target_width, target_height):
            return img.copy()
        return img.resize((target_width, target_height), Image.Resampling.LANCZOS)


def crop_window(
    content: Image.Image,
    top: int,
    width: int,
    height: int,
    fill: str,
) -> Image.Image:
    """
    Crop ``height`` rows starting at ``top``, always returning ``width x height``.

    Rows past the bottom of the content are filled with ``fill``.
    """
    top = max(0, min(top, content.height))
    available = min(height, content.height - top)

    if available == height and content.width == width:
        return content.crop((0, top, width, top + height))

    window = Image.new('RGBA', (width, height), rgba(fill))
    if available > 0:
        window.paste(content.crop((0, top, min(width, content.width), top + available)), (0, 0))
    return window


class FrameCompositor:
    """Render device-framed frames and segments for one device profile"""

    def __init__(self, profile: DeviceProfile, compress_level: int = 6, optimize: bool = False):
        self.profile = profile
        self.compress_level = compress_level
        self.optimize = optimize
        self.bezel = build_bezel(profile)
        self.screen_mask = build_screen_mask(profile)

    @classmethod
    def from_settings(cls, profile: Optional[DeviceProfile] = None) -> "FrameCompositor":
        from mockup_scroller import settings
        return cls(
            profile or settings.get_device_profile(),
            compress_level=settings.get_png_compress_level(),
            optimize=settings.get_png_optimize(),
        )

    # ------------------------------------------------------------------ frames

    def mask_screen(self, window: Image.Image) -> Image.Image:
        """Keep the window only where the rounded screen mask is opaque (dest-in)."""
        masked = window.copy()
        masked.putalpha(ImageChops.multiply(window.getchannel('A'), self.screen_mask))
        return masked

    def compose(self, screen: Image.Image) -> Image.Image:
        """Place a masked screen into the viewport of a fresh canvas, bezel on top."""
        canvas = Image.new('RGBA', self.profile.canvas_size, rgba(self.profile.background_color))
        canvas.alpha_composite(screen, dest=(self.profile.viewport.x, self.profile.viewport.y))
        canvas.alpha_composite(self.bezel)
        return canvas

    def render_frame(self, content: Image.Image, top: int) -> Image.Image:
        width, height = self.profile.viewport_size
        window = crop_window(content, top, width, height, self.profile.background_color)
        return self.compose(self.mask_screen(window))

    def save_png(self, image: Image.Image, path: Path) -> Path:
        image.convert('RGB').save(
            path, format='PNG', compress_level=self.compress_level, optimize=self.optimize
        )
        return path

    def render_scroll_frames(
        self,
        content: Image.Image,
        offsets: Sequence[int],
        frames_dir: Path,
        spec: FrameRenderSpec,
    ) -> int:
        """
        Write one framed PNG per offset into ``frames_dir``.

        Frames are named ``<base>.<000000>.png`` so an encoder can read them
        with a numeric sequence pattern.

        Returns:
            Number of frames written
        """
        frames_dir = Path(frames_dir)
        for index, top in enumerate(offsets):
            try:
                frame = self.render_frame(content, top)
                self.save_png(frame, frames_dir / spec.frame_name(index))
            except (OSError, ValueError) as e:
                raise FrameRenderingError(
                    f"Failed to render frame at offset {top}: {e}",
                    frame_index=index,
                    file_path=str(spec.input_path),
                ) from e

            if index and index % 60 == 0:
                logger.debug(f"Rendered {index}/{len(offsets)} frames for {spec.base_name}")

        return len(offsets)

    # ---------------------------------------------------------------- segments

    def render_framed_segments(
        self,
        content: Image.Image,
        segments: Sequence[Segment],
        spec: FrameRenderSpec,
    ) -> List[Path]:
        """One framed PNG per segment, cropped from ``segment.start``."""
        paths = []
        for number, segment in enumerate(segments, start=1):
            try:
                frame = self.render_frame(content, segment.start)
                paths.append(self.save_png(frame, spec.framed_segment_path(number)))
            except (OSError, ValueError) as e:
                raise FrameRenderingError(
                    f"Failed to render framed segment {number}: {e}",
                    frame_index=number,
                    file_path=str(spec.input_path),
                ) from e
        return paths

    def render_screen_segments(
        self,
        content: Image.Image,
        segments: Sequence[Segment],
        spec: FrameRenderSpec,
        screen_height: int,
    ) -> List[Path]:
        """
        Unframed screenshots: square corners, no bezel, exactly
        ``content.width x screen_height`` each.
        """
        paths = []
        for number, segment in enumerate(segments, start=1):
            try:
                window = crop_window(
                    content, segment.start, content.width, screen_height,
                    self.profile.background_color,
                )
                paths.append(self.save_png(window, spec.screen_segment_path(number)))
            except (OSError, ValueError) as e:
                raise FrameRenderingError(
                    f"Failed to render screen segment {number}: {e}",
                    frame_index=number,
                    file_path=str(spec.input_path),
                ) from e
        return paths
