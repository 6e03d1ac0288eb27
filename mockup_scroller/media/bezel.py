"""
Procedural device artwork: the bezel overlay and the rounded screen mask.

Both are drawn with Pillow from the device profile geometry, so a profile
change never needs new image assets.
"""

from functools import lru_cache
from typing import Tuple
import logging

from PIL import Image, ImageColor, ImageDraw

from mockup_scroller.core.device_profile import DeviceProfile, Rect

logger = logging.getLogger(__name__)

GLASS_INSET = 20
GLASS_STROKE = 4
SCREEN_STROKE = 2
SCREEN_STROKE_ALPHA = 128


def _inclusive_box(rect: Rect, inset: int = 0) -> Tuple[int, int, int, int]:
    # ImageDraw treats the second corner as inclusive
    return (
        rect.x + inset,
        rect.y + inset,
        rect.x + rect.width - 1 - inset,
        rect.y + rect.height - 1 - inset,
    )


def rgba(color: str, alpha: int = 255) -> Tuple[int, int, int, int]:
    r, g, b = ImageColor.getrgb(color)[:3]
    return (r, g, b, alpha)


@lru_cache(maxsize=8)
def build_screen_mask(profile: DeviceProfile) -> Image.Image:
    """White rounded rectangle on black, viewport sized (mode ``L``)."""
    mask = Image.new('L', profile.viewport_size, 0)
    draw = ImageDraw.Draw(mask)
    draw.rounded_rectangle(
        (0, 0, profile.viewport.width - 1, profile.viewport.height - 1),
        radius=profile.screen_corner_radius,
        fill=255,
    )
    return mask


@lru_cache(maxsize=8)
def build_bezel(profile: DeviceProfile) -> Image.Image:
    """
    Device body with the screen cut out, plus glass and screen border strokes.

    Returns:
        Transparent RGBA image the size of the canvas
    """
    body_alpha = Image.new('L', profile.canvas_size, 0)
    draw = ImageDraw.Draw(body_alpha)
    draw.rounded_rectangle(_inclusive_box(profile.body), radius=profile.body_corner_radius, fill=255)
    draw.rounded_rectangle(_inclusive_box(profile.viewport), radius=profile.screen_corner_radius, fill=0)

    bezel = Image.new('RGBA', profile.canvas_size, rgba(profile.body_color))
    bezel.putalpha(body_alpha)

    strokes = Image.new('RGBA', profile.canvas_size, (0, 0, 0, 0))
    draw = ImageDraw.Draw(strokes)
    if min(profile.body.width, profile.body.height) > 2 * GLASS_INSET:
        draw.rounded_rectangle(
            _inclusive_box(profile.body, inset=GLASS_INSET),
            radius=max(0, profile.body_corner_radius - GLASS_INSET // 2),
            outline=rgba(profile.border_color),
            width=GLASS_STROKE,
        )
    draw.rounded_rectangle(
        _inclusive_box(profile.viewport),
        radius=profile.screen_corner_radius,
        outline=rgba(profile.border_color, SCREEN_STROKE_ALPHA),
        width=SCREEN_STROKE,
    )
    bezel.alpha_composite(strokes)

    logger.debug(f"Built bezel for {profile.name} ({profile.canvas_width}x{profile.canvas_height})")
    return bezel
