"""
Device geometry used to frame content.

A profile describes the canvas the device is drawn on, where the screen
(viewport) sits inside it, and the few values needed to draw the bezel.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True)
class DeviceProfile:
    name: str
    canvas_width: int
    canvas_height: int
    viewport: Rect
    screen_corner_radius: int
    background_color: str
    body: Rect
    body_corner_radius: int
    body_color: str
    border_color: str

    def __post_init__(self):
        if self.viewport.width <= 0 or self.viewport.height <= 0:
            raise ValueError(f"Viewport must have a positive size: {self.viewport}")
        if (self.viewport.x < 0 or self.viewport.y < 0
                or self.viewport.x + self.viewport.width > self.canvas_width
                or self.viewport.y + self.viewport.height > self.canvas_height):
            raise ValueError(
                f"Viewport {self.viewport} does not fit canvas "
                f"{self.canvas_width}x{self.canvas_height}"
            )

    @property
    def canvas_size(self) -> Tuple[int, int]:
        return (self.canvas_width, self.canvas_height)

    @property
    def viewport_size(self) -> Tuple[int, int]:
        return (self.viewport.width, self.viewport.height)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DeviceProfile":
        """Build a profile from the ``device`` configuration section."""
        canvas = data.get('canvas', {})
        viewport = data.get('viewport', {})
        body = data.get('body', {})
        return cls(
            name=data.get('name', 'custom'),
            canvas_width=int(canvas['width']),
            canvas_height=int(canvas['height']),
            viewport=Rect(
                int(viewport['x']), int(viewport['y']),
                int(viewport['width']), int(viewport['height'])
            ),
            screen_corner_radius=int(data.get('screen_corner_radius', 0)),
            background_color=data.get('background_color', '#000000'),
            body=Rect(
                int(body.get('x', 0)), int(body.get('y', 0)),
                int(body.get('width', canvas['width'])), int(body.get('height', canvas['height']))
            ),
            body_corner_radius=int(body.get('corner_radius', 0)),
            body_color=body.get('color', '#000000'),
            border_color=body.get('border_color', '#000000'),
        )


IPHONE_SE_PORTRAIT = DeviceProfile(
    name="iphone-se-portrait",
    canvas_width=1000,
    canvas_height=2000,
    viewport=Rect(x=125, y=333, width=750, height=1334),
    screen_corner_radius=40,
    background_color="#0B0F13",
    body=Rect(x=50, y=30, width=900, height=1940),
    body_corner_radius=100,
    body_color="#0D0F12",
    border_color="#1A1E25",
)
