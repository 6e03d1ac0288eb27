"""
Shared fixtures: a tiny device profile and synthetic screenshots.

Synthetic screenshots are noise so they compress poorly and pass the
minimum file size used by input discovery.
"""
import struct
import zlib
from pathlib import Path

import pytest
from PIL import Image

from mockup_scroller.core.device_profile import DeviceProfile, Rect


@pytest.fixture
def small_profile() -> DeviceProfile:
    return DeviceProfile(
        name="test-device",
        canvas_width=100,
        canvas_height=160,
        viewport=Rect(x=10, y=20, width=80, height=120),
        screen_corner_radius=8,
        background_color="#0B0F13",
        body=Rect(x=2, y=2, width=96, height=156),
        body_corner_radius=12,
        body_color="#0D0F12",
        border_color="#1A1E25",
    )


def write_screenshot(path: Path, width: int, height: int) -> Path:
    Image.effect_noise((width, height), 64).convert("RGB").save(path, format="PNG")
    return path


@pytest.fixture
def make_screenshot(tmp_path):
    """Factory writing a noisy PNG of the given size into ``tmp_path/inputs``."""
    inputs = tmp_path / "inputs"
    inputs.mkdir(exist_ok=True)

    def _make(name: str = "page.png", width: int = 300, height: int = 900) -> Path:
        return write_screenshot(inputs / name, width, height)

    return _make


def _png_chunk(kind: bytes, data: bytes) -> bytes:
    return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", zlib.crc32(kind + data))


@pytest.fixture
def make_oversized_png(tmp_path):
    """
    Factory writing a header-only PNG whose declared size is past Pillow's
    decompression bomb limit. No pixel data is stored, so the file is tiny.
    """
    inputs = tmp_path / "inputs"
    inputs.mkdir(exist_ok=True)

    def _make(name: str = "huge.png", width: int = 15000, height: int = 12000) -> Path:
        header = struct.pack(">IIBBBBB", width, height, 8, 2, 0, 0, 0)
        path = inputs / name
        path.write_bytes(
            b'\x89PNG\r\n\x1a\n'
            + _png_chunk(b'IHDR', header)
            + _png_chunk(b'IDAT', b'')
            + _png_chunk(b'IEND', b'')
        )
        return path

    return _make
