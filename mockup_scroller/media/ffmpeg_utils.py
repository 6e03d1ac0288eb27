"""
FFmpeg utilities for mockup-scroller

Goals
- Detect a usable ffmpeg binary before any work starts
- Turn a directory of numbered PNG frames into a palette-optimized GIF

GIF encoding is two passes: ``palettegen`` builds a palette from the whole
frame sequence, then ``paletteuse`` applies it with dithering while scaling
to the output width. The palette is a transient file removed afterwards.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Optional

import ffmpeg

from .exceptions import EncoderNotFoundError, GifEncodingError

logger = logging.getLogger(__name__)


# --------------------------- Binary detection ---------------------------

def get_ffmpeg_version(binary: str = "ffmpeg", timeout: int = 10) -> str:
    """
    Return the first line of ``ffmpeg -version``.

    Raises:
        EncoderNotFoundError: If the binary is missing or does not run
    """
    if shutil.which(binary) is None:
        raise EncoderNotFoundError(f"{binary} not found on PATH")

    try:
        completed = subprocess.run(
            [binary, "-version"],
            capture_output=True,
            text=True,
            check=True,
            timeout=timeout,
        )
    except (OSError, subprocess.CalledProcessError, subprocess.TimeoutExpired) as e:
        raise EncoderNotFoundError(f"{binary} is not runnable: {e}") from e

    lines = (completed.stdout or "").splitlines()
    return lines[0] if lines else ""


def _stderr_text(error: ffmpeg.Error) -> str:
    if not error.stderr:
        return str(error)
    if isinstance(error.stderr, bytes):
        return error.stderr.decode('utf-8', errors='replace')
    return str(error.stderr)


# --------------------------- GIF encoder ---------------------------

class FfmpegGifEncoder:
    """Encode numbered frames into a GIF with a generated palette"""

    def __init__(
        self,
        binary: str = "ffmpeg",
        gif_width: int = 800,
        dither: str = "floyd_steinberg",
        stats_mode: str = "diff",
    ):
        self.binary = binary
        self.gif_width = gif_width
        self.dither = dither
        self.stats_mode = stats_mode

    @classmethod
    def from_settings(cls) -> "FfmpegGifEncoder":
        from mockup_scroller import settings
        return cls(
            binary=settings.get_ffmpeg_binary(),
            gif_width=settings.get_gif_width(),
            dither=settings.get_gif_dither(),
            stats_mode=settings.get_palette_stats_mode(),
        )

    def _run(self, stream, step: str, output_path: Path) -> None:
        try:
            ffmpeg.run(stream.overwrite_output(), cmd=self.binary, quiet=True)
        except ffmpeg.Error as e:
            stderr = _stderr_text(e)
            logger.error(
                f"❌ ffmpeg {step} FAILED\n"
                f"   Output: {output_path}\n"
                f"   Error: {stderr[-1000:]}"
            )
            raise GifEncodingError(f"ffmpeg {step} failed", stderr=stderr[-2000:], file_path=str(output_path)) from e
        except FileNotFoundError as e:
            raise EncoderNotFoundError(f"{self.binary} not found on PATH") from e

    def generate_palette(self, input_pattern: str, fps: int, palette_path: Path) -> Path:
        stream = (
            ffmpeg
            .input(input_pattern, framerate=fps)
            .filter('palettegen', stats_mode=self.stats_mode)
            .output(str(palette_path), vframes=1)
        )
        self._run(stream, "palettegen", palette_path)
        return palette_path

    def apply_palette(self, input_pattern: str, fps: int, palette_path: Path, output_path: Path) -> Path:
        frames = ffmpeg.input(input_pattern, framerate=fps)
        palette = ffmpeg.input(str(palette_path))
        scaled = frames.filter('scale', self.gif_width, -1)
        stream = (
            ffmpeg
            .filter([scaled, palette], 'paletteuse', dither=self.dither)
            .output(str(output_path))
        )
        self._run(stream, "paletteuse", output_path)
        return output_path

    def encode(
        self,
        frames_dir: Path,
        pattern: str,
        fps: int,
        output_path: Path,
        palette_path: Optional[Path] = None,
    ) -> Path:
        """
        Encode ``frames_dir/pattern`` (e.g. ``name.%06d.png``) into ``output_path``.

        Args:
            frames_dir: Directory holding the numbered frames
            pattern: printf-style frame filename pattern
            fps: Input frame rate
            output_path: GIF to write
            palette_path: Where to write the transient palette
                (default: next to the output, ``<stem>.palette.png``)

        Returns:
            Path to the written GIF

        Raises:
            GifEncodingError: If either ffmpeg pass fails
        """
        output_path = Path(output_path)
        input_pattern = str(Path(frames_dir) / pattern)
        if palette_path is None:
            stem = output_path.name.split('.')[0]
            palette_path = output_path.with_name(f"{stem}.palette.png")

        try:
            self.generate_palette(input_pattern, fps, palette_path)
            self.apply_palette(input_pattern, fps, palette_path, output_path)
        finally:
            if palette_path.exists():
                palette_path.unlink()

        logger.info(f"✅ Encoded GIF: {output_path.name}")
        return output_path
