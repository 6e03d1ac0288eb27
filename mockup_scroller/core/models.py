"""
Data models shared by the frame-sequence synthesis engine and its callers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass(frozen=True)
class Segment:
    """Vertical window ``[start, end)`` into the resized content image."""
    start: int
    end: int

    @property
    def height(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class FrameRenderSpec:
    """Identifies one processing job: which file, under what name, written where."""
    input_path: Path
    base_name: str
    out_dir: Path

    @property
    def gif_path(self) -> Path:
        return self.out_dir / f"{self.base_name}.framed.scroll.gif"

    def framed_segment_path(self, index: int) -> Path:
        return self.out_dir / f"{self.base_name}.framed.{index}.png"

    def screen_segment_path(self, index: int) -> Path:
        return self.out_dir / f"{self.base_name}.screen.{index}.png"

    @property
    def frame_pattern(self) -> str:
        """printf-style frame name pattern understood by ffmpeg's image2 demuxer."""
        return f"{self.base_name}.%06d.png"

    def frame_name(self, index: int) -> str:
        return f"{self.base_name}.{index:06d}.png"


@dataclass
class RenderResult:
    """Files produced for a single job."""
    spec: FrameRenderSpec
    frames_count: int = 0
    fps: int = 0
    gif_path: Optional[Path] = None
    framed_segments: List[Path] = field(default_factory=list)
    screen_segments: List[Path] = field(default_factory=list)

    @property
    def output_files(self) -> List[Path]:
        files: List[Path] = []
        if self.gif_path is not None:
            files.append(self.gif_path)
        files.extend(self.framed_segments)
        files.extend(self.screen_segments)
        return files


@dataclass
class BatchSummary:
    """Aggregate outcome of a run over many input files."""
    processed: int = 0
    succeeded: int = 0
    failed: int = 0
    results: List[RenderResult] = field(default_factory=list)

    @property
    def exit_code(self) -> int:
        return 4 if self.failed > 0 else 0
