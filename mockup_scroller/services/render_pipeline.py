"""
Orchestrates the per-file render jobs.

Each input is validated, resized to the device viewport width, sequenced
and partitioned, composited frame by frame into a scratch directory,
encoded to a GIF and optionally published. Files are processed one at a
time; one file failing never stops the batch, but an upload failure does.
"""

import logging
import time
from pathlib import Path
from typing import Literal, Optional, Sequence, Set

from pydantic import BaseModel, Field

from mockup_scroller import settings
from mockup_scroller.core.device_profile import DeviceProfile
from mockup_scroller.core.models import BatchSummary, FrameRenderSpec, RenderResult
from mockup_scroller.core.scroll_sequencer import (
    DEFAULT_SWIPE_PATTERN,
    FPS,
    MotionConfig,
    MotionModel,
    compute_offsets,
    describe_sequence,
)
from mockup_scroller.core.segment_partitioner import partition
from mockup_scroller.media.exceptions import EncoderNotFoundError, InputRejectedError
from mockup_scroller.media.ffmpeg_utils import FfmpegGifEncoder
from mockup_scroller.media.frame_compositor import FrameCompositor, resize_to_width
from mockup_scroller.media.image_validator import ImageValidator
from mockup_scroller.services.upload_service import UploadService
from mockup_scroller.utils.filename_utils import sanitize_basename, unique_basename
from mockup_scroller.utils.temp_file_manager import TempFileManager, get_temp_manager

logger = logging.getLogger(__name__)


class RenderOptions(BaseModel):
    """Validated options for one run."""
    out_dir: Path
    speed: Literal["slow", "normal", "fast"] = "normal"
    motion: MotionModel = MotionModel.CONSTANT
    segments: bool = True
    screen_width: int = Field(750, gt=0)
    screen_height: int = Field(1600, gt=0)
    upload_folder: Optional[str] = Field(None, min_length=1)


class ScrollRenderPipeline:
    """Render framed scroll GIFs and segment screenshots for a batch of inputs."""

    def __init__(
        self,
        options: RenderOptions,
        profile: Optional[DeviceProfile] = None,
        motion_config: Optional[MotionConfig] = None,
        compositor: Optional[FrameCompositor] = None,
        encoder: Optional[FfmpegGifEncoder] = None,
        validator: Optional[ImageValidator] = None,
        uploader: Optional[UploadService] = None,
        temp_manager: Optional[TempFileManager] = None,
    ):
        self.options = options
        self.profile = profile or settings.get_device_profile()
        self.motion_config = motion_config or MotionConfig(
            speed=settings.get_speed_tier(options.speed),
            swipe_pattern=settings.get_swipe_pattern() or DEFAULT_SWIPE_PATTERN,
        )
        self.compositor = compositor or FrameCompositor.from_settings(self.profile)
        self.encoder = encoder or FfmpegGifEncoder.from_settings()
        self.validator = validator or ImageValidator.from_settings()
        self.temp_manager = temp_manager or get_temp_manager()
        if options.upload_folder and uploader is None:
            uploader = UploadService()
        self.uploader = uploader
        self._base_names: Set[str] = set()

    # ---------------------------------------------------------------- rendering

    def render(self, spec: FrameRenderSpec) -> RenderResult:
        """Produce every output for one validated input."""
        viewport_width, viewport_height = self.profile.viewport_size
        content = resize_to_width(spec.input_path, viewport_width)
        scrollable = max(0, content.height - viewport_height)

        offsets = compute_offsets(self.options.motion, scrollable, viewport_height, self.motion_config)
        stats = describe_sequence(offsets)
        logger.debug(
            f"[{self.options.motion.value}/{self.options.speed}] {spec.base_name}: "
            f"scroll {scrollable}px over {stats['frames']} frames "
            f"({stats['duration_seconds']:.1f}s)"
        )

        result = RenderResult(spec=spec, fps=FPS)
        with self.temp_manager.create_temp_dir(prefix=f"{spec.base_name}.frames.", base_dir=spec.out_dir) as frames_dir:
            result.frames_count = self.compositor.render_scroll_frames(content, offsets, frames_dir, spec)
            result.gif_path = self.encoder.encode(
                frames_dir,
                spec.frame_pattern,
                FPS,
                spec.gif_path,
                palette_path=spec.out_dir / f"{spec.base_name}.palette.png",
            )

        if self.options.segments:
            result.framed_segments = self.compositor.render_framed_segments(
                content, partition(content.height, viewport_height), spec
            )

            if self.options.screen_width == content.width:
                screen_content = content
            else:
                screen_content = resize_to_width(spec.input_path, self.options.screen_width)
            result.screen_segments = self.compositor.render_screen_segments(
                screen_content,
                partition(screen_content.height, self.options.screen_height),
                spec,
                self.options.screen_height,
            )

        return result

    # ---------------------------------------------------------------- batch

    def _claim_base_name(self, input_path: Path) -> str:
        """Sanitized base name, suffixed when an earlier input already produced it."""
        sanitized = sanitize_basename(input_path)
        base_name = unique_basename(sanitized, self._base_names)
        if base_name != sanitized:
            logger.warning(
                f"Output name collision for {input_path.name}: writing as {base_name}"
            )
        self._base_names.add(base_name)
        return base_name

    def process_one(self, input_path: Path) -> Optional[RenderResult]:
        """
        Validate, render and optionally upload one input.

        Returns:
            The render result, or None if the file was rejected or failed

        Raises:
            EncoderNotFoundError: ffmpeg disappeared mid-run
            UploadError: Publishing an output failed
        """
        input_path = Path(input_path)
        logger.info(f"PROCESSING: {input_path.resolve()}")
        started = time.monotonic()

        try:
            self.validator.validate(input_path)
            spec = FrameRenderSpec(
                input_path=input_path,
                base_name=self._claim_base_name(input_path),
                out_dir=self.options.out_dir,
            )
            result = self.render(spec)
        except InputRejectedError as e:
            logger.warning(f"REJECTED: {input_path} - {e.message}")
            return None
        except EncoderNotFoundError:
            raise
        except Exception as e:
            elapsed = time.monotonic() - started
            logger.error(f"ERROR: {input_path.name} - {e} ({elapsed:.1f}s)")
            logger.debug("Render failure details", exc_info=True)
            return None

        elapsed = time.monotonic() - started
        kinds = ["gif"]
        if result.framed_segments:
            kinds.append(f"{len(result.framed_segments)} framed")
        if result.screen_segments:
            kinds.append(f"{len(result.screen_segments)} screen")
        logger.info(f"DONE: {spec.base_name} ({', '.join(kinds)}) in {elapsed:.1f}s")

        if self.uploader is not None and self.options.upload_folder:
            for upload in self.uploader.upload_output_files(result.output_files, self.options.upload_folder):
                logger.info(f"  {upload.local.name} -> {upload.url}")

        return result

    def run(self, input_files: Sequence[Path]) -> BatchSummary:
        """Process files strictly in order and summarize the outcome."""
        self.options.out_dir.mkdir(parents=True, exist_ok=True)
        summary = BatchSummary()

        for input_path in input_files:
            summary.processed += 1
            result = self.process_one(input_path)
            if result is None:
                summary.failed += 1
            else:
                summary.succeeded += 1
                summary.results.append(result)

        logger.info(
            f"Processed: {summary.processed} | Succeeded: {summary.succeeded} | Failed: {summary.failed}"
        )
        return summary
