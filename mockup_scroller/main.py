"""
mockup-scroller - command line entry point

Frames full-page screenshots in a phone bezel and renders scrolling GIFs
plus fixed-height screenshot segments.

Exit codes:
    0  every input succeeded
    2  invalid arguments or no valid inputs found
    3  ffmpeg not found
    4  unhandled error, upload failure, or at least one input failed
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import ValidationError

from mockup_scroller import settings
from mockup_scroller.core.scroll_sequencer import MotionModel
from mockup_scroller.media.exceptions import EncoderNotFoundError
from mockup_scroller.media.ffmpeg_utils import get_ffmpeg_version
from mockup_scroller.services.render_pipeline import RenderOptions, ScrollRenderPipeline
from mockup_scroller.storage.exceptions import StorageError
from mockup_scroller.utils.file_discovery import resolve_input_files

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_INPUT = 2
EXIT_NO_ENCODER = 3
EXIT_FAILURE = 4


def setup_logging(verbose: bool = False, log_file: Optional[str] = None):
    """Setup console logging and, when configured, a detailed log file"""
    log_level = logging.DEBUG if verbose else logging.INFO

    detailed_formatter = logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)-20s | %(funcName)-15s:%(lineno)-4d | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    simple_formatter = logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(simple_formatter)
    handlers: List[logging.Handler] = [console_handler]

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_formatter)
        handlers.append(file_handler)

    logging.basicConfig(
        level=logging.DEBUG if log_file else log_level,
        handlers=handlers,
        force=True
    )
    for noisy in ('PIL', 'botocore', 'boto3', 's3transfer', 'urllib3'):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mockup-scroller",
        description="Frame page mockups in a phone bezel and create scrolling GIFs",
    )
    parser.add_argument("--input", required=True, metavar="GLOB_OR_DIR",
                        help="Input glob pattern or directory path")
    parser.add_argument("--out", required=True, metavar="DIR", help="Output directory")
    parser.add_argument("--speed", default="normal",
                        help="Scroll speed: slow, normal, fast (default: normal)")
    parser.add_argument("--motion", default=None,
                        help="Motion model: constant, uncapped, swipe (default: from config)")
    parser.add_argument("--no-segments", dest="segments", action="store_false",
                        help="Disable generation of individual screen segments")
    parser.add_argument("--screen-height", type=int, default=None, metavar="PIXELS",
                        help="Height of screen segments in pixels (default: 1600)")
    parser.add_argument("--upload-folder", default=None, metavar="NAME",
                        help="Upload outputs to the configured storage under this folder")
    parser.add_argument("--config", default=None, help="Path to a YAML config file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def build_options(args: argparse.Namespace) -> RenderOptions:
    """
    Validate parsed arguments against configuration defaults.

    Raises:
        pydantic.ValidationError: If any option is out of range
    """
    return RenderOptions(
        out_dir=Path(args.out).expanduser().resolve(),
        speed=args.speed,
        motion=args.motion or settings.get_default_motion(),
        segments=args.segments and settings.get_segments_enabled(),
        screen_width=settings.get_screen_width(),
        screen_height=args.screen_height if args.screen_height is not None else settings.get_screen_height(),
        upload_folder=args.upload_folder,
    )


def run(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return its exit code"""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return EXIT_OK if e.code == 0 else EXIT_INVALID_INPUT

    load_dotenv(find_dotenv(usecwd=True))

    if args.config and not Path(args.config).expanduser().is_file():
        setup_logging(args.verbose)
        logger.error(f"ERROR: Config file not found: {args.config}")
        return EXIT_INVALID_INPUT
    try:
        settings.load(args.config)
    except (ValueError, yaml.YAMLError, OSError) as e:
        setup_logging(args.verbose)
        logger.error(f"ERROR: Invalid configuration: {e}")
        return EXIT_INVALID_INPUT
    setup_logging(args.verbose, settings.get_log_file())

    try:
        options = build_options(args)
    except (ValidationError, ValueError) as e:
        logger.error(f"ERROR: Invalid arguments: {e}")
        return EXIT_INVALID_INPUT

    try:
        ffmpeg_version = get_ffmpeg_version(settings.get_ffmpeg_binary(), settings.get_ffmpeg_version_timeout())
    except EncoderNotFoundError as e:
        logger.error(f"ERROR: {e}. Please install ffmpeg and ensure it is on your PATH.")
        logger.error("  macOS: brew install ffmpeg")
        logger.error("  Ubuntu/Debian: sudo apt-get install -y ffmpeg")
        logger.error("  Windows: winget install Gyan.FFmpeg")
        return EXIT_NO_ENCODER
    logger.info(f"ffmpeg version: {ffmpeg_version}")

    files = resolve_input_files(
        str(Path(args.input).expanduser()),
        extensions=settings.get_supported_extensions(),
        min_file_bytes=settings.get_min_file_bytes(),
    )
    if not files:
        logger.error("ERROR: No valid image files found matching the input pattern")
        return EXIT_INVALID_INPUT
    logger.info(f"Found {len(files)} image file(s) to process")

    try:
        pipeline = ScrollRenderPipeline(options)
        summary = pipeline.run(files)
    except EncoderNotFoundError as e:
        logger.error(f"ERROR: {e}")
        return EXIT_NO_ENCODER
    except StorageError as e:
        logger.error(f"ERROR: Upload aborted: {e}")
        return EXIT_FAILURE
    except Exception as e:
        logger.exception(f"ERROR: Unhandled exception: {e}")
        return EXIT_FAILURE

    return summary.exit_code


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
