"""
Media processing package for mockup-scroller.

This package handles input validation, device-framed frame compositing
and GIF encoding through ffmpeg.
"""

from .exceptions import (
    MediaValidationError,
    InputRejectedError,
    FrameRenderingError,
    GifEncodingError,
    EncoderNotFoundError
)
from .image_validator import ImageValidator, ImageMetadata
from .frame_compositor import FrameCompositor, resize_to_width
from .ffmpeg_utils import FfmpegGifEncoder, get_ffmpeg_version

__all__ = [
    'MediaValidationError',
    'InputRejectedError',
    'FrameRenderingError',
    'GifEncodingError',
    'EncoderNotFoundError',
    'ImageValidator',
    'ImageMetadata',
    'FrameCompositor',
    'resize_to_width',
    'FfmpegGifEncoder',
    'get_ffmpeg_version'
]
