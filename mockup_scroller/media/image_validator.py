"""
Input image validation and metadata extraction for mockup-scroller.

Inputs are checked by file signature (not just extension) and by their
pixel dimensions before any rendering work starts.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Union
import logging

from PIL import Image, UnidentifiedImageError

from .exceptions import InputRejectedError

logger = logging.getLogger(__name__)

PNG_SIGNATURE = b'\x89PNG\r\n\x1a\n'
JPEG_SIGNATURE = b'\xff\xd8\xff'

SIGNATURES: Dict[str, bytes] = {
    'png': PNG_SIGNATURE,
    'jpeg': JPEG_SIGNATURE,
}


@dataclass
class ImageMetadata:
    """Input image metadata"""
    path: str
    format_name: str
    width: int
    height: int
    file_size: int


def detect_format(file_path: Union[str, Path]) -> Optional[str]:
    """Return the format whose magic bytes start the file, or None."""
    try:
        with open(file_path, 'rb') as f:
            header = f.read(8)
    except OSError as e:
        logger.debug(f"Cannot read header of {file_path}: {e}")
        return None

    for name, signature in SIGNATURES.items():
        if header.startswith(signature):
            return name
    return None


def load_metadata(file_path: Union[str, Path]) -> ImageMetadata:
    """
    Read width and height without decoding the pixel data.

    Raises:
        InputRejectedError: If the file cannot be identified as an image, or
            exceeds Pillow's decompression bomb pixel limit
    """
    path = Path(file_path)
    try:
        with Image.open(path) as img:
            width, height = img.size
            format_name = (img.format or '').lower()
    except Image.DecompressionBombError as e:
        raise InputRejectedError(f"Image too large to decode: {e}", file_path=str(path)) from e
    except (UnidentifiedImageError, OSError) as e:
        raise InputRejectedError(f"Unable to read image dimensions: {e}", file_path=str(path)) from e

    return ImageMetadata(
        path=str(path),
        format_name=format_name,
        width=width,
        height=height,
        file_size=path.stat().st_size,
    )


class ImageValidator:
    """Validate screenshot inputs before rendering"""

    def __init__(self, min_width: int = 300, min_height: int = 500, max_height: int = 20000):
        self.min_width = min_width
        self.min_height = min_height
        self.max_height = max_height

    @classmethod
    def from_settings(cls) -> "ImageValidator":
        from mockup_scroller import settings
        return cls(**settings.get_dimension_limits())

    def validate(self, file_path: Union[str, Path]) -> ImageMetadata:
        """
        Validate an input image and return its metadata

        Raises:
            InputRejectedError: If the file is missing, not a supported image,
                or its dimensions are out of range
        """
        path = str(file_path)
        if not Path(path).is_file():
            raise InputRejectedError("Input file not found", file_path=path)

        format_name = detect_format(path)
        if format_name is None:
            raise InputRejectedError("Not a valid PNG or JPEG file", file_path=path)

        meta = load_metadata(path)

        if meta.width < self.min_width:
            raise InputRejectedError(
                f"Width {meta.width} < {self.min_width}px minimum", file_path=path
            )
        if meta.height < self.min_height or meta.height > self.max_height:
            raise InputRejectedError(
                f"Height {meta.height} outside [{self.min_height}, {self.max_height}] range",
                file_path=path
            )

        logger.debug(f"Validated {Path(path).name}: {meta.width}x{meta.height} {format_name}")
        return meta
