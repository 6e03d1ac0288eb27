"""
Input file discovery.

``--input`` is either a directory (its supported image files, non-recursive)
or a glob pattern (``**`` allowed). Tiny files are skipped since they cannot
be real screenshots.
"""

import glob
import logging
from pathlib import Path
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = ('.png', '.jpg', '.jpeg')
DEFAULT_MIN_FILE_BYTES = 1024


def _has_extension(path: Path, extensions: Iterable[str]) -> bool:
    return path.suffix.lower() in extensions


def resolve_input_files(
    input_spec: str,
    extensions: Optional[Iterable[str]] = None,
    min_file_bytes: int = DEFAULT_MIN_FILE_BYTES,
) -> List[Path]:
    """
    Resolve a directory or glob pattern into a sorted list of candidate images.

    Args:
        input_spec: Directory path or glob pattern
        extensions: Accepted (lower-case) suffixes
        min_file_bytes: Files smaller than this are ignored

    Returns:
        Sorted list of existing files
    """
    extensions = tuple(ext.lower() for ext in (extensions or DEFAULT_EXTENSIONS))
    root = Path(input_spec).expanduser()

    if root.is_dir():
        candidates = [
            p for p in root.iterdir()
            if p.is_file() and not p.name.startswith('.') and _has_extension(p, extensions)
        ]
    else:
        candidates = [
            Path(p) for p in glob.glob(str(root), recursive=True)
            if Path(p).is_file() and _has_extension(Path(p), extensions)
        ]

    files = []
    for path in sorted(candidates):
        size = path.stat().st_size
        if size < min_file_bytes:
            logger.debug(f"Skipping {path.name}: {size} bytes < {min_file_bytes}")
            continue
        files.append(path)

    return files
