"""
Filename sanitization utilities for output naming.
"""
import re
from pathlib import Path
from typing import AbstractSet, Union

DEFAULT_MAX_LENGTH = 100


def sanitize_basename(file_path: Union[str, Path], max_length: int = DEFAULT_MAX_LENGTH) -> str:
    """
    Derive a filesystem- and URL-safe base name from an input path.

    The extension is dropped, whitespace runs become underscores and anything
    outside ``[A-Za-z0-9_-]`` is removed.

    Examples:
        >>> sanitize_basename("designs/Home Screen v2.png")
        'Home_Screen_v2'
        >>> sanitize_basename("über-flow (final).png")
        'ber-flow_final'
    """
    stem = Path(file_path).stem
    sanitized = re.sub(r'\s+', '_', stem)
    sanitized = re.sub(r'[^a-zA-Z0-9_-]', '', sanitized)
    sanitized = sanitized[:max_length]
    return sanitized or "untitled"


def unique_basename(base_name: str, taken: AbstractSet[str]) -> str:
    """
    Return ``base_name``, or ``base_name-2``, ``base_name-3``... if it is taken.

    Examples:
        >>> unique_basename("home", {"home", "home-2"})
        'home-3'
    """
    if base_name not in taken:
        return base_name
    counter = 2
    while f"{base_name}-{counter}" in taken:
        counter += 1
    return f"{base_name}-{counter}"
