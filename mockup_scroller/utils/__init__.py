"""
mockup-scroller utilities

Input discovery, output naming and scratch-space management.
"""

from mockup_scroller.utils.filename_utils import sanitize_basename, unique_basename
from mockup_scroller.utils.file_discovery import resolve_input_files
from mockup_scroller.utils.temp_file_manager import TempFileManager, get_temp_manager

__all__ = [
    "sanitize_basename",
    "unique_basename",
    "resolve_input_files",
    "TempFileManager",
    "get_temp_manager",
]
