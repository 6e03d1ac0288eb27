"""
Scratch space for intermediate render artifacts.

Per-frame PNGs and the encoder palette only live while one input file is
processed. ``TempFileManager`` hands out scratch directories as context
managers that are removed on exit, even when rendering fails, and keeps a
registry so anything left behind is removed at interpreter exit.

Usage:
    manager = get_temp_manager()

    with manager.create_temp_dir(base_dir=out_dir, prefix="home.frames.") as frames_dir:
        ...  # write frames, encode
"""
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, List, Optional
import atexit
import logging
import shutil
import tempfile

logger = logging.getLogger(__name__)


class TempFileManager:
    """Track scratch directories and remove them reliably."""

    def __init__(self, prefix: str = "mockup_scroller_", base_dir: Optional[Path] = None):
        """
        Args:
            prefix: Default prefix for scratch directories
            base_dir: Default parent directory (system temp dir if None)
        """
        self.prefix = prefix
        self.base_dir = Path(base_dir) if base_dir else Path(tempfile.gettempdir())
        self.temp_dirs: List[Path] = []

        atexit.register(self.cleanup_all)

    @contextmanager
    def create_temp_dir(
        self,
        prefix: Optional[str] = None,
        base_dir: Optional[Path] = None,
    ) -> Generator[Path, None, None]:
        """
        Create a scratch directory removed with all its contents on exit.

        Args:
            prefix: Override for the directory name prefix
            base_dir: Override for the parent directory (created if missing)
        """
        parent = Path(base_dir) if base_dir else self.base_dir
        parent.mkdir(parents=True, exist_ok=True)
        temp_dir: Optional[Path] = None

        try:
            temp_dir = Path(tempfile.mkdtemp(prefix=prefix or self.prefix, dir=str(parent)))
            self.temp_dirs.append(temp_dir)
            yield temp_dir
        finally:
            if temp_dir is not None:
                self._remove_dir(temp_dir)

    def _remove_dir(self, temp_dir: Path) -> None:
        if temp_dir.exists():
            try:
                shutil.rmtree(temp_dir)
                logger.debug(f"Cleaned up temp dir: {temp_dir}")
            except OSError as e:
                logger.warning(f"Failed to cleanup temp dir {temp_dir}: {e}")
                return
        if temp_dir in self.temp_dirs:
            self.temp_dirs.remove(temp_dir)

    def cleanup_all(self) -> None:
        """Remove every tracked directory that still exists."""
        for temp_dir in self.temp_dirs[:]:
            self._remove_dir(temp_dir)
        self.temp_dirs.clear()


_global_manager: Optional[TempFileManager] = None


def get_temp_manager() -> TempFileManager:
    """Process-wide TempFileManager instance."""
    global _global_manager
    if _global_manager is None:
        _global_manager = TempFileManager()
    return _global_manager
