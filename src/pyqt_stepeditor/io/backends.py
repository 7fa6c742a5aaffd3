"""
Byte store backends.

DiskByteStore persists a single document on disk; MemoryByteStore keeps it
in memory for embedding hosts and tests.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from pyqt_stepeditor.io.exceptions import SaveFailureError, StorageResolutionError
from pyqt_stepeditor.protocols.editor_config import EditorConfig, get_editor_config

logger = logging.getLogger(__name__)


def resolve_save_path(config: Optional[EditorConfig] = None) -> Path:
    """
    Resolve where the step sequence is persisted.

    Args:
        config: Editor configuration (defaults to the global config)

    Returns:
        config.save_dir / config.save_file_name, with save_dir defaulting to
        the user data directory
    """
    config = config or get_editor_config()
    if config.save_dir:
        save_dir = Path(config.save_dir).expanduser()
    else:
        save_dir = Path.home() / ".local" / "share" / "pyqt_stepeditor"
    return save_dir / config.save_file_name


class DiskByteStore:
    """Single file on disk, replaced atomically on every write."""

    def __init__(self, path: Union[str, Path]):
        """
        Initialize the disk store.

        Args:
            path: File holding the document

        Raises:
            StorageResolutionError: If path names an existing directory
        """
        self._path = Path(path)
        if self._path.is_dir():
            raise StorageResolutionError(f"Save location {self._path} is a directory")
        logger.debug(f"DiskByteStore initialized at {self._path}")

    @property
    def location(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def read_bytes(self) -> bytes:
        return self._path.read_bytes()

    def write_bytes(self, data: bytes) -> None:
        """Write data to a temp file next to the target, then replace the target."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self._path.name}.", suffix=".tmp",
                                        dir=str(self._path.parent))
        try:
            with os.fdopen(fd, 'wb') as f:
                f.write(data)
            os.replace(tmp_name, self._path)
        except BaseException:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
            raise


class MemoryByteStore:
    """In-memory document. Counts writes so callers can observe saves."""

    def __init__(self, data: Optional[bytes] = None, read_only: bool = False):
        self.data = data
        self.read_only = read_only
        self.write_count = 0

    @property
    def location(self) -> str:
        return f"memory://{id(self):x}"

    def exists(self) -> bool:
        return self.data is not None

    def read_bytes(self) -> bytes:
        if self.data is None:
            raise FileNotFoundError(f"No document stored at {self.location}")
        return self.data

    def write_bytes(self, data: bytes) -> None:
        if self.read_only:
            raise SaveFailureError(f"{self.location} is read-only")
        self.data = bytes(data)
        self.write_count += 1
