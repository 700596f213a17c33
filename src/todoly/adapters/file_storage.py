"""File-backed storage for the encoded task collection."""

from __future__ import annotations

import contextlib
import os
import stat
import tempfile
from pathlib import Path


class FileStorage:
    """Read and atomically replace a single data file."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def read(self) -> bytes | None:
        """Return the file contents, or None if the file does not exist."""
        try:
            return self.path.read_bytes()
        except FileNotFoundError:
            return None

    def write(self, data: bytes) -> None:
        """Replace the file contents.

        The data is written to a temporary file next to the target and then
        moved into place, so a failed write never truncates existing data.

        Raises:
            OSError: If the directory or file cannot be written
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.chmod(tmp_name, _target_mode(self.path))
            os.replace(tmp_name, self.path)
        except BaseException:
            with contextlib.suppress(OSError):
                os.unlink(tmp_name)
            raise


def _target_mode(path: Path) -> int:
    """Permissions for the replacement file.

    An existing file keeps its mode; a new one gets the usual 0666 minus
    the process umask, as open() would give it.
    """
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask
