"""
Key-value backends for the prototype store.

A backend only knows how to read and replace one text document per
key, and how to report a revision marker for that key. The store does all
parsing and validation. Every write replaces the whole document; there is no
partial write and no locking across processes.
"""

import os
import tempfile
from pathlib import Path
from typing import Protocol


class StorageBackend(Protocol):
    name: str

    def read(self, key: str) -> str | None: ...

    def write(self, key: str, value: str) -> None: ...

    def revision(self, key: str) -> int | None: ...


class MemoryBackend:
    """Process-local backend. Contents vanish with the process."""

    name = "memory"

    def __init__(self) -> None:
        self._documents: dict[str, str] = {}
        self._revisions: dict[str, int] = {}

    def read(self, key: str) -> str | None:
        return self._documents.get(key)

    def write(self, key: str, value: str) -> None:
        self._documents[key] = value
        self._revisions[key] = self._revisions.get(key, 0) + 1

    def revision(self, key: str) -> int | None:
        return self._revisions.get(key)


class FileBackend:
    """One JSON file per key inside a data directory.

    Writes go to a temp file in the same directory and are moved into place
    with os.replace, so readers see either the old or the new document.
    The revision is the file's modification time in nanoseconds.
    """

    name = "file"

    def __init__(self, data_dir: str | Path) -> None:
        self.data_dir = Path(data_dir)

    def _path(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def read(self, key: str) -> str | None:
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def write(self, key: str, value: str) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{key}.", suffix=".tmp", dir=self.data_dir)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(value)
            os.replace(tmp_name, self._path(key))
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def revision(self, key: str) -> int | None:
        try:
            return self._path(key).stat().st_mtime_ns
        except FileNotFoundError:
            return None
