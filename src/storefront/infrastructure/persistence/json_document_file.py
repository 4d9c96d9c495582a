"""A JSON file holding a list of documents.

Shared by the JSON repositories. Reads and writes go through one lock per
file path so a compare-then-write sequence in a repository cannot
interleave with another thread's write to the same file.
"""

from __future__ import annotations

import json
import os
import threading
from pathlib import Path

from storefront.domain.exceptions import StorageError

_locks: dict[Path, threading.RLock] = {}
_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    with _locks_guard:
        return _locks.setdefault(path, threading.RLock())


class JsonDocumentFile:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path.resolve()
        self.lock = _lock_for(self._file_path)
        self._ensure_file()

    @property
    def path(self) -> Path:
        return self._file_path

    def load(self) -> list[dict]:
        with self.lock:
            try:
                raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            except (OSError, json.JSONDecodeError) as exc:
                raise StorageError(f"Could not read {self._file_path.name}", exc) from exc
        if not isinstance(raw, list):
            raise StorageError(f"{self._file_path.name} must contain a JSON list")
        return raw

    def persist(self, records: list[dict]) -> None:
        """Replace the file contents in one rename so readers never see half a file."""
        tmp_path = self._file_path.with_suffix(self._file_path.suffix + ".tmp")
        with self.lock:
            try:
                tmp_path.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")
                os.replace(tmp_path, self._file_path)
            except OSError as exc:
                raise StorageError(f"Could not write {self._file_path.name}", exc) from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            try:
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
                self._file_path.write_text("[]", encoding="utf-8")
            except OSError as exc:
                raise StorageError(f"Could not create {self._file_path.name}", exc) from exc
