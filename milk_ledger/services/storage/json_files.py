"""
JSON File Storage Implementation

DESIGN DECISION: Each key is stored as its own ``<key>.json`` file in a
data directory because:
1. The user can open and back up their data with any text editor
2. No database setup required
3. Replacing one file never touches the other collections

TRADEOFFS:
- Not suitable for large data sets (we're fine for one household)
- No locking: two processes writing the same key means last write wins
- Writes are atomic per key (temp file + rename), not across keys
"""

import os
import re
import tempfile
from pathlib import Path
from typing import Optional

from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from milk_ledger.services.storage.interface import (
    BackendUnavailableError,
    KeyValueBackend,
)


_UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9._-]")


class JsonFileBackend(KeyValueBackend):
    """
    Directory-of-files implementation of the key-value backend.

    Transient write errors are retried with exponential backoff before
    being reported as BackendUnavailableError.
    """

    def __init__(
        self,
        data_dir: Path,
        write_attempts: int = 3,
        retry_wait_multiplier: float = 0.1,
    ):
        self._data_dir = Path(data_dir)
        self._write = retry(
            retry=retry_if_exception_type(OSError),
            stop=stop_after_attempt(write_attempts),
            wait=wait_exponential(multiplier=retry_wait_multiplier, max=2),
            reraise=True,
        )(self._write_once)

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def path_for(self, key: str) -> Path:
        """File that holds ``key``."""
        return self._data_dir / f"{_UNSAFE_KEY_CHARS.sub('_', key)}.json"

    def get(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            raise BackendUnavailableError(f"Failed to read {path}: {e}")

    def set(self, key: str, value: str) -> None:
        try:
            self._write(self.path_for(key), value)
        except OSError as e:
            raise BackendUnavailableError(f"Failed to write {key}: {e}")

    def remove(self, key: str) -> None:
        try:
            self.path_for(key).unlink(missing_ok=True)
        except OSError as e:
            raise BackendUnavailableError(f"Failed to remove {key}: {e}")

    def _write_once(self, path: Path, value: str) -> None:
        """Write to a temp file in the same directory, then rename over ``path``."""
        self._data_dir.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self._data_dir,
            prefix=f".{path.stem}-",
            suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(value)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
