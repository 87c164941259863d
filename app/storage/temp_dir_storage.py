import tempfile
import uuid
from collections.abc import Generator
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path

from app.logging.logger import Log
from app.storage.base import BaseDocumentStorage


def scratch_file_name(filename: str = "") -> str:
    """Collision-resistant name: UTC timestamp + random hex + original extension."""
    stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%f")
    suffix = Path(filename).suffix.lower() if filename else ""
    return f"{stamp}-{uuid.uuid4().hex}{suffix}"


class TempDirStorage(BaseDocumentStorage):
    """Stores files flat inside one directory owned by a single request."""

    def __init__(self, directory: Path) -> None:
        self._directory = directory

    @property
    def directory(self) -> Path:
        return self._directory

    @classmethod
    @contextmanager
    def session(cls, root: Path | None = None) -> Generator["TempDirStorage", None, None]:
        """Yield storage backed by a fresh temporary directory.

        The directory and everything in it is removed when the block exits,
        on success and on error alike.
        """
        if root is not None:
            root.mkdir(parents=True, exist_ok=True)
        with tempfile.TemporaryDirectory(prefix="intake-", dir=root) as tmp:
            Log.debug(f"Opened scratch directory {tmp}")
            yield cls(Path(tmp))
        Log.debug(f"Removed scratch directory {tmp}")

    def save(self, data: bytes, filename: str = "") -> str:
        key = scratch_file_name(filename)
        (self._directory / key).write_bytes(data)
        return key

    def read(self, key: str) -> bytes:
        path = self._resolve(key)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        return path.read_bytes()

    def delete(self, key: str) -> None:
        self._resolve(key).unlink(missing_ok=True)

    def _resolve(self, key: str) -> Path:
        return self._directory / Path(key).name
