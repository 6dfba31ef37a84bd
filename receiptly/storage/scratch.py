"""Scoped temporary files for upload bytes that need to live on disk."""

import re
import tempfile
import time
import uuid
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

from receiptly.logging.logger import Log
from receiptly.storage.models import ScratchArtifact

_UNSAFE_CHARS_RE = re.compile(r"[^A-Za-z0-9_-]")


def scratch_file_name(caller_id: str, filename: str) -> str:
    """Build a collision-free name: receipt_{caller}_{ms}_{token}{.ext}"""
    caller = _UNSAFE_CHARS_RE.sub("-", caller_id) or "anonymous"
    timestamp = int(time.time() * 1000)
    token = uuid.uuid4().hex[:12]
    extension = _UNSAFE_CHARS_RE.sub("", Path(filename).suffix.lstrip(".")).lower()
    suffix = f".{extension}" if extension else ""
    return f"receipt_{caller}_{timestamp}_{token}{suffix}"


class ScratchStorage:
    """Acquires and releases scratch files in a shared directory."""

    DEFAULT_DIR_NAME = "receiptly-uploads"

    def __init__(self, root: Path | None = None) -> None:
        self._root = (
            root
            if root is not None
            else Path(tempfile.gettempdir()) / self.DEFAULT_DIR_NAME
        )

    @property
    def root(self) -> Path:
        return self._root

    def ensure_dir(self) -> None:
        """Create the scratch directory if missing. Safe to call concurrently."""
        self._root.mkdir(parents=True, exist_ok=True)

    def acquire(self, content: bytes, caller_id: str, filename: str) -> ScratchArtifact:
        """Write bytes to a new uniquely named scratch file."""
        self.ensure_dir()
        path = self._root / scratch_file_name(caller_id, filename)
        fh = path.open("xb")
        try:
            with fh:
                fh.write(content)
        except BaseException:
            path.unlink(missing_ok=True)
            raise
        Log.debug(f"Scratch file written: {path}", size=len(content))
        return ScratchArtifact(path=path)

    def release(self, artifact: ScratchArtifact) -> None:
        """Delete the scratch file. Errors are logged, never raised."""
        if artifact.released:
            return
        artifact.released = True
        try:
            artifact.path.unlink()
            Log.info(f"Temporary file deleted: {artifact.path}")
        except OSError as exc:
            Log.warning(f"Failed to delete temporary file {artifact.path}: {exc}")

    @contextmanager
    def scratch_file(
        self,
        content: bytes,
        caller_id: str,
        filename: str,
    ) -> Generator[ScratchArtifact, None, None]:
        """Yield a scratch artifact that is released on every exit path."""
        artifact = self.acquire(content, caller_id, filename)
        try:
            yield artifact
        finally:
            self.release(artifact)
