from dataclasses import dataclass
from pathlib import Path


@dataclass
class ScratchArtifact:
    """Temporary on-disk copy of an upload, owned by one pipeline run."""

    path: Path
    released: bool = False
