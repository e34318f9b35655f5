from dataclasses import dataclass
from pathlib import Path


DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class StoredFileInfo:
    name: str
    path: Path
    size_bytes: int
    content_type: str = DEFAULT_CONTENT_TYPE
