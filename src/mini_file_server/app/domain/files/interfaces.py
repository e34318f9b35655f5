from pathlib import Path
from typing import AsyncIterable, Optional, Protocol, runtime_checkable

from mini_file_server.app.domain.files.entities import StoredFileInfo
from mini_file_server.app.domain.files.value_objects import StoredFileName


@runtime_checkable
class FileStorage(Protocol):
    _base_dir: Path

    async def ensure_root(self) -> None:
        ...

    async def save(
        self,
        *,
        name: StoredFileName,
        chunks: AsyncIterable[bytes],
    ) -> StoredFileInfo:
        """
        Replaces any existing file of the same name.
        Raises FailedToSaveFile when writing fails or the chunk stream breaks.
        """
        ...

    async def stat(self, *, name: StoredFileName) -> Optional[StoredFileInfo]:
        """
        None when no regular file with that name exists under the root.
        """
        ...
