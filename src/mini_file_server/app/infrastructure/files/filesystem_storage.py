from __future__ import annotations

import logging
import mimetypes
from pathlib import Path
from stat import S_ISREG
from typing import AsyncIterable, Optional

import anyio

from mini_file_server.app.domain.files import (
    DEFAULT_CONTENT_TYPE,
    FailedToSaveFile,
    StoredFileInfo,
    StoredFileName,
)

logger = logging.getLogger(__name__)


def guess_content_type(filename: str) -> str:
    content_type, _ = mimetypes.guess_type(filename, strict=False)
    return content_type or DEFAULT_CONTENT_TYPE


class FilesystemFileStorage:
    """
    Flat directory storage: one file per sanitized name directly under base_dir.
    Writes go straight to the target path, so concurrent uploads of the same
    name race and the last writer wins.
    """

    def __init__(self, base_dir: Path) -> None:
        self._base_dir = base_dir

    def _path_for(self, name: StoredFileName) -> Path:
        return self._base_dir / name.value

    async def ensure_root(self) -> None:
        root = anyio.Path(self._base_dir)
        if not await root.is_dir():
            logger.info("Creating storage directory %s", self._base_dir)
        await root.mkdir(parents=True, exist_ok=True)

    async def save(
        self,
        *,
        name: StoredFileName,
        chunks: AsyncIterable[bytes],
    ) -> StoredFileInfo:
        full_path = self._path_for(name)

        try:
            async with await anyio.open_file(full_path, "wb") as f:
                async for chunk in chunks:
                    if chunk:
                        await f.write(chunk)
            size = (await anyio.Path(full_path).stat()).st_size
        except OSError as e:
            raise FailedToSaveFile(str(e)) from e
        except Exception as e:
            # the body stream itself failed, e.g. the client disconnected
            raise FailedToSaveFile(str(e) or type(e).__name__) from e

        return StoredFileInfo(
            name=name.value,
            path=full_path,
            size_bytes=size,
            content_type=guess_content_type(name.value),
        )

    async def stat(self, *, name: StoredFileName) -> Optional[StoredFileInfo]:
        full_path = self._path_for(name)
        try:
            st = await anyio.Path(full_path).stat()
        except OSError as e:
            # missing, unreadable or unrepresentable names all count as absent
            logger.debug("Cannot stat %s: %s", full_path, e)
            return None

        # directories and other special files are never served
        if not S_ISREG(st.st_mode):
            return None

        return StoredFileInfo(
            name=name.value,
            path=full_path,
            size_bytes=st.st_size,
            content_type=guess_content_type(name.value),
        )
