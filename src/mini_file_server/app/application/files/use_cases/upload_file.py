from __future__ import annotations

import logging

from mini_file_server.app.application.files.dto import UploadFileInputDTO
from mini_file_server.app.application.files.results import Failure, FailureKind, TextResult, UseCaseResult
from mini_file_server.app.domain.files import FailedToSaveFile, InvalidFileName, StoredFileName
from mini_file_server.app.domain.files.interfaces import FileStorage

logger = logging.getLogger(__name__)

MISSING_FILENAME_MESSAGE = "Missing X-Filename header"


class UploadFileUseCase:
    def __init__(self, file_storage: FileStorage) -> None:
        self._file_storage = file_storage

    async def execute(self, dto: UploadFileInputDTO) -> UseCaseResult:
        if not dto.filename:
            return Failure(FailureKind.BAD_REQUEST, MISSING_FILENAME_MESSAGE)

        try:
            name = StoredFileName.from_user_input(dto.filename)
        except InvalidFileName as e:
            return Failure(FailureKind.BAD_REQUEST, str(e))

        try:
            stored = await self._file_storage.save(name=name, chunks=dto.content)
        except FailedToSaveFile as e:
            logger.exception("Upload of %s failed", name.value)
            return Failure(FailureKind.INTERNAL_ERROR, f"Upload failed: {e}")

        logger.debug("Stored %s (%d bytes)", stored.name, stored.size_bytes)
        return TextResult(f"Uploaded: {stored.name}")
