from __future__ import annotations

from mini_file_server.app.application.files.dto import DownloadFileInputDTO
from mini_file_server.app.application.files.results import Failure, FailureKind, FileResult, UseCaseResult
from mini_file_server.app.domain.files import InvalidFileName, StoredFileName
from mini_file_server.app.domain.files.interfaces import FileStorage


class DownloadFileUseCase:
    def __init__(self, file_storage: FileStorage) -> None:
        self._file_storage = file_storage

    async def execute(self, dto: DownloadFileInputDTO) -> UseCaseResult:
        if not dto.name:
            return Failure(FailureKind.BAD_REQUEST)

        try:
            name = StoredFileName.from_user_input(dto.name)
        except InvalidFileName:
            return Failure(FailureKind.BAD_REQUEST)

        info = await self._file_storage.stat(name=name)
        if info is None:
            return Failure(FailureKind.NOT_FOUND)

        return FileResult(info)
