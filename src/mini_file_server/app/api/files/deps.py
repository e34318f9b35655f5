from typing import Annotated

from fastapi import Depends

from mini_file_server.app.application.files.use_cases import DownloadFileUseCase, UploadFileUseCase
from mini_file_server.app.core.deps import get_file_storage
from mini_file_server.app.domain.files.interfaces import FileStorage


async def get_upload_file_use_case(
        storage: Annotated[FileStorage, Depends(get_file_storage)]
) -> UploadFileUseCase:
    return UploadFileUseCase(storage)

async def get_download_file_use_case(
        storage: Annotated[FileStorage, Depends(get_file_storage)]
) -> DownloadFileUseCase:
    return DownloadFileUseCase(storage)
