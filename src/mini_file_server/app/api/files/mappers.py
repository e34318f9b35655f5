from typing import Optional

from fastapi import Request

from mini_file_server.app.application.files.dto import DownloadFileInputDTO, UploadFileInputDTO


def get_upload_file_input_dto(
        request: Request,
        filename: Optional[str],
) -> UploadFileInputDTO:
    # body is streamed to storage, never buffered here
    return UploadFileInputDTO(
        filename=filename,
        content=request.stream(),
    )

def get_download_file_input_dto(name: Optional[str]) -> DownloadFileInputDTO:
    return DownloadFileInputDTO(name=name)
