from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Header, Query, Request, Response

from mini_file_server.app.api.files.deps import get_download_file_use_case, get_upload_file_use_case
from mini_file_server.app.api.files.mappers import get_download_file_input_dto, get_upload_file_input_dto
from mini_file_server.app.api.responses import to_response
from mini_file_server.app.application.files.use_cases import DownloadFileUseCase, UploadFileUseCase

router = APIRouter(tags=["files"])

upload_file_dep = Annotated[UploadFileUseCase, Depends(get_upload_file_use_case)]
download_file_dep = Annotated[DownloadFileUseCase, Depends(get_download_file_use_case)]


# any other method is answered by the 405 handler in exception_handlers.py
@router.post("/upload")
async def upload_file(
        request: Request,
        use_case: upload_file_dep,
        x_filename: Annotated[Optional[str], Header()] = None,
) -> Response:
    dto = get_upload_file_input_dto(request, x_filename)
    result = await use_case.execute(dto)
    return to_response(result)


@router.get("/download")
async def download_file(
        use_case: download_file_dep,
        name: Annotated[Optional[str], Query()] = None,
) -> Response:
    dto = get_download_file_input_dto(name)
    result = await use_case.execute(dto)
    return to_response(result)
