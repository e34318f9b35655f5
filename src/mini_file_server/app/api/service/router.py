from typing import Annotated

from fastapi import APIRouter, Depends, Response

from mini_file_server.app.api.responses import to_response
from mini_file_server.app.application.files.results import TextResult
from mini_file_server.app.core.deps import get_version

router = APIRouter(tags=["service"])


@router.get("/health")
async def health() -> Response:
    return to_response(TextResult("OK"))


@router.get("/version")
async def version(current_version: Annotated[str, Depends(get_version)]) -> Response:
    return to_response(TextResult(current_version))
