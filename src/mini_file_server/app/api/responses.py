from typing import Mapping, Optional
from urllib.parse import quote

from fastapi import Response, status
from fastapi.responses import FileResponse, PlainTextResponse

from mini_file_server.app.application.files.results import (
    Failure,
    FailureKind,
    FileResult,
    TextResult,
    UseCaseResult,
)

STATUS_BY_FAILURE = {
    FailureKind.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
    FailureKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    FailureKind.METHOD_NOT_ALLOWED: status.HTTP_405_METHOD_NOT_ALLOWED,
    FailureKind.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _is_plain_header_token(filename: str) -> bool:
    return filename.isascii() and filename.isprintable() and '"' not in filename


def content_disposition(filename: str) -> str:
    """
    attachment; filename="<name>", plus an RFC 5987 filename* when the
    name cannot be sent as a plain quoted ASCII string.
    """
    if _is_plain_header_token(filename):
        return f'attachment; filename="{filename}"'

    fallback = "".join(ch if _is_plain_header_token(ch) else "_" for ch in filename)
    return f"attachment; filename=\"{fallback}\"; filename*=utf-8''{quote(filename)}"


def failure_to_response(failure: Failure, headers: Optional[Mapping[str, str]] = None) -> Response:
    status_code = STATUS_BY_FAILURE[failure.kind]

    if not failure.message:
        return Response(status_code=status_code, headers=headers)
    return PlainTextResponse(failure.message, status_code=status_code, headers=headers)


def to_response(result: UseCaseResult) -> Response:
    if isinstance(result, Failure):
        return failure_to_response(result)

    if isinstance(result, FileResult):
        response = FileResponse(
            path=result.file.path,
            media_type=result.file.content_type,
            headers={"Content-Disposition": content_disposition(result.file.name)},
        )
        # FileResponse appends a charset to text/* types; send the bare guess
        response.headers["content-type"] = result.file.content_type
        return response

    if isinstance(result, TextResult):
        return PlainTextResponse(result.body)

    raise TypeError(f"Unsupported result type: {type(result).__name__}")
