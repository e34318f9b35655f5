from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from mini_file_server.app.domain.files import StoredFileInfo


class FailureKind(str, Enum):
    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    INTERNAL_ERROR = "internal_error"


@dataclass(frozen=True)
class TextResult:
    body: str


@dataclass(frozen=True)
class FileResult:
    file: StoredFileInfo


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    message: str = ""     # empty -> empty response body


UseCaseResult = Union[TextResult, FileResult, Failure]
