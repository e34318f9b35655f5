from __future__ import annotations
from dataclasses import dataclass
from typing import AsyncIterable, Optional


@dataclass(frozen=True)
class UploadFileInputDTO:
    filename: Optional[str]      # raw X-Filename header value
    content: AsyncIterable[bytes]


@dataclass(frozen=True)
class DownloadFileInputDTO:
    name: Optional[str]          # already percent-decoded
