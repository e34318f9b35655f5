# mini_file_server/app/domain/files/value_objects.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath

from mini_file_server.app.domain.files.errors import InvalidFileName

_RESERVED_NAMES = {"", ".", ".."}


def final_path_segment(value: str) -> str:
    """
    Last path component of a user supplied name, with any directory prefix
    dropped. Both "/" and "\\" count as separators.
    """
    return PurePosixPath(value.replace("\\", "/")).name


@dataclass(frozen=True)
class StoredFileName:
    """
    Sanitized filename: a single path segment, safe to join with the storage root.
    """
    value: str

    def __post_init__(self) -> None:
        if self.value in _RESERVED_NAMES or "\x00" in self.value:
            raise InvalidFileName(self.value)

        if final_path_segment(self.value) != self.value:
            raise InvalidFileName(self.value)

    @classmethod
    def from_user_input(cls, raw_name: str) -> StoredFileName:
        segment = final_path_segment(raw_name)
        try:
            return cls(segment)
        except InvalidFileName:
            raise InvalidFileName(raw_name) from None
