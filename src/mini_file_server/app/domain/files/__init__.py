from .entities import StoredFileInfo, DEFAULT_CONTENT_TYPE
from .errors import InvalidFileName, FailedToSaveFile
from .value_objects import StoredFileName, final_path_segment

__all__ = [
    "StoredFileInfo",
    "DEFAULT_CONTENT_TYPE",
    "InvalidFileName",
    "FailedToSaveFile",
    "StoredFileName",
    "final_path_segment",
]
