from fastapi import Request

from mini_file_server import __version__
from mini_file_server.app.domain.files.interfaces import FileStorage


def get_file_storage(request: Request) -> FileStorage:
    """
    Storage instance built once in create_app().
    Swap implementation there without touching the use cases.
    """
    return request.app.state.file_storage


def get_version() -> str:
    return __version__
