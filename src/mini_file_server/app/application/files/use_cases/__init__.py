# mini_file_server/app/application/files/use_cases/__init__.py
from .upload_file import UploadFileUseCase
from .download_file import DownloadFileUseCase

__all__ = [
    "UploadFileUseCase",
    "DownloadFileUseCase",
]
