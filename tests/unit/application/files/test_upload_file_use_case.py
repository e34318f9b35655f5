import logging

import pytest

from mini_file_server.app.application.files.dto import UploadFileInputDTO
from mini_file_server.app.application.files.results import Failure, FailureKind, TextResult
from mini_file_server.app.application.files.use_cases import UploadFileUseCase
from mini_file_server.app.domain.files import FailedToSaveFile
from mini_file_server.app.infrastructure.files.filesystem_storage import FilesystemFileStorage
from tests.unit.fakes.file_storage import FakeFileStorage
from tests.unit.fakes.streams import as_chunks


pytestmark = pytest.mark.asyncio


def _dto(filename, *parts):
    return UploadFileInputDTO(filename=filename, content=as_chunks(*parts))


async def test_upload_happy_path(file_storage):
    use_case = UploadFileUseCase(file_storage)

    result = await use_case.execute(_dto("a.txt", b"hel", b"lo"))

    assert result == TextResult("Uploaded: a.txt")
    assert file_storage.read("a.txt") == b"hello"


@pytest.mark.parametrize("filename", [None, ""])
async def test_upload_without_filename_is_bad_request(file_storage, filename):
    use_case = UploadFileUseCase(file_storage)

    result = await use_case.execute(_dto(filename, b"data"))

    assert result == Failure(FailureKind.BAD_REQUEST, "Missing X-Filename header")
    assert file_storage.count() == 0


async def test_upload_strips_directory_prefix(file_storage):
    use_case = UploadFileUseCase(file_storage)

    result = await use_case.execute(_dto("../../secrets.txt", b"top secret"))

    assert result == TextResult("Uploaded: secrets.txt")
    assert file_storage.read("secrets.txt") == b"top secret"
    assert file_storage.count() == 1


async def test_upload_rejects_parent_reference_name(file_storage):
    use_case = UploadFileUseCase(file_storage)

    result = await use_case.execute(_dto("..", b"data"))

    assert result == Failure(FailureKind.BAD_REQUEST, "Invalid filename: ..")
    assert file_storage.count() == 0


async def test_upload_overwrites_existing_file(file_storage):
    use_case = UploadFileUseCase(file_storage)

    await use_case.execute(_dto("a.txt", b"first version"))
    await use_case.execute(_dto("a.txt", b"second"))

    assert file_storage.read("a.txt") == b"second"


async def test_upload_storage_failure_is_internal_error_and_logged(caplog):
    storage = FakeFileStorage(fail_with=FailedToSaveFile("No space left on device"))
    use_case = UploadFileUseCase(storage)

    with caplog.at_level(logging.ERROR):
        result = await use_case.execute(_dto("a.txt", b"data"))

    assert result == Failure(FailureKind.INTERNAL_ERROR, "Upload failed: No space left on device")
    assert any("Upload of a.txt failed" in r.getMessage() for r in caplog.records)


async def _body_cut_off(*parts: bytes):
    for part in parts:
        yield part
    raise ConnectionResetError("Connection reset by peer")


async def test_upload_body_read_failure_goes_through_upload_failed_path(tmp_path, caplog):
    use_case = UploadFileUseCase(FilesystemFileStorage(tmp_path))
    dto = UploadFileInputDTO(filename="a.txt", content=_body_cut_off(b"first half"))

    with caplog.at_level(logging.ERROR):
        result = await use_case.execute(dto)

    assert result == Failure(FailureKind.INTERNAL_ERROR, "Upload failed: Connection reset by peer")
    assert any("Upload of a.txt failed" in r.getMessage() for r in caplog.records)
