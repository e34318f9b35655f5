import httpx
import pytest
import pytest_asyncio

from mini_file_server.app.core.config import Settings
from mini_file_server.app.main import create_app
from tests.unit.fakes.file_storage import FakeFileStorage


@pytest.fixture
def storage_dir(tmp_path):
    path = tmp_path / "storage"
    path.mkdir()
    return path


@pytest.fixture
def settings(storage_dir) -> Settings:
    return Settings(_env_file=None, FILE_STORAGE_DIR=str(storage_dir))


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest_asyncio.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def file_storage() -> FakeFileStorage:
    return FakeFileStorage()
