import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI

from mini_file_server import __version__
from mini_file_server.app.api.router import api_router
from mini_file_server.app.core.config import Settings, get_settings
from mini_file_server.app.exception_handlers import register_exception_handlers
from mini_file_server.app.infrastructure.files.filesystem_storage import FilesystemFileStorage

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # failing here aborts startup
        await app.state.file_storage.ensure_root()
        logger.info("Server running at http://%s:%s", settings.HOST, settings.PORT)
        logger.info("Version: %s", __version__)
        yield
        logger.info("Shutting down server...")

    app = FastAPI(title="mini-file-server", version=__version__, lifespan=lifespan)
    app.state.file_storage = FilesystemFileStorage(Path(settings.FILE_STORAGE_DIR))

    app.include_router(api_router)
    register_exception_handlers(app)
    return app
