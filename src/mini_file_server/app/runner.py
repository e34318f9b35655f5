import logging
import sys

import uvicorn

from mini_file_server.app.core import Settings, get_settings, setup_logging
from mini_file_server.app.main import create_app

logger = logging.getLogger(__name__)

STARTUP_FAILURE_EXIT_CODE = 3


def build_server(settings: Settings) -> uvicorn.Server:
    """
    Owned server instance. uvicorn installs the SIGINT/SIGTERM handlers:
    on a signal it stops accepting connections, lets in-flight requests
    finish for up to SHUTDOWN_GRACE_SECONDS, then closes the socket.
    """
    config = uvicorn.Config(
        create_app(settings),
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        log_config=None,
        timeout_graceful_shutdown=settings.SHUTDOWN_GRACE_SECONDS,
    )
    return uvicorn.Server(config)


def run() -> None:
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)

    server = build_server(settings)
    server.run()

    if not server.started:
        logger.critical("Server failed to start")
        sys.exit(STARTUP_FAILURE_EXIT_CODE)
