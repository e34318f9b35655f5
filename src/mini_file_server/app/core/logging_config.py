import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """
    Configures the root logger for the service.
    Call once at process start, before the server is built.
    """
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - [%(levelname)s] - %(message)s",
        stream=sys.stdout,
    )
    # uvicorn logs every request on its own
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
