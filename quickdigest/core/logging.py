"""
Logging configuration using Loguru.
"""
import logging
import sys
from typing import Any

from loguru import logger

from quickdigest.core.config import settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<magenta>{extra[request_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | "
    "{extra[request_id]} | {name}:{function}:{line} - {message}"
)


class InterceptHandler(logging.Handler):
    """Handler that intercepts standard logging and redirects to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        """
        Emit a log record by redirecting to Loguru.

        Args:
            record: The log record from standard logging.
        """
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Walk back to the frame that issued the stdlib logging call
        frame = logging.currentframe()
        depth = 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging() -> None:
    """
    Configure logging with Loguru.

    This function:
    1. Removes existing handlers
    2. Intercepts standard library logging (uvicorn, httpx)
    3. Configures Loguru with a console sink and an optional rotating file sink
    """
    logging.root.handlers = []
    logging.basicConfig(handlers=[InterceptHandler()], level=0)

    for logger_name in ("uvicorn", "uvicorn.access", "uvicorn.error", "httpx"):
        logging_logger = logging.getLogger(logger_name)
        logging_logger.handlers = [InterceptHandler()]
        logging_logger.propagate = False

    # httpx logs every request at INFO; the price poller would flood the sinks
    logging.getLogger("httpx").setLevel(logging.WARNING)

    logger.remove()

    def add_request_id(record: dict[str, Any]) -> None:
        record["extra"].setdefault("request_id", "N/A")

    logger.configure(patcher=add_request_id)

    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=settings.LOG_LEVEL)

    if settings.LOG_FILE:
        logger.add(
            settings.LOG_FILE,
            rotation="10 MB",
            retention="30 days",
            compression="zip",
            enqueue=True,
            level=settings.LOG_LEVEL,
            format=FILE_FORMAT,
        )
