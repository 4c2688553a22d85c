import logging
from typing import Optional
from loguru import logger

from apparel_inventory.core.config import Settings


class InterceptHandler(logging.Handler):
    def emit(self, record):
        # Get corresponding Loguru level
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller to get correct stack depth
        frame, depth = logging.currentframe(), 2
        while frame.f_back and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging(settings: Settings) -> Optional[int]:
    """Routes std logging into loguru. Returns the file sink id, if any."""
    # Remove existing handlers
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    # Intercept standard logging (uvicorn, sqlalchemy)
    logging.basicConfig(handlers=[InterceptHandler()], level=logging.INFO)

    if not settings.log_file:
        return None

    return logger.add(
        settings.log_file,
        rotation="500 MB",
        compression="zip",
        level="DEBUG" if settings.debug else "INFO",
        backtrace=True,
        diagnose=settings.debug,
    )
