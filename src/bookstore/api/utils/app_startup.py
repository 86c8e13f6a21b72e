import logging
import sys

from loguru import logger

from src.bookstore.runtime.context import get_config

_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "[<cyan>{extra[request_id]}</cyan>] {name}:{line} - <level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    """Forward stdlib records (uvicorn, SQLAlchemy) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(depth=2, exception=record.exc_info).log(level, record.getMessage())


def configure_logging() -> None:
    """Install the loguru sinks described by the active ``logging`` config."""
    cfg = get_config().logging

    logger.remove()
    logger.configure(extra={"request_id": "-"})
    logger.add(sys.stderr, level=cfg.level, format=_FORMAT)
    if cfg.file:
        logger.add(cfg.file, level=cfg.level, format=_FORMAT, rotation=f"{cfg.rotation_mb} MB")

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    # Request middleware already records every request
    logging.getLogger("uvicorn.access").disabled = True
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
