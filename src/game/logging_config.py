import logging

from .config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """Set up root logging for the game entry points.

    Library modules only call `logging.getLogger(__name__)`; the CLI and the
    rollout script call this once at startup. `level` falls back to
    UD_LOG_LEVEL.
    """
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
