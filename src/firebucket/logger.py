import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_ENV_VAR = "FIREBUCKET_LOG_LEVEL"


def setup_logger(
    name: str = "firebucket", level: int | str | None = None
) -> logging.Logger:
    """
    Returns the package logger, attaching a stderr RichHandler once.
    `level` falls back to $FIREBUCKET_LOG_LEVEL, then WARNING.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING").upper()

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        # stdout of a dynamic provider belongs to the Pulumi engine
        handler = RichHandler(
            console=Console(stderr=True), markup=False, show_path=False
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    return logger


logger = setup_logger()
