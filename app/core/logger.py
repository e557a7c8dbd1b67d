"""Logger configuration.

Every record carries a ``context`` extra: the HTTP request being served
(``GET /api/v1/analytics/risk``) or the athlete being analysed
(``athlete=12``), bound with :func:`log_context`.  Records logged outside
any context show ``-``.
"""

import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from loguru import logger

NO_CONTEXT = "-"

CONSOLE_FORMAT = ("<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
                  "<magenta>{extra[context]}</magenta> | <cyan>{name}</cyan>:<cyan>{line}</cyan> - "
                  "<level>{message}</level>")
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[context]} | {name}:{function}:{line} - {message}"


def setup_logger(
    level: str = "INFO",
    log_file: Optional[str] = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """Send analytics logs to stderr and, optionally, a rotating file.

    Args:
        level: Minimum level for both sinks.
        log_file: Path of the rotating log file; console only when None.
        rotation: Size or age at which the file rotates.
        retention: How long rotated files are kept.
    """
    logger.remove()
    logger.configure(extra={"context": NO_CONTEXT})

    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_path, format=FILE_FORMAT, level=level, rotation=rotation, retention=retention,
                   compression="zip", diagnose=False, )

    logger.debug(f"[LOG] level={level} file={log_file or NO_CONTEXT}")


@contextmanager
def log_context(context: str) -> Iterator[None]:
    """Tag every record logged inside the block with *context*."""
    with logger.contextualize(context=context):
        yield
