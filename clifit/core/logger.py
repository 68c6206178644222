"""Logger configuration for CLIFIT.

Records bound with ``file_only=True`` (``logger.bind(file_only=True)``) skip
the console sink. The CLI uses this for failures it already reports to the
user as a one-line diagnostic.
"""

import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def _console_filter(record: dict) -> bool:
    return not record["extra"].get("file_only", False)


def setup_logger(
    level: str = "INFO",
    log_file: str | None = None,
    console_level: str | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """Configure the stderr sink and, optionally, a rotating file sink.

    Args:
        level: Level for the file sink, and for the console unless console_level is given
        log_file: Path of the log file; None disables file logging
        console_level: Level for the stderr sink. The interactive UI passes
            WARNING so log lines do not tear the screen.
        rotation: When to rotate the file (e.g. "10 MB", "1 day")
        retention: How long rotated files are kept (e.g. "7 days")
    """
    logger.remove()
    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level=console_level or level,
        filter=_console_filter,
        colorize=True,
    )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format=FILE_FORMAT,
            level=level,
            rotation=rotation,
            retention=retention,
            compression="zip",
            encoding="utf-8",
            backtrace=True,
            diagnose=True,
        )

    logger.debug(f"Logging to stderr at {console_level or level}, file={log_file or '-'} at {level}")
