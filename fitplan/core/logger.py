"""Logger configuration for fitplan.

Generation code logs through loguru with keyword context (workout=..., cache_key=...),
so both sinks render the bound extras after the message.
"""

import sys
from pathlib import Path

from loguru import logger

from fitplan.config.settings import settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level> {extra}"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} {extra}"


def setup_logger(
    level: str | None = None,
    log_file: str | Path | None = None,
    *,
    json_logs: bool = False,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """Replace loguru's default sink with the fitplan sinks.

    Args:
        level: Logging level; defaults to settings.log_level
        log_file: Optional log file path; parent directories are created
        json_logs: Emit one JSON record per line on the console instead of text
        rotation: File rotation threshold (e.g., "10 MB", "1 day")
        retention: File retention period (e.g., "7 days")
    """
    level = (level or settings.log_level).upper()
    logger.remove()

    if json_logs:
        logger.add(sys.stderr, level=level, serialize=True)
    else:
        logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

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
        )

    logger.debug("Logger configured", level=level, log_file=str(log_file) if log_file else None, json_logs=json_logs)
