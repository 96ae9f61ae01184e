"""Unified logging for ngstandards with console and file output."""
import logging
import tempfile
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

console = Console()

# Log file configuration
LOG_FILE = Path.home() / ".ngstandards" / "ngstandards.log"

# Track if file logging has been set up
_file_logging_configured = False


def setup_file_logging(log_file: Optional[str] = None, verbose: bool = False) -> Path:
    """Set up file logging for generator runs.

    Args:
        log_file: Path to log file (defaults to ~/.ngstandards/ngstandards.log)
        verbose: Enable debug-level logging

    Returns:
        Path of the log file in use

    Note:
        Creates log directory if it doesn't exist.
        Falls back to the temp directory if the target is not writable.
    """
    global _file_logging_configured

    target_log_file = Path(log_file) if log_file else LOG_FILE

    level = logging.DEBUG if verbose else logging.INFO
    root_logger = logging.getLogger("ngstandards")
    root_logger.setLevel(level)
    # Module loggers from get_logger() carry their own level
    for name, existing in logging.Logger.manager.loggerDict.items():
        if name.startswith("ngstandards.") and isinstance(existing, logging.Logger):
            existing.setLevel(level)

    if _file_logging_configured:
        return target_log_file

    try:
        target_log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(target_log_file)
    except OSError:
        target_log_file = Path(tempfile.gettempdir()) / "ngstandards.log"
        file_handler = logging.FileHandler(target_log_file)

    file_handler.setLevel(level)

    # Detailed format for file logs
    file_formatter = logging.Formatter(
        "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    file_handler.setFormatter(file_formatter)
    root_logger.addHandler(file_handler)

    _file_logging_configured = True

    root_logger.debug(f"ngstandards logging initialized: {target_log_file}")
    return target_log_file


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger instance with console output.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger with Rich console handler

    Note:
        File logging must be enabled separately via setup_file_logging()
    """
    logger = logging.getLogger(name)

    # Only add console handler if not already present
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=console, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger
