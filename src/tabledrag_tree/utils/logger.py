# src/tabledrag_tree/utils/logger.py
import logging
import sys
from pathlib import Path

from tabledrag_tree.config import settings

handlers = [logging.StreamHandler(sys.stdout)]  # Print logs to console

# Save logs to file only when a log directory is configured
if settings.log_dir:
    LOGS_DIR = Path(settings.log_dir)
    LOGS_DIR.mkdir(parents=True, exist_ok=True)
    handlers.append(logging.FileHandler(LOGS_DIR / "app.log"))

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(message)s",
    handlers=handlers,
)

# Create logger instance
logger = logging.getLogger("tabledrag_tree")


def log_info(message: str):
    """Logs an informational message."""
    logger.info(message)


def log_warning(message: str):
    """Logs a warning message."""
    logger.warning(message)


def log_error(message: str):
    """Logs an error message."""
    logger.error(message)


def log_debug(message: str):
    """Logs a debug message (useful for development)."""
    logger.debug(message)
