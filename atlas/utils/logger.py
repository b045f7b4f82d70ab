import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(level: str = "WARNING", log_file: Path | None = None) -> None:
    """Configure unified Atlas logging.

    Args:
        level: Logging level name for the ``atlas`` logger
        log_file: Rotating log file; logs go to stderr if None
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    root_logger = logging.getLogger("atlas")
    root_logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    handler: logging.Handler
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,  # 5MB * 3
        )
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    _CONFIGURED = True

