import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .get_home_dir import get_home_dir

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(picup_home: Path | None = None, level: str = "INFO") -> None:
    """Configure unified picup logging.

    Args:
        picup_home: Path to picup home directory. If None, derived from environment.
        level: Level name for the ``picup`` logger (DEBUG, INFO, WARN, ERROR)
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if picup_home is None:
        picup_home = get_home_dir()

    # Ensure directory exists
    picup_home.mkdir(parents=True, exist_ok=True)
    log_file = picup_home / "picup.log"

    root_logger = logging.getLogger("picup")
    root_logger.setLevel("WARNING" if level == "WARN" else level)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    # Quiet the HTTP stack
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    _CONFIGURED = True
