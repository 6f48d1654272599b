import sys
from typing import Optional
from loguru import logger
import os

def setup_logging(debug_mode: bool = True, log_dir: Optional[str] = None,
                  rotation: str = "10 MB", retention: str = "1 week"):
    """
    Configures Loguru logger.

    A file handler is only installed when log_dir is given.
    """
    # Remove default handler
    logger.remove()

    # Console Handler
    level = "DEBUG" if debug_mode else "INFO"
    logger.add(sys.stderr, level=level, format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>")

    # File Handler
    if log_dir:
        if not os.path.exists(log_dir):
            os.makedirs(log_dir)
        logger.add(os.path.join(log_dir, "blueprint_{time}.log"), rotation=rotation, retention=retention, level="DEBUG")

    logger.info("Logging initialized.")
