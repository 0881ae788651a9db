import logging
import os

from src.coreutils.env import env_get


def setup_logging(level=None):
    """Setup basic logging configuration"""
    if level is None:
        level = env_get("LOG_LEVEL", "INFO").upper()

    handlers = [logging.StreamHandler()]

    log_file = env_get("LOG_FILE")
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        handlers=handlers,
    )

    # Keep urllib3 connection chatter out of the output
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    return logging.getLogger(__name__)
