"""
Runtime configuration.

Values come from environment variables, optionally loaded from a `.env`
file in the working directory:

    TORNADO_STATS_TIMEOUT    HTTP timeout in seconds (default 10)
    TORNADO_STATS_LOG_LEVEL  logging level name (default INFO)
"""

import os
import logging
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "INFO"


def get_timeout() -> float:
    raw = os.getenv("TORNADO_STATS_TIMEOUT")
    if raw is None or raw.strip() == "":
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid TORNADO_STATS_TIMEOUT={raw!r}, using {DEFAULT_TIMEOUT}")
        return DEFAULT_TIMEOUT
    if timeout <= 0:
        logger.warning(f"Ignoring non-positive TORNADO_STATS_TIMEOUT={raw!r}, using {DEFAULT_TIMEOUT}")
        return DEFAULT_TIMEOUT
    return timeout


def get_log_level() -> int:
    name = os.getenv("TORNADO_STATS_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # getLevelName returns a "Level X" string for unknown names
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> None:
    """Send log records to stderr so stdout only carries the dataset."""
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
