"""Runtime configuration for flagparse."""

import os
from dataclasses import dataclass
from typing import Optional

from flagparse.logger import get_logger

logger = get_logger("config")

DEFAULT_CAPACITY = 256

CAPACITY_ENV = "FLAGPARSE_CAPACITY"
LOG_LEVEL_ENV = "FLAGPARSE_LOG_LEVEL"
LOG_FILE_ENV = "FLAGPARSE_LOG_FILE"


@dataclass
class FlagConfig:
    """Configuration for flag contexts and the demo CLI."""

    # Maximum number of flags a single context accepts
    capacity: int = DEFAULT_CAPACITY

    # Logging
    log_level: str = "WARNING"
    log_file: Optional[str] = None


def _read_capacity(raw: Optional[str]) -> int:
    if raw is None or not raw.strip():
        return DEFAULT_CAPACITY
    try:
        capacity = int(raw.strip())
    except ValueError:
        logger.warning(f"Ignoring non-numeric {CAPACITY_ENV}={raw!r}, using {DEFAULT_CAPACITY}")
        return DEFAULT_CAPACITY
    if capacity <= 0:
        logger.warning(f"Ignoring non-positive {CAPACITY_ENV}={capacity}, using {DEFAULT_CAPACITY}")
        return DEFAULT_CAPACITY
    return capacity


def load_config() -> FlagConfig:
    """Load configuration from environment variables.

    Call ``dotenv.load_dotenv()`` beforehand to pick up a ``.env`` file.
    """
    log_file = os.getenv(LOG_FILE_ENV, "").strip() or None
    return FlagConfig(
        capacity=_read_capacity(os.getenv(CAPACITY_ENV)),
        log_level=os.getenv(LOG_LEVEL_ENV, "WARNING").strip().upper() or "WARNING",
        log_file=log_file,
    )
