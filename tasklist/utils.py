# tasklist/utils.py - shared helpers
import logging
import time
from functools import wraps
from datetime import datetime, date
from typing import Optional, Tuple, Type

import pytz


def setup_logger(name: str = "tasklist") -> logging.Logger:
    """Configure a module logger."""
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


logger = setup_logger(__name__)


def retry_on_failure(max_retries: int = 3, delay: float = 1.0,
                     exceptions: Tuple[Type[BaseException], ...] = (Exception,)):
    """Retry decorator with exponential back-off.

    Only exceptions listed in ``exceptions`` are retried; anything else
    propagates on the first attempt.
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            for attempt in range(max_retries):
                try:
                    return func(*args, **kwargs)
                except exceptions as e:
                    if attempt == max_retries - 1:
                        raise
                    logger.warning(f"Attempt {attempt + 1} failed: {e}, retrying...")
                    time.sleep(delay * (2 ** attempt))
            return None

        return wrapper

    return decorator


def utc_now() -> datetime:
    return datetime.now(pytz.utc)


def ensure_aware(value: datetime) -> datetime:
    """Treat naive datetimes as UTC; aware ones are converted to UTC."""
    if value.tzinfo is None:
        return pytz.utc.localize(value)
    return value.astimezone(pytz.utc)


def local_date(value: datetime, timezone: Optional[str] = "UTC") -> date:
    """Calendar date of ``value`` in the given timezone."""
    tz = pytz.timezone(timezone or "UTC")
    return ensure_aware(value).astimezone(tz).date()
