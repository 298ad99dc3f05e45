# config.py

import math
import os
import logging
from dotenv import load_dotenv

from utils.rate_limiter import TimeUnit

REQUEST_URL = "https://ismp.crpt.ru/api/v3/lk/documents/create"


class Settings:
    def __init__(self, time_unit=TimeUnit.MINUTES, request_limit=10, api_url=REQUEST_URL,
                 signature='string', request_timeout=30.0, log_level=logging.INFO):
        self.time_unit = time_unit
        self.request_limit = request_limit
        self.api_url = api_url
        self.signature = signature
        self.request_timeout = request_timeout
        self.log_level = log_level


def _read_positive_int(name, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def _read_positive_float(name, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {raw!r}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def load_settings(dotenv_path=None):
    # Load environment variables from .env file
    load_dotenv(dotenv_path)

    try:
        time_unit = TimeUnit.parse(os.getenv('CRPT_TIME_UNIT', 'MINUTES'))
    except ValueError as e:
        raise ValueError(f"CRPT_TIME_UNIT: {e}") from None

    log_level_name = os.getenv('LOG_LEVEL', 'INFO').strip().upper()
    log_level = logging.getLevelName(log_level_name)
    if not isinstance(log_level, int):
        raise ValueError(f"LOG_LEVEL must be a logging level name, got {log_level_name!r}")

    return Settings(
        time_unit=time_unit,
        request_limit=_read_positive_int('CRPT_REQUEST_LIMIT', 10),
        api_url=os.getenv('CRPT_API_URL', REQUEST_URL),
        signature=os.getenv('CRPT_SIGNATURE', 'string'),
        request_timeout=_read_positive_float('CRPT_REQUEST_TIMEOUT', 30.0),
        log_level=log_level,
    )
