"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the entire application.
All datetime operations use the timezone configured in influencer_service.core.config.

Functions:
- now(): Returns timezone-aware datetime object
- now_millis(): Returns milliseconds since the Unix epoch (stored as updated_on)
- now_iso(): Returns ISO 8601 string
"""
from datetime import datetime, timezone as dt_timezone
import logging
import zoneinfo

from influencer_service.core.config import get_settings

logger = logging.getLogger(__name__)


def _get_app_timezone() -> dt_timezone:
    """
    Get the application timezone from config.
    Returns timezone object (defaults to UTC if invalid).
    """
    tz_str = get_settings().timezone

    if tz_str.upper() == "UTC":
        return dt_timezone.utc

    try:
        return zoneinfo.ZoneInfo(tz_str)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Invalid timezone '{tz_str}', falling back to UTC")
        return dt_timezone.utc


def now() -> datetime:
    """
    Get current datetime with application-configured timezone.

    Returns:
        timezone-aware datetime object
    """
    return datetime.now(_get_app_timezone())


def now_millis() -> int:
    """
    Get current time as integer milliseconds since the Unix epoch.

    Epoch milliseconds are timezone independent; this is the format
    of the ``updated_on`` field.
    """
    return int(now().timestamp() * 1000)


def now_iso() -> str:
    """
    Get current datetime as ISO 8601 string with application-configured timezone.

    Returns:
        ISO 8601 formatted string (e.g., "2025-12-24T10:30:00+07:00" or "2025-12-24T10:30:00Z")
    """
    dt = now()
    # Format with timezone offset, or 'Z' if UTC
    if dt.tzinfo == dt_timezone.utc:
        return dt.replace(microsecond=0).isoformat().replace("+00:00", "Z")
    return dt.replace(microsecond=0).isoformat()
