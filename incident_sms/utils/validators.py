"""Validation and formatting helpers for delivery requests."""

import re
from datetime import datetime, timezone

# 10 digits, or 11 digits with a leading country code of 1
_PHONE_PATTERN = re.compile(r"1[0-9]{10}|[0-9]{10}")

EVENT_DATE_FORMAT = "%Y-%m-%d"


def validate_phone_number(phone: str) -> bool:
    """Validate a North American phone number.

    Accepts 10-digit numbers and 11-digit numbers beginning with ``1``.
    Numbers whose subscriber digits are all the same (``5555555555``,
    ``15555555555``) are placeholders, not real numbers, and are rejected.
    """
    if not phone or not isinstance(phone, str):
        return False

    if not _PHONE_PATTERN.fullmatch(phone):
        return False

    national = phone[1:] if len(phone) == 11 else phone
    return len(set(national)) > 1


def format_event_date(timestamp: float) -> str:
    """Format a UNIX timestamp as ``YYYY-MM-DD`` in UTC."""
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime(EVENT_DATE_FORMAT)


def mask_phone_number(phone: str) -> str:
    """Hide all but the last four digits of a phone number for logging."""
    if not isinstance(phone, str) or len(phone) <= 4:
        return "****"
    return "*" * (len(phone) - 4) + phone[-4:]
