"""Utility helpers for reusable functionality."""

from .datetime import (
    ensure_app_timezone,
    format_timestamp,
    get_app_timezone,
    now_in_app_timezone,
)
from .email_address import (
    deliverable_addresses,
    extract_valid_emails,
    filter_valid_addresses,
    is_valid_email_address,
    unique_addresses,
)

__all__ = [
    "deliverable_addresses",
    "extract_valid_emails",
    "filter_valid_addresses",
    "is_valid_email_address",
    "unique_addresses",
    "ensure_app_timezone",
    "format_timestamp",
    "get_app_timezone",
    "now_in_app_timezone",
]
