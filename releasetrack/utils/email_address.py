"""Minimal email address checks shared by the notification pipeline."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

logger = logging.getLogger(__name__)


def is_valid_email_address(value: Any) -> bool:
    """Return ``True`` when ``value`` is a string containing ``@``.

    This is intentionally loose: the provider performs the real validation,
    this only keeps obviously broken values out of the payload.
    """

    return isinstance(value, str) and "@" in value


def filter_valid_addresses(values: Iterable[Any]) -> list[str]:
    """Return the valid entries of ``values`` unchanged and in order."""

    valid: list[str] = []
    for value in values:
        if is_valid_email_address(value):
            valid.append(value)
        else:
            logger.warning("Discarding invalid email address %r", value)
    return valid


def unique_addresses(addresses: Iterable[str]) -> list[str]:
    """Drop repeated addresses, compared case-insensitively, keeping the first spelling.

    SendGrid rejects a personalization that lists the same address twice.
    """

    seen: set[str] = set()
    unique: list[str] = []
    for address in addresses:
        key = address.strip().lower()
        if key in seen:
            logger.debug("Dropping duplicate email address %r", address)
            continue
        seen.add(key)
        unique.append(address)
    return unique


def deliverable_addresses(values: Iterable[Any]) -> list[str]:
    """Return the valid entries of ``values`` with duplicates removed."""

    return unique_addresses(filter_valid_addresses(values))


def extract_valid_emails(recipients: Iterable[Any]) -> list[str]:
    """Return the valid, de-duplicated ``email`` of each recipient object."""

    return deliverable_addresses(
        getattr(recipient, "email", None) for recipient in recipients if recipient is not None
    )
