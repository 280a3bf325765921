"""Sequential, prefixed string identifiers such as ``SUP-00001``."""

from __future__ import annotations

import re

from sqlalchemy.orm import InstrumentedAttribute, Session


def next_prefixed_id(
    session: Session, column: InstrumentedAttribute, prefix: str, *, width: int = 0
) -> str:
    """Return ``prefix`` followed by one more than the highest number in use.

    Ids under ``prefix`` that do not end in a number are ignored.
    """

    pattern = re.compile(rf"^{re.escape(prefix)}(\d+)$")
    highest = 0
    for (value,) in session.query(column).filter(column.like(f"{prefix}%")).all():
        match = pattern.match(value or "")
        if match:
            highest = max(highest, int(match.group(1)))
    return prefix + str(highest + 1).zfill(width)


__all__ = ["next_prefixed_id"]
