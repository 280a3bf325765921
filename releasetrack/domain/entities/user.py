"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """Core attributes describing an application user."""

    id: int | None
    first_name: str
    last_name: str
    email: str | None
    created_at: datetime | None = None

    @property
    def display_name(self) -> str:
        """Return ``"first last"`` skipping empty parts."""

        return " ".join(part for part in (self.first_name, self.last_name) if part).strip()
