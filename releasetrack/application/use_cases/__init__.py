"""Aggregate application use cases."""

from .tickets import create_ticket, update_ticket
from .users import create_user

__all__ = [
    "create_ticket",
    "create_user",
    "update_ticket",
]
