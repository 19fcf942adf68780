"""
Account role value object.
"""

from enum import Enum


class AccountRole(str, Enum):
    """Marketplace account role enumeration."""

    USER = "USER"
    ADMIN = "ADMIN"
    CREATOR = "CREATOR"
    PRINTER = "PRINTER"
