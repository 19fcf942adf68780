"""
Database package.
"""

from .models import AccountModel, Base
from .repositories import AccountRepository

__all__ = [
    "AccountModel",
    "AccountRepository",
    "Base",
]
