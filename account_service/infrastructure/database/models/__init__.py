"""
Database models package.
"""

from .base import Base, BaseModel
from .account import AccountModel

__all__ = [
    "Base",
    "BaseModel",
    "AccountModel",
]
