"""
Application interfaces package.
"""

from .repositories import AccountRepositoryInterface

__all__ = [
    "AccountRepositoryInterface",
]
