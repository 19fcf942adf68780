"""
Domain entities package.
"""

from .account import Account
from .address_book import AddressBook, normalize_defaults, reconcile_default

__all__ = [
    "Account",
    "AddressBook",
    "normalize_defaults",
    "reconcile_default",
]
