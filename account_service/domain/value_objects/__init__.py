"""
Domain value objects package.
"""

from .account_role import AccountRole
from .address import Address
from .address_label import AddressLabel

__all__ = [
    "AccountRole",
    "Address",
    "AddressLabel",
]
