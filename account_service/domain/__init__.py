"""
Domain package.
"""

from .entities import *
from .exceptions import *
from .value_objects import *

__all__ = [
    # Entities
    "Account",
    "AddressBook",
    "normalize_defaults",
    "reconcile_default",

    # Exceptions
    "AccountNotFoundError",
    "AddressNotFoundError",
    "ConcurrentModificationError",
    "DefaultAddressNotFoundError",
    "DuplicateAccountError",
    "InvalidChoiceError",
    "InvalidFormatError",
    "InvariantViolationError",
    "NotFoundError",
    "RequiredFieldError",
    "ValidationError",

    # Value Objects
    "AccountRole",
    "Address",
    "AddressLabel",
]
