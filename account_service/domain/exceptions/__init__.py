"""
Domain exceptions package.
"""

from .invariant_error import ConcurrentModificationError, InvariantViolationError
from .not_found_error import (
    AccountNotFoundError,
    AddressNotFoundError,
    DefaultAddressNotFoundError,
    NotFoundError,
)
from .validation_error import (
    DuplicateAccountError,
    InvalidChoiceError,
    InvalidFormatError,
    RequiredFieldError,
    ValidationError,
)

__all__ = [
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
]
