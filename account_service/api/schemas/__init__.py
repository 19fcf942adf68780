"""
API schemas for the account address book service.
"""

from .account import AccountCreateRequest, AccountResponse
from .address import (
    AddressBookResponse,
    AddressCreateRequest,
    AddressResponse,
    AddressUpdateRequest,
)
from .common import BaseResponse, ErrorResponse

__all__ = [
    "AccountCreateRequest",
    "AccountResponse",
    "AddressBookResponse",
    "AddressCreateRequest",
    "AddressResponse",
    "AddressUpdateRequest",
    "BaseResponse",
    "ErrorResponse",
]
