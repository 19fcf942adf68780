"""
Use cases package.

This package contains the business logic use cases that orchestrate
the domain objects and repositories.
"""

from .create_account import CreateAccountRequest, CreateAccountUseCase
from .manage_addresses import ManageAddressesUseCase

__all__ = [
    "CreateAccountRequest",
    "CreateAccountUseCase",
    "ManageAddressesUseCase",
]
