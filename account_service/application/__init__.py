"""
Application layer package.

This package contains use cases and interfaces that implement
the business logic of the application.
"""

from .interfaces.repositories import AccountRepositoryInterface
from .use_cases.create_account import CreateAccountRequest, CreateAccountUseCase
from .use_cases.manage_addresses import ManageAddressesUseCase

__all__ = [
    # Interfaces
    "AccountRepositoryInterface",
    # Use Cases
    "CreateAccountRequest",
    "CreateAccountUseCase",
    "ManageAddressesUseCase",
]
