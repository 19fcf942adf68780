"""
Repository interfaces for dependency inversion.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from account_service.domain.entities.account import Account


class AccountRepositoryInterface(ABC):
    """Account repository interface."""

    @abstractmethod
    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        """Get account by ID."""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Account]:
        """Get account by email."""
        pass

    @abstractmethod
    async def create(self, account: Account) -> Account:
        """Create a new account."""
        pass

    @abstractmethod
    async def save_address_book(self, account: Account) -> Account:
        """
        Persist the account's address book.

        The write only succeeds if the stored version still equals
        ``account.version``; the returned account carries the new version.

        Raises:
            AccountNotFoundError: the account no longer exists
            ConcurrentModificationError: the stored version moved on
        """
        pass

    @abstractmethod
    async def commit(self) -> None:
        """Commit the current transaction."""
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """Rollback the current transaction."""
        pass
