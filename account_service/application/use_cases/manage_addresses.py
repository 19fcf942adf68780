"""Address book management use case."""

from typing import Any, Callable, List, Mapping
from uuid import UUID

from account_service.application.interfaces.repositories import (
    AccountRepositoryInterface,
)
from account_service.config.logging import get_logger
from account_service.domain.entities.account import Account
from account_service.domain.entities.address_book import AddressBook
from account_service.domain.exceptions.invariant_error import (
    ConcurrentModificationError,
    InvariantViolationError,
)
from account_service.domain.exceptions.not_found_error import (
    AccountNotFoundError,
    NotFoundError,
)
from account_service.domain.exceptions.validation_error import ValidationError
from account_service.domain.value_objects.address import Address
from account_service.infrastructure.monitoring.metrics import record_address_operation

logger = get_logger(__name__)

REJECTED_ERRORS = (
    ValidationError,
    NotFoundError,
    InvariantViolationError,
    ConcurrentModificationError,
)

Mutation = Callable[[AddressBook], AddressBook]


class ManageAddressesUseCase:
    """
    Load an account, run one address book operation and persist the result.

    Every book is normalized to a single default before it is written, so
    stored books always hold exactly one default address when non-empty.
    """

    def __init__(self, account_repo: AccountRepositoryInterface):
        self.account_repo = account_repo

    async def get_address_book(self, account_id: UUID) -> AddressBook:
        """Get the account's address book."""
        account = await self._load(account_id)
        return account.address_book

    async def list_addresses(self, account_id: UUID) -> List[Address]:
        """List the account's addresses in insertion order."""
        return list(await self.get_address_book(account_id))

    async def get_default_address(self, account_id: UUID) -> Address:
        """Get the account's default address."""
        account = await self._load(account_id)
        try:
            return account.address_book.get_default()
        except NotFoundError:
            logger.warning("Default address not found", account_id=str(account_id))
            raise

    async def add_address(
        self, account_id: UUID, data: Mapping[str, Any]
    ) -> Account:
        """Add an address to the account's book."""
        return await self._mutate("add", account_id, lambda book: book.add(data))

    async def update_address(
        self, account_id: UUID, address_id: str, data: Mapping[str, Any]
    ) -> Account:
        """Update one address of the account's book."""
        return await self._mutate(
            "update",
            account_id,
            lambda book: book.update(address_id, data),
            address_id=address_id,
        )

    async def remove_address(self, account_id: UUID, address_id: str) -> Account:
        """Remove an address from the account's book."""
        return await self._mutate(
            "remove",
            account_id,
            lambda book: book.remove(address_id),
            address_id=address_id,
        )

    async def set_default_address(
        self, account_id: UUID, address_id: str
    ) -> Account:
        """Make one address the account's default."""
        return await self._mutate(
            "set_default",
            account_id,
            lambda book: book.set_default(address_id),
            address_id=address_id,
        )

    async def _load(self, account_id: UUID) -> Account:
        account = await self.account_repo.get_by_id(account_id)
        if not account:
            raise AccountNotFoundError(account_id)
        return account

    async def _mutate(
        self, operation: str, account_id: UUID, mutation: Mutation, **context
    ) -> Account:
        log = logger.bind(operation=operation, account_id=str(account_id), **context)

        try:
            account = await self._load(account_id)
            book = mutation(account.address_book).normalized()
            book.check_invariants()

            if book == account.address_book:
                log.info("Address book unchanged, skipping write")
                record_address_operation(operation, "unchanged")
                return account

            account.replace_address_book(book)
            account = await self.account_repo.save_address_book(account)
            await self.account_repo.commit()

        except REJECTED_ERRORS as e:
            await self.account_repo.rollback()
            record_address_operation(operation, "rejected")
            log.warning("Address book operation rejected", error=str(e))
            raise
        except Exception as e:
            await self.account_repo.rollback()
            record_address_operation(operation, "failed")
            log.error("Address book operation failed", error=str(e), exc_info=True)
            raise

        record_address_operation(operation, "succeeded")
        log.info(
            "Address book updated",
            addresses=len(account.address_book),
            version=account.version,
        )
        return account
