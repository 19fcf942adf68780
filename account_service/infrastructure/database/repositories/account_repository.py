"""Account repository implementation."""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from account_service.application.interfaces.repositories import (
    AccountRepositoryInterface,
)
from account_service.config.logging import get_logger
from account_service.domain.entities.account import Account
from account_service.domain.entities.address_book import AddressBook
from account_service.domain.exceptions.invariant_error import (
    ConcurrentModificationError,
)
from account_service.domain.exceptions.not_found_error import AccountNotFoundError
from account_service.domain.exceptions.validation_error import DuplicateAccountError
from account_service.infrastructure.database.models.account import AccountModel

logger = get_logger(__name__)


class AccountRepository(AccountRepositoryInterface):
    """Account repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        """Get account by ID."""
        stmt = (
            select(AccountModel)
            .where(AccountModel.id == account_id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        return self._model_to_entity(model) if model else None

    async def get_by_email(self, email: str) -> Optional[Account]:
        """Get account by email."""
        stmt = (
            select(AccountModel)
            .where(AccountModel.email == email.strip().lower())
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        return self._model_to_entity(model) if model else None

    async def create(self, account: Account) -> Account:
        """Create a new account."""
        account_model = AccountModel(
            id=account.id,
            email=account.email,
            first_name=account.first_name,
            last_name=account.last_name,
            role=account.role.value,
            addresses=account.address_book.to_records(),
            version=account.version,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )

        self.db.add(account_model)
        # Use flush instead of commit to maintain transaction atomicity
        try:
            await self.db.flush()
        except IntegrityError:
            raise DuplicateAccountError(account.email)
        await self.db.refresh(account_model)

        return self._model_to_entity(account_model)

    async def save_address_book(self, account: Account) -> Account:
        """Persist the address book if nobody else wrote the account meanwhile."""
        updated_at = account.updated_at or datetime.now(timezone.utc)
        stmt = (
            update(AccountModel)
            .where(
                AccountModel.id == account.id,
                AccountModel.version == account.version,
            )
            .values(
                addresses=account.address_book.to_records(),
                version=AccountModel.version + 1,
                updated_at=updated_at,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(stmt)

        if result.rowcount != 1:
            exists = await self.db.scalar(
                select(AccountModel.id).where(AccountModel.id == account.id)
            )
            if exists is None:
                raise AccountNotFoundError(account.id)

            logger.warning(
                "Stale address book write rejected",
                account_id=str(account.id),
                expected_version=account.version,
            )
            raise ConcurrentModificationError(account.id, account.version)

        account.version += 1
        account.updated_at = updated_at
        return account

    async def commit(self) -> None:
        """Commit the current transaction."""
        await self.db.commit()

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        await self.db.rollback()

    def _model_to_entity(self, model: AccountModel) -> Account:
        """Convert SQLAlchemy model to domain entity."""
        return Account(
            id=model.id,
            email=model.email,
            first_name=model.first_name,
            last_name=model.last_name,
            role=model.role,
            address_book=AddressBook.from_records(model.addresses),
            version=model.version,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
