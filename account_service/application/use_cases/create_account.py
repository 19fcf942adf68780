"""Create account use case."""

from dataclasses import dataclass

from account_service.application.interfaces.repositories import (
    AccountRepositoryInterface,
)
from account_service.config.logging import get_logger
from account_service.domain.entities.account import Account
from account_service.domain.entities.address_book import AddressBook
from account_service.domain.exceptions.validation_error import DuplicateAccountError
from account_service.domain.value_objects.account_role import AccountRole
from account_service.infrastructure.monitoring.metrics import record_account_created

logger = get_logger(__name__)


@dataclass
class CreateAccountRequest:
    """Request for creating an account."""

    email: str
    first_name: str
    last_name: str
    role: AccountRole = AccountRole.USER


class CreateAccountUseCase:
    """Use case for registering an account with an empty address book."""

    def __init__(self, account_repo: AccountRepositoryInterface):
        self.account_repo = account_repo

    async def execute(self, request: CreateAccountRequest) -> Account:
        """Create a new account."""
        account = Account(
            email=request.email,
            first_name=request.first_name,
            last_name=request.last_name,
            role=request.role,
            address_book=AddressBook(),
        )

        if await self.account_repo.get_by_email(account.email):
            logger.warning("Duplicate account registration", email=account.email)
            raise DuplicateAccountError(account.email)

        try:
            created = await self.account_repo.create(account)
            await self.account_repo.commit()
        except Exception as e:
            await self.account_repo.rollback()
            logger.error(
                "Failed to create account",
                email=account.email,
                error=str(e),
                exc_info=True,
            )
            raise

        record_account_created(created.role.value)
        logger.info(
            "Account created",
            account_id=str(created.id),
            role=created.role.value,
        )
        return created
