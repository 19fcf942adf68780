"""
FastAPI dependency injection container.
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from account_service.application.use_cases.create_account import (
    CreateAccountUseCase,
)
from account_service.application.use_cases.manage_addresses import (
    ManageAddressesUseCase,
)
from account_service.infrastructure.database.repositories.account_repository import (
    AccountRepository,
)


# Database Dependencies
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Get a database session from the application's session factory."""
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def get_account_repository(
    db: AsyncSession = Depends(get_db_session),
) -> AccountRepository:
    """Get account repository instance."""
    return AccountRepository(db)


# Use Case Dependencies
async def get_manage_addresses_use_case(
    account_repo: AccountRepository = Depends(get_account_repository),
) -> ManageAddressesUseCase:
    """Get address book use case instance."""
    return ManageAddressesUseCase(account_repo)


async def get_create_account_use_case(
    account_repo: AccountRepository = Depends(get_account_repository),
) -> CreateAccountUseCase:
    """Get account registration use case instance."""
    return CreateAccountUseCase(account_repo)


# Type aliases for cleaner dependency injection
AccountRepositoryDep = Annotated[AccountRepository, Depends(get_account_repository)]
ManageAddressesUseCaseDep = Annotated[
    ManageAddressesUseCase, Depends(get_manage_addresses_use_case)
]
CreateAccountUseCaseDep = Annotated[
    CreateAccountUseCase, Depends(get_create_account_use_case)
]
