"""Account-related API endpoints."""

from uuid import UUID

from fastapi import APIRouter, status

from account_service.api.dependencies import (
    AccountRepositoryDep,
    CreateAccountUseCaseDep,
)
from account_service.api.schemas.account import AccountCreateRequest, AccountResponse
from account_service.application.use_cases.create_account import CreateAccountRequest
from account_service.config.logging import get_logger
from account_service.domain.exceptions.not_found_error import AccountNotFoundError

logger = get_logger(__name__)
router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.post("", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
async def create_account(
    account_data: AccountCreateRequest,
    use_case: CreateAccountUseCaseDep,
):
    """Register an account with an empty address book."""
    account = await use_case.execute(
        CreateAccountRequest(
            email=account_data.email,
            first_name=account_data.first_name,
            last_name=account_data.last_name,
            role=account_data.role,
        )
    )
    return AccountResponse.from_domain(account)


@router.get("/{account_id}", response_model=AccountResponse)
async def get_account(account_id: UUID, account_repository: AccountRepositoryDep):
    """Get an account profile with its addresses."""
    account = await account_repository.get_by_id(account_id)
    if not account:
        raise AccountNotFoundError(account_id)
    return AccountResponse.from_domain(account)
