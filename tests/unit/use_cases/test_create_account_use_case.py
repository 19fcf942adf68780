"""
Unit tests for CreateAccountUseCase.
"""

from unittest.mock import AsyncMock

import pytest

from account_service.application.use_cases.create_account import (
    CreateAccountRequest,
    CreateAccountUseCase,
)
from account_service.domain.entities.account import Account
from account_service.domain.exceptions.validation_error import (
    DuplicateAccountError,
    InvalidFormatError,
    ValidationError,
)
from account_service.domain.value_objects.account_role import AccountRole


class TestCreateAccountUseCase:
    """Test cases for CreateAccountUseCase."""

    @pytest.fixture
    def request_data(self):
        return CreateAccountRequest(
            email="Printer@Example.com",
            first_name="Ravi",
            last_name="Kumar",
            role=AccountRole.PRINTER,
        )

    @pytest.fixture
    def use_case(self, mock_account_repository):
        async def create(account):
            return account

        mock_account_repository.create = AsyncMock(side_effect=create)
        return CreateAccountUseCase(mock_account_repository)

    @pytest.mark.asyncio
    async def test_creates_account_with_empty_book(
        self, use_case, mock_account_repository, request_data
    ):
        account = await use_case.execute(request_data)

        assert account.email == "printer@example.com"
        assert account.role == AccountRole.PRINTER
        assert account.address_book.is_empty
        mock_account_repository.get_by_email.assert_awaited_once_with(
            "printer@example.com"
        )
        mock_account_repository.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_duplicate_email(
        self, use_case, mock_account_repository, request_data
    ):
        mock_account_repository.get_by_email.return_value = Account(
            email="printer@example.com", first_name="Other", last_name="Person"
        )

        with pytest.raises(DuplicateAccountError) as exc_info:
            await use_case.execute(request_data)

        assert isinstance(exc_info.value, ValidationError)
        mock_account_repository.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_email(self, use_case, mock_account_repository):
        with pytest.raises(InvalidFormatError):
            await use_case.execute(
                CreateAccountRequest(email="nope", first_name="A", last_name="B")
            )

        mock_account_repository.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_persistence_failure_rolls_back(
        self, use_case, mock_account_repository, request_data
    ):
        mock_account_repository.create.side_effect = RuntimeError("db down")

        with pytest.raises(RuntimeError):
            await use_case.execute(request_data)

        mock_account_repository.rollback.assert_awaited_once()
        mock_account_repository.commit.assert_not_awaited()
