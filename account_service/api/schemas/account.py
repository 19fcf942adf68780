"""
Account-related API schemas.
"""

from datetime import datetime
from typing import List
from uuid import UUID

from pydantic import BaseModel, Field

from account_service.domain.entities.account import Account
from account_service.domain.value_objects.account_role import AccountRole

from .address import AddressResponse


class AccountCreateRequest(BaseModel):
    """Account creation request schema."""

    email: str = Field(..., min_length=3, max_length=255)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    role: AccountRole = AccountRole.USER


class AccountResponse(BaseModel):
    """Account response schema."""

    id: UUID
    email: str
    first_name: str
    last_name: str
    role: AccountRole
    addresses: List[AddressResponse]
    version: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, account: Account) -> "AccountResponse":
        return cls(
            id=account.id,
            email=account.email,
            first_name=account.first_name,
            last_name=account.last_name,
            role=account.role,
            addresses=[
                AddressResponse.from_domain(address)
                for address in account.address_book
            ],
            version=account.version,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )
