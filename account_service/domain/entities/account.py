"""Account domain entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from account_service.domain.entities.address_book import AddressBook
from account_service.domain.exceptions.validation_error import (
    InvalidChoiceError,
    InvalidFormatError,
    RequiredFieldError,
)
from account_service.domain.value_objects.account_role import AccountRole


@dataclass
class Account:
    """Marketplace account (customer, creator, printer or admin)."""

    email: str
    first_name: str
    last_name: str
    role: AccountRole = AccountRole.USER
    address_book: AddressBook = field(default_factory=AddressBook)
    id: UUID = field(default_factory=uuid4)
    version: int = 1
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate account data."""
        if not self.email or not self.email.strip():
            raise RequiredFieldError("email")
        self.email = self.email.strip().lower()
        if "@" not in self.email:
            raise InvalidFormatError("email", "email address")

        if not self.first_name or not self.first_name.strip():
            raise RequiredFieldError("first_name")
        if not self.last_name or not self.last_name.strip():
            raise RequiredFieldError("last_name")
        self.first_name = self.first_name.strip()
        self.last_name = self.last_name.strip()
        try:
            self.role = AccountRole(self.role)
        except ValueError:
            raise InvalidChoiceError(
                "role", self.role, [role.value for role in AccountRole]
            )

        # Set timestamps if not provided
        if not self.created_at:
            self.created_at = datetime.now(timezone.utc)
        if not self.updated_at:
            self.updated_at = self.created_at

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def replace_address_book(self, address_book: AddressBook) -> None:
        """Swap in a new address book."""
        self.address_book = address_book
        self.updated_at = datetime.now(timezone.utc)
