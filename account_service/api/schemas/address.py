"""
Address-related API schemas.
"""

from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from account_service.domain.entities.address_book import AddressBook
from account_service.domain.value_objects.address import Address

from .common import BaseResponse


class AddressCreateRequest(BaseModel):
    """Address creation request schema.

    Only presence, types and lengths are checked here and rejected with 422.
    Field formats (PIN code, label choices) are checked by the domain and
    reported as 400 validation errors.
    """

    model_config = ConfigDict(populate_by_name=True)

    label: Optional[str] = Field(None, max_length=20)
    street: str = Field(..., max_length=255)
    apartment: Optional[str] = Field(None, max_length=100)
    city: str = Field(..., max_length=100)
    state: str = Field(..., max_length=100)
    zip: str = Field(..., max_length=10)
    country: Optional[str] = Field(None, max_length=100)
    landmark: Optional[str] = Field(None, max_length=255)
    is_default: bool = Field(False, alias="isDefault")


class AddressUpdateRequest(BaseModel):
    """Address update request schema; only the fields sent are changed."""

    model_config = ConfigDict(populate_by_name=True)

    label: Optional[str] = Field(None, max_length=20)
    street: Optional[str] = Field(None, max_length=255)
    apartment: Optional[str] = Field(None, max_length=100)
    city: Optional[str] = Field(None, max_length=100)
    state: Optional[str] = Field(None, max_length=100)
    zip: Optional[str] = Field(None, max_length=10)
    country: Optional[str] = Field(None, max_length=100)
    landmark: Optional[str] = Field(None, max_length=255)
    is_default: Optional[bool] = Field(None, alias="isDefault")


class AddressResponse(BaseModel):
    """Address response schema."""

    id: str
    label: str
    street: str
    apartment: Optional[str] = None
    city: str
    state: str
    zip: str
    country: str
    landmark: Optional[str] = None
    is_default: bool

    @classmethod
    def from_domain(cls, address: Address) -> "AddressResponse":
        return cls(**address.to_dict())


class AddressBookResponse(BaseResponse):
    """Address book response schema."""

    account_id: UUID
    addresses: List[AddressResponse]
    default_address_id: Optional[str] = None

    @classmethod
    def from_domain(
        cls, account_id: UUID, book: AddressBook, message: Optional[str] = None
    ) -> "AddressBookResponse":
        return cls(
            message=message,
            account_id=account_id,
            addresses=[AddressResponse.from_domain(address) for address in book],
            default_address_id=None if book.is_empty else book.get_default().id,
        )
