"""Address book API endpoints."""

from uuid import UUID

from fastapi import APIRouter, status

from account_service.api.dependencies import ManageAddressesUseCaseDep
from account_service.api.schemas.address import (
    AddressBookResponse,
    AddressCreateRequest,
    AddressResponse,
    AddressUpdateRequest,
)

router = APIRouter(prefix="/accounts/{account_id}/addresses", tags=["addresses"])


@router.get("", response_model=AddressBookResponse)
async def list_addresses(account_id: UUID, use_case: ManageAddressesUseCaseDep):
    """List an account's addresses."""
    book = await use_case.get_address_book(account_id)
    return AddressBookResponse.from_domain(account_id, book)


@router.post("", response_model=AddressBookResponse, status_code=status.HTTP_201_CREATED)
async def add_address(
    account_id: UUID,
    address_data: AddressCreateRequest,
    use_case: ManageAddressesUseCaseDep,
):
    """Add an address; the first address of a book becomes its default."""
    account = await use_case.add_address(account_id, address_data.model_dump())
    return AddressBookResponse.from_domain(
        account_id, account.address_book, "Address added successfully"
    )


@router.get("/default", response_model=AddressResponse)
async def get_default_address(account_id: UUID, use_case: ManageAddressesUseCaseDep):
    """Get an account's default address."""
    address = await use_case.get_default_address(account_id)
    return AddressResponse.from_domain(address)


@router.patch("/default/{address_id}", response_model=AddressBookResponse)
async def set_default_address(
    account_id: UUID,
    address_id: str,
    use_case: ManageAddressesUseCaseDep,
):
    """Make an address the account's default."""
    account = await use_case.set_default_address(account_id, address_id)
    return AddressBookResponse.from_domain(
        account_id, account.address_book, "Default address set successfully"
    )


@router.put("/{address_id}", response_model=AddressBookResponse)
async def update_address(
    account_id: UUID,
    address_id: str,
    address_data: AddressUpdateRequest,
    use_case: ManageAddressesUseCaseDep,
):
    """Update the fields sent for one address."""
    account = await use_case.update_address(
        account_id, address_id, address_data.model_dump(exclude_unset=True)
    )
    return AddressBookResponse.from_domain(
        account_id, account.address_book, "Address updated successfully"
    )


@router.delete("/{address_id}", response_model=AddressBookResponse)
async def remove_address(
    account_id: UUID,
    address_id: str,
    use_case: ManageAddressesUseCaseDep,
):
    """Remove an address; a removed default is replaced by the first remaining one."""
    account = await use_case.remove_address(account_id, address_id)
    return AddressBookResponse.from_domain(
        account_id, account.address_book, "Address removed successfully"
    )
