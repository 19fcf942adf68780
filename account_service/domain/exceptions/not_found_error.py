"""
Lookup-related domain exceptions.
"""


class NotFoundError(Exception):
    """Base exception for missing resources."""

    pass


class AccountNotFoundError(NotFoundError):
    """Raised when an account does not exist."""

    def __init__(self, account_id):
        self.account_id = account_id
        super().__init__(f"Account {account_id} not found")


class AddressNotFoundError(NotFoundError):
    """Raised when an address id is absent from an address book."""

    def __init__(self, address_id: str):
        self.address_id = address_id
        super().__init__(f"Address {address_id} not found")


class DefaultAddressNotFoundError(NotFoundError):
    """Raised when a default address is requested from an empty book."""

    def __init__(self):
        super().__init__("Default address not found")
