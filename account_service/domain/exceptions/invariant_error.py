"""
Consistency-related domain exceptions.
"""


class InvariantViolationError(Exception):
    """Raised when an address book would break one of its invariants."""

    pass


class ConcurrentModificationError(Exception):
    """Raised when a stored record changed since it was loaded."""

    def __init__(self, account_id, expected_version: int):
        self.account_id = account_id
        self.expected_version = expected_version
        super().__init__(
            f"Account {account_id} was modified concurrently "
            f"(expected version {expected_version})"
        )
