"""Address book domain entity."""

from typing import Any, Callable, Iterable, Iterator, List, Mapping, Optional, Tuple
from uuid import uuid4

from account_service.domain.exceptions.invariant_error import InvariantViolationError
from account_service.domain.exceptions.not_found_error import (
    AddressNotFoundError,
    DefaultAddressNotFoundError,
)
from account_service.domain.value_objects.address import Address, canonical_fields

IdFactory = Callable[[], str]


def generate_address_id() -> str:
    """Generate an opaque unique address id."""
    return uuid4().hex


def reconcile_default(
    addresses: Iterable[Address], target_id: str
) -> Tuple[Address, ...]:
    """Return a new sequence in which only ``target_id`` is flagged default."""
    return tuple(address.with_default(address.id == target_id) for address in addresses)


def normalize_defaults(addresses: Iterable[Address]) -> Tuple[Address, ...]:
    """
    Restore the single-default rule on a sequence of addresses.

    A non-empty sequence without a default gets its first entry promoted.
    When several entries are flagged, only the first flagged one is kept.
    """
    addresses = tuple(addresses)
    if not addresses:
        return addresses

    defaults = [address for address in addresses if address.is_default]
    if not defaults:
        return reconcile_default(addresses, addresses[0].id)
    if len(defaults) > 1:
        return reconcile_default(addresses, defaults[0].id)
    return addresses


class AddressBook:
    """
    Ordered collection of one account's postal addresses.

    Entries live in an insertion-ordered mapping keyed by address id. The
    book is immutable: every operation returns a new book and leaves the
    receiver untouched.
    """

    def __init__(
        self,
        addresses: Iterable[Address] = (),
        id_factory: Optional[IdFactory] = None,
    ):
        entries = {}
        for address in addresses:
            if address.id in entries:
                raise InvariantViolationError(
                    f"Duplicate address id '{address.id}' in address book"
                )
            entries[address.id] = address

        self._entries = entries
        self._id_factory = id_factory or generate_address_id

    @classmethod
    def from_records(
        cls,
        records: Optional[Iterable[Mapping[str, Any]]],
        id_factory: Optional[IdFactory] = None,
    ) -> "AddressBook":
        """Build a book from its persisted list of address records."""
        addresses = [
            Address.from_dict(record, record.get("id")) for record in records or []
        ]
        return cls(addresses, id_factory=id_factory)

    def to_records(self) -> List[dict]:
        """Serialize the book to an ordered list of address records."""
        return [address.to_dict() for address in self]

    @property
    def addresses(self) -> Tuple[Address, ...]:
        return tuple(self._entries.values())

    @property
    def is_empty(self) -> bool:
        return not self._entries

    @property
    def default_count(self) -> int:
        return sum(1 for address in self if address.is_default)

    def get(self, address_id: str) -> Address:
        """Get an address by id."""
        try:
            return self._entries[address_id]
        except KeyError:
            raise AddressNotFoundError(address_id)

    def add(self, data: Mapping[str, Any]) -> "AddressBook":
        """
        Append a new address.

        The first address of a book, or one explicitly requested as default,
        becomes the only default entry.
        """
        address_id = self._id_factory()
        if address_id in self._entries:
            raise InvariantViolationError(
                f"Generated address id '{address_id}' is already in use"
            )

        address = Address.from_dict(data, address_id)
        addresses = self.addresses + (address,)

        if self.is_empty or address.is_default:
            addresses = reconcile_default(addresses, address_id)

        return self._derive(addresses)

    def update(self, address_id: str, data: Mapping[str, Any]) -> "AddressBook":
        """
        Apply field changes to an existing address.

        ``is_default=True`` makes the target the only default. ``False`` only
        clears the target's flag, so clearing the sole default leaves the book
        without one until it is normalized.
        """
        current = self.get(address_id)
        updated = current.with_changes(data)
        addresses = tuple(
            updated if address.id == address_id else address for address in self
        )

        if canonical_fields(data).get("is_default") is True:
            addresses = reconcile_default(addresses, address_id)

        return self._derive(addresses)

    def remove(self, address_id: str) -> "AddressBook":
        """Remove an address, promoting the first remaining one if it was default."""
        removed = self.get(address_id)
        remaining = [address for address in self if address.id != address_id]

        if removed.is_default and remaining:
            remaining[0] = remaining[0].with_default(True)

        return self._derive(remaining)

    def set_default(self, address_id: str) -> "AddressBook":
        """Make an address the only default one."""
        target = self.get(address_id)
        if target.is_default and self.default_count == 1:
            return self

        return self._derive(reconcile_default(self, address_id))

    def get_default(self) -> Address:
        """Get the default address, falling back to the first entry."""
        for address in self:
            if address.is_default:
                return address

        if self.is_empty:
            raise DefaultAddressNotFoundError()
        return self.addresses[0]

    def normalized(self) -> "AddressBook":
        """Return a book that satisfies the single-default rule."""
        return self._derive(normalize_defaults(self))

    def check_invariants(self) -> None:
        """Raise if the book does not have exactly one default when non-empty."""
        if self.is_empty:
            return
        count = self.default_count
        if count != 1:
            raise InvariantViolationError(
                f"Address book must have exactly one default address, found {count}"
            )

    def _derive(self, addresses: Iterable[Address]) -> "AddressBook":
        return AddressBook(addresses, id_factory=self._id_factory)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Address]:
        return iter(self._entries.values())

    def __contains__(self, address_id: object) -> bool:
        return address_id in self._entries

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddressBook):
            return NotImplemented
        return self.addresses == other.addresses

    def __repr__(self) -> str:
        return f"<AddressBook(size={len(self)}, defaults={self.default_count})>"
