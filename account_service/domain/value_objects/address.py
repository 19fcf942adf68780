"""
Address value object.
"""

import re
from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional

from account_service.domain.exceptions.validation_error import (
    InvalidFormatError,
    RequiredFieldError,
    ValidationError,
)
from account_service.domain.value_objects.address_label import AddressLabel

DEFAULT_COUNTRY = "India"
ZIP_PATTERN = re.compile(r"^[0-9]{6}$")

REQUIRED_FIELDS = ("street", "city", "state", "zip")
OPTIONAL_FIELDS = ("apartment", "landmark")
FIELD_ALIASES = {"isDefault": "is_default"}
MUTABLE_FIELDS = frozenset(
    REQUIRED_FIELDS + OPTIONAL_FIELDS + ("label", "country", "is_default")
)


def _clean(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def canonical_fields(data: Mapping[str, Any]) -> dict:
    """Resolve wire aliases and reject unknown address fields."""
    result = {}
    for key, value in data.items():
        name = FIELD_ALIASES.get(key, key)
        if name != "id" and name not in MUTABLE_FIELDS:
            raise ValidationError(f"Unknown address field '{key}'")
        result[name] = value
    return result


@dataclass(frozen=True)
class Address:
    """Postal address held in an account's address book."""

    id: str
    street: str
    city: str
    state: str
    zip: str
    label: AddressLabel = AddressLabel.HOME
    apartment: Optional[str] = None
    country: str = DEFAULT_COUNTRY
    landmark: Optional[str] = None
    is_default: bool = field(default=False)

    def __post_init__(self):
        """Normalize and validate address fields."""
        if not _clean(self.id):
            raise RequiredFieldError("id")

        for name in REQUIRED_FIELDS:
            value = _clean(getattr(self, name))
            if value is None:
                raise RequiredFieldError(name)
            object.__setattr__(self, name, value)

        for name in OPTIONAL_FIELDS:
            object.__setattr__(self, name, _clean(getattr(self, name)))

        object.__setattr__(self, "country", _clean(self.country) or DEFAULT_COUNTRY)
        object.__setattr__(self, "label", AddressLabel.parse(self.label))

        if not ZIP_PATTERN.match(self.zip):
            raise InvalidFormatError("zip", "6-digit PIN code")
        if not isinstance(self.is_default, bool):
            raise InvalidFormatError("is_default", "boolean")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], address_id: str) -> "Address":
        """Build an address from loose input data and an assigned id."""
        fields = canonical_fields(data)
        fields.pop("id", None)
        for name in REQUIRED_FIELDS:
            fields.setdefault(name, None)
        if fields.get("is_default") is None:
            fields["is_default"] = False
        return cls(id=address_id, **fields)

    def with_changes(self, data: Mapping[str, Any]) -> "Address":
        """Return a re-validated copy with the given fields replaced."""
        fields = canonical_fields(data)
        new_id = fields.pop("id", self.id)
        if new_id != self.id:
            raise ValidationError("Address id cannot be changed")
        if "is_default" in fields and fields["is_default"] is None:
            del fields["is_default"]
        return replace(self, **fields)

    def with_default(self, is_default: bool) -> "Address":
        """Return a copy with the default flag set."""
        if self.is_default == is_default:
            return self
        return replace(self, is_default=is_default)

    @property
    def full_address(self) -> str:
        """Get formatted full address."""
        parts = [self.apartment, self.street, self.landmark, self.city]
        line = ", ".join(part for part in parts if part)
        return f"{line}, {self.state} {self.zip}, {self.country}"

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "label": self.label.value,
            "street": self.street,
            "apartment": self.apartment,
            "city": self.city,
            "state": self.state,
            "zip": self.zip,
            "country": self.country,
            "landmark": self.landmark,
            "is_default": self.is_default,
        }
