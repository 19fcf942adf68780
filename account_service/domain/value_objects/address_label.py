"""
Address label value object.
"""

from enum import Enum

from account_service.domain.exceptions.validation_error import InvalidChoiceError


class AddressLabel(str, Enum):
    """Tag describing what an address is used for."""

    HOME = "home"
    WORK = "work"
    BILLING = "billing"
    SHIPPING = "shipping"
    OTHER = "other"

    @classmethod
    def default(cls) -> "AddressLabel":
        """Label used when none is given."""
        return cls.HOME

    @classmethod
    def parse(cls, value) -> "AddressLabel":
        """Parse a label, raising a validation error for unknown values."""
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.default()
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidChoiceError("label", value, [label.value for label in cls])
