"""
Validation-related domain exceptions.
"""


class ValidationError(Exception):
    """Base exception for validation errors."""

    pass


class RequiredFieldError(ValidationError):
    """Raised when required field is missing."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Required field '{field_name}' is missing")


class InvalidFormatError(ValidationError):
    """Raised when field format is invalid."""

    def __init__(self, field_name: str, expected_format: str):
        self.field_name = field_name
        self.expected_format = expected_format
        super().__init__(
            f"Field '{field_name}' has invalid format, expected: {expected_format}"
        )


class InvalidChoiceError(ValidationError):
    """Raised when a field value is not one of the allowed choices."""

    def __init__(self, field_name: str, value, choices):
        self.field_name = field_name
        self.value = value
        self.choices = list(choices)
        super().__init__(
            f"Field '{field_name}' has invalid value '{value}', "
            f"must be one of: {', '.join(self.choices)}"
        )


class DuplicateAccountError(ValidationError):
    """Raised when an account with the same email already exists."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Account with email '{email}' already exists")
