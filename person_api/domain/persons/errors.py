"""
Domain-specific errors for the persons bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class PersonDomainError(Exception):
    """Base error for all persons domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ValidationError(PersonDomainError):
    """Base error for a creation payload rejected before persistence."""


class MissingFieldError(ValidationError):
    """Raised when a required field is absent or null."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing required field: {field}")
        self.field = field


class FieldTooLongError(ValidationError):
    """Raised when a text field exceeds its maximum length in code points."""

    def __init__(self, field: str, max_length: int) -> None:
        super().__init__(
            f"Field {field} exceeds {max_length} characters"
        )
        self.field = field
        self.max_length = max_length


class MalformedDateError(ValidationError):
    """Raised when birth_date does not look like YYYY-MM-DD."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Malformed date: {value!r}. Expected YYYY-MM-DD.")
        self.value = value


class InvalidDateError(ValidationError):
    """Raised when birth_date is well-formed but not an acceptable date."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid date: {value!r}")
        self.value = value


class InvalidStackEntryError(ValidationError):
    """Raised when a stack entry is null or too long."""

    def __init__(self, index: int) -> None:
        super().__init__(f"Invalid stack entry at position {index}")
        self.index = index


class DuplicateNicknameError(PersonDomainError):
    """Raised when another person already uses the nickname."""

    def __init__(self, nickname: str) -> None:
        super().__init__(f"Nickname already taken: {nickname}")
        self.nickname = nickname


class PersonNotFoundError(PersonDomainError):
    """Raised when a person cannot be found."""

    def __init__(self, person_id: str) -> None:
        super().__init__(f"Person not found: {person_id}")
        self.person_id = person_id


class StoreUnavailableError(PersonDomainError):
    """Raised when the person store cannot execute a statement."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Person store unavailable: {reason}")
        self.reason = reason
