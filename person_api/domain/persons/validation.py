"""
Validation rules for person creation payloads.

Pure functions: no IO, no framework imports. Checks run in a fixed
order and the first failing rule wins.
"""

import re
from datetime import date
from typing import Optional

from person_api.domain.persons.entities import MISSING, NewPerson, PersonPayload
from person_api.domain.persons.errors import (
    FieldTooLongError,
    InvalidDateError,
    InvalidStackEntryError,
    MalformedDateError,
    MissingFieldError,
)

NICKNAME_MAX_LEN = 32
NAME_MAX_LEN = 100
STACK_ENTRY_MAX_LEN = 32
MIN_BIRTH_YEAR = 1900

DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def _is_missing(value: object) -> bool:
    return value is MISSING or value is None


def parse_birth_date(value: str, today: Optional[date] = None) -> date:
    """Parse a YYYY-MM-DD birth date and check its year range.

    Args:
        value: Raw date text.
        today: Reference date for the upper year bound. Defaults to today.

    Returns:
        The parsed date.

    Raises:
        MalformedDateError: If value does not match YYYY-MM-DD.
        InvalidDateError: If value is not a real date or its year is
            outside [1900, current year].
    """
    if not DATE_PATTERN.fullmatch(value):
        raise MalformedDateError(value)

    try:
        parsed = date.fromisoformat(value)
    except ValueError as exc:
        raise InvalidDateError(value) from exc

    current_year = (today or date.today()).year
    if not MIN_BIRTH_YEAR <= parsed.year <= current_year:
        raise InvalidDateError(value)
    return parsed


def validate_create(
    payload: PersonPayload, today: Optional[date] = None
) -> NewPerson:
    """Validate a creation payload.

    Args:
        payload: Raw fields, each possibly MISSING or None.
        today: Reference date for the birth year range.

    Returns:
        The normalized NewPerson.

    Raises:
        MissingFieldError: nickname, name, birth_date or stack absent/null.
        FieldTooLongError: nickname > 32 or name > 100 code points.
        MalformedDateError: birth_date not shaped like YYYY-MM-DD.
        InvalidDateError: birth_date not a real date in range.
        InvalidStackEntryError: a stack entry is null or > 32 code points.
    """
    for field_name in ("nickname", "name", "birth_date"):
        if _is_missing(getattr(payload, field_name)):
            raise MissingFieldError(field_name)

    if len(payload.nickname) > NICKNAME_MAX_LEN:
        raise FieldTooLongError("nickname", NICKNAME_MAX_LEN)
    if len(payload.name) > NAME_MAX_LEN:
        raise FieldTooLongError("name", NAME_MAX_LEN)

    birth_date = parse_birth_date(payload.birth_date, today=today)

    if _is_missing(payload.stack):
        raise MissingFieldError("stack")

    for index, entry in enumerate(payload.stack):
        if entry is None or len(entry) > STACK_ENTRY_MAX_LEN:
            raise InvalidStackEntryError(index)

    return NewPerson(
        nickname=payload.nickname,
        name=payload.name,
        birth_date=birth_date,
        stack=list(payload.stack),
    )
