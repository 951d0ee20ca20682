"""
Tests for the persons domain layer.

Tests validation rules, entities and error classes in isolation.
No external dependencies or IO required.
"""

from datetime import date
from uuid import uuid4

import pytest

from person_api.domain.persons.entities import (
    MISSING,
    NewPerson,
    Person,
    PersonPayload,
    searchable_text,
)
from person_api.domain.persons.errors import (
    DuplicateNicknameError,
    FieldTooLongError,
    InvalidDateError,
    InvalidStackEntryError,
    MalformedDateError,
    MissingFieldError,
    PersonNotFoundError,
    ValidationError,
)
from person_api.domain.persons.validation import parse_birth_date, validate_create

TODAY = date(2024, 6, 1)


def _payload(**overrides) -> PersonPayload:
    fields = {
        "nickname": "josé",
        "name": "José Roberto",
        "birth_date": "2000-10-01",
        "stack": ["C#", "Node", "Oracle"],
    }
    fields.update(overrides)
    return PersonPayload(**fields)


class TestValidateCreate:
    """Tests for validate_create."""

    def test_valid_payload_is_normalized(self) -> None:
        result = validate_create(_payload(), today=TODAY)
        assert result == NewPerson(
            nickname="josé",
            name="José Roberto",
            birth_date=date(2000, 10, 1),
            stack=["C#", "Node", "Oracle"],
        )

    @pytest.mark.parametrize("field_name", ["nickname", "name", "birth_date"])
    def test_absent_required_field(self, field_name: str) -> None:
        with pytest.raises(MissingFieldError) as exc_info:
            validate_create(_payload(**{field_name: MISSING}), today=TODAY)
        assert exc_info.value.field == field_name

    @pytest.mark.parametrize("field_name", ["nickname", "name", "birth_date"])
    def test_null_required_field(self, field_name: str) -> None:
        with pytest.raises(MissingFieldError) as exc_info:
            validate_create(_payload(**{field_name: None}), today=TODAY)
        assert exc_info.value.field == field_name

    def test_nickname_of_32_code_points_accepted(self) -> None:
        result = validate_create(_payload(nickname="ã" * 32), today=TODAY)
        assert result.nickname == "ã" * 32

    def test_nickname_of_33_code_points_rejected(self) -> None:
        with pytest.raises(FieldTooLongError) as exc_info:
            validate_create(_payload(nickname="a" * 33), today=TODAY)
        assert exc_info.value.field == "nickname"
        assert exc_info.value.max_length == 32

    def test_name_limit(self) -> None:
        validate_create(_payload(name="n" * 100), today=TODAY)
        with pytest.raises(FieldTooLongError) as exc_info:
            validate_create(_payload(name="n" * 101), today=TODAY)
        assert exc_info.value.field == "name"

    def test_length_checked_before_date(self) -> None:
        with pytest.raises(FieldTooLongError):
            validate_create(
                _payload(nickname="a" * 33, birth_date="not-a-date"), today=TODAY
            )

    def test_stack_absent_rejected(self) -> None:
        with pytest.raises(MissingFieldError) as exc_info:
            validate_create(_payload(stack=MISSING), today=TODAY)
        assert exc_info.value.field == "stack"

    def test_stack_null_rejected(self) -> None:
        with pytest.raises(MissingFieldError) as exc_info:
            validate_create(_payload(stack=None), today=TODAY)
        assert exc_info.value.field == "stack"

    def test_empty_stack_accepted(self) -> None:
        assert validate_create(_payload(stack=[]), today=TODAY).stack == []

    def test_null_stack_entry_rejected(self) -> None:
        with pytest.raises(InvalidStackEntryError) as exc_info:
            validate_create(_payload(stack=["Go", None]), today=TODAY)
        assert exc_info.value.index == 1

    def test_long_stack_entry_rejected(self) -> None:
        with pytest.raises(InvalidStackEntryError):
            validate_create(_payload(stack=["a" * 33]), today=TODAY)

    def test_stack_entry_of_32_accepted(self) -> None:
        assert validate_create(_payload(stack=["a" * 32]), today=TODAY).stack == ["a" * 32]

    def test_date_checked_before_stack(self) -> None:
        with pytest.raises(MalformedDateError):
            validate_create(_payload(birth_date="20230101", stack=None), today=TODAY)


class TestParseBirthDate:
    """Tests for the birth date rules."""

    def test_lower_bound_accepted(self) -> None:
        assert parse_birth_date("1900-01-01", today=TODAY) == date(1900, 1, 1)

    def test_current_year_accepted(self) -> None:
        assert parse_birth_date("2024-12-31", today=TODAY) == date(2024, 12, 31)

    @pytest.mark.parametrize(
        "value",
        [
            "20230101",
            "2023-1-01",
            "23-01-01",
            "2023/01/01",
            "",
            "２０２３-01-01",
            "2000-01-01\n",
            " 2000-01-01",
        ],
    )
    def test_malformed(self, value: str) -> None:
        with pytest.raises(MalformedDateError):
            parse_birth_date(value, today=TODAY)

    @pytest.mark.parametrize(
        "value", ["2023-13-01", "2023-02-30", "2023-00-10", "1899-12-31", "2025-01-01"]
    )
    def test_invalid(self, value: str) -> None:
        with pytest.raises(InvalidDateError):
            parse_birth_date(value, today=TODAY)

    def test_defaults_to_today(self) -> None:
        next_year = date.today().year + 1
        with pytest.raises(InvalidDateError):
            parse_birth_date(f"{next_year}-01-01")


class TestPersonEntity:
    """Tests for the Person entity and searchable text."""

    def test_create_copies_new_person(self) -> None:
        person_id = uuid4()
        new_person = NewPerson("ana", "Ana", date(1990, 1, 2), ["Go"])
        person = Person.create(person_id, new_person)
        assert person.id == person_id
        assert person.stack == ["Go"]
        assert person.stack is not new_person.stack

    def test_searchable_text_concatenates_lowercased(self) -> None:
        text = searchable_text("Ana Maria", "AnaM", ["Python", "Go"])
        assert text == 'ana mariaanam["python", "go"]'

    def test_searchable_text_without_stack(self) -> None:
        assert searchable_text("Ana", "ana", None) == "anaana"

    def test_missing_is_falsy_singleton(self) -> None:
        assert not MISSING
        assert PersonPayload().stack is MISSING


class TestDomainErrors:
    """Tests for domain error classes."""

    def test_validation_errors_share_base(self) -> None:
        for exc in (
            MissingFieldError("name"),
            FieldTooLongError("name", 100),
            MalformedDateError("x"),
            InvalidDateError("x"),
            InvalidStackEntryError(0),
        ):
            assert isinstance(exc, ValidationError)

    def test_duplicate_nickname_message(self) -> None:
        exc = DuplicateNicknameError("ana")
        assert "ana" in exc.message
        assert not isinstance(exc, ValidationError)

    def test_not_found_message(self) -> None:
        assert "abc" in str(PersonNotFoundError("abc"))
