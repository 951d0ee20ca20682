"""
Pydantic schemas for persons API request/response validation.

Request schemas only check JSON types; the domain validator owns the
field rules so that absent and null stay distinguishable.
No business logic belongs here.
"""

from datetime import date
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

from person_api.application.persons.dtos import PersonResult
from person_api.domain.persons.entities import MISSING, PersonPayload


class CreatePersonRequest(BaseModel):
    """Request schema for person creation.

    Every field defaults to None; `model_fields_set` records which ones
    the client actually sent.
    """

    model_config = ConfigDict(extra="ignore")

    nickname: Optional[StrictStr] = Field(default=None, description="Unique nickname")
    name: Optional[StrictStr] = Field(default=None, description="Full name")
    birth_date: Optional[StrictStr] = Field(
        default=None, description="Date of birth, YYYY-MM-DD"
    )
    stack: Optional[list[Optional[StrictStr]]] = Field(
        default=None, description="Technology tags"
    )

    @field_validator("nickname", "name", "birth_date", "stack")
    @classmethod
    def must_be_valid_unicode(cls, value):
        """Reject text the store cannot encode, such as lone surrogates."""
        texts = value if isinstance(value, list) else [value]
        for text in texts:
            if text is None:
                continue
            try:
                text.encode("utf-8")
            except UnicodeEncodeError as exc:
                raise ValueError("text is not valid UTF-8") from exc
        return value

    def to_payload(self) -> PersonPayload:
        """Convert to a domain payload, keeping absent fields as MISSING."""
        sent = self.model_fields_set
        return PersonPayload(
            **{
                name: getattr(self, name) if name in sent else MISSING
                for name in ("nickname", "name", "birth_date", "stack")
            }
        )


class PersonResponse(BaseModel):
    """Response schema for a single person."""

    id: UUID
    nickname: str
    name: str
    birth_date: date
    stack: Optional[list[str]]

    @classmethod
    def from_result(cls, result: PersonResult) -> "PersonResponse":
        return cls(
            id=result.id,
            nickname=result.nickname,
            name=result.name,
            birth_date=result.birth_date,
            stack=result.stack,
        )
