from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.networks import validate_email
from pydantic_core import PydanticCustomError

from library_app.errors import ValidationError
from library_app.utils.dates import INVALID_DATE_MESSAGE, parse_date
from library_app.utils.request_args import MAX_ID


def _not_blank(value):
    if isinstance(value, str) and not value.strip():
        raise PydanticCustomError("blank", "Field cannot be blank.")
    return value


# Books
class BookIn(BaseModel):
    title: str = Field(min_length=1, max_length=100)
    author: str = Field(min_length=1, max_length=50)

    @field_validator("title", "author")
    @classmethod
    def text_not_blank(cls, value):
        return _not_blank(value)


# Users
class UserIn(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: str

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value):
        return _not_blank(value)

    @field_validator("email")
    @classmethod
    def _email(cls, value):
        if not 5 <= len(value) <= 100:
            raise PydanticCustomError(
                "email_length", "Email must be at least 5 and at most 100 characters long."
            )
        # checked like EmailStr, stored exactly as given
        validate_email(value)
        return value


# Borrowed books
class BorrowIn(BaseModel):
    book_id: int = Field(gt=0, le=MAX_ID)
    user_id: int = Field(gt=0, le=MAX_ID)
    borrowed_from: date
    borrowed_until: date

    @field_validator("borrowed_from", "borrowed_until", mode="before")
    @classmethod
    def _wire_date(cls, value):
        try:
            parsed = parse_date(value)
        except ValueError:
            raise PydanticCustomError("date_format", INVALID_DATE_MESSAGE) from None
        if parsed is None:
            raise PydanticCustomError("missing", "Field required")
        return parsed


class SweepIn(BaseModel):
    today: date | None = None

    @field_validator("today", mode="before")
    @classmethod
    def _wire_date(cls, value):
        try:
            return parse_date(value)
        except ValueError:
            raise PydanticCustomError("date_format", INVALID_DATE_MESSAGE) from None


def load(schema: type[BaseModel], payload) -> BaseModel:
    """Validates a JSON body, turning every field problem into one ValidationError."""
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as e:
        errors: dict[str, list[str]] = {}
        for err in e.errors():
            field = ".".join(str(p) for p in err["loc"]) or "__root__"
            errors.setdefault(field, []).append(err["msg"])
        raise ValidationError("One or more validation errors occurred.", errors=errors) from None
