"""Request schemas for login and registration.

Each schema is a pydantic model assembled from the reusable field types
below. Field names are snake_case in Python and camelCase on the wire.
Strings, integers and booleans are strict: a JSON number is never accepted
where a string is expected, and vice versa.
"""

import enum
from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    StrictBool,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
    field_validator,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError


class JobType(str, enum.Enum):
    FULL_TIME = "FULL_TIME"
    PART_TIME = "PART_TIME"
    CONTRACT = "CONTRACT"
    INTERNSHIP = "INTERNSHIP"
    REMOTE = "REMOTE"


class CompanySize(str, enum.Enum):
    SMALL = "SMALL"
    MEDIUM = "MEDIUM"
    LARGE = "LARGE"


class Industry(str, enum.Enum):
    TECH = "TECH"
    FINANCE = "FINANCE"
    HEALTHCARE = "HEALTHCARE"
    EDUCATION = "EDUCATION"
    MANUFACTURING = "MANUFACTURING"


# ── Rule builders ─────────────────────────────────────────────────────


def _min_length(size: int, message: str) -> AfterValidator:
    def check(value: str) -> str:
        if len(value) < size:
            raise PydanticCustomError("string_too_short", message, {"min_length": size})
        return value

    return AfterValidator(check)


def _length_between(low: int, high: int) -> AfterValidator:
    def check(value: str) -> str:
        if len(value) < low:
            raise PydanticCustomError(
                "string_too_short",
                "String must contain at least {min_length} character(s)",
                {"min_length": low},
            )
        if len(value) > high:
            raise PydanticCustomError(
                "string_too_long",
                "String must contain at most {max_length} character(s)",
                {"max_length": high},
            )
        return value

    return AfterValidator(check)


def _at_least(bound: int, message: str) -> AfterValidator:
    def check(value: int) -> int:
        if value < bound:
            raise PydanticCustomError("too_small", message, {"ge": bound})
        return value

    return AfterValidator(check)


def _email_syntax(value: str) -> str:
    """Check the address exactly as sent: no display name, no padding."""
    if value != value.strip() or "<" in value:
        raise PydanticCustomError("value_error", "Invalid email address")
    try:
        result = validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise PydanticCustomError("value_error", "Invalid email address: {reason}", {"reason": str(exc)}) from None
    return result.normalized


_url_adapter = TypeAdapter(AnyUrl)


def _url_or_empty(value: str) -> str:
    """Accept an absolute URL or the empty string. The input is returned unchanged."""
    if value == "":
        return value
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise PydanticCustomError("url_parsing", "Invalid URL format") from None
    return value


# ── Field types ───────────────────────────────────────────────────────

# Length bounds run on the raw string, before the address is normalized.
Email = Annotated[StrictStr, _length_between(5, 255), AfterValidator(_email_syntax)]
Password = Annotated[StrictStr, _min_length(6, "Password must be at least 6 characters long")]
PersonName = Annotated[StrictStr, _min_length(2, "Name must be at least 2 characters long")]
Phone = Annotated[StrictStr, _min_length(10, "Phone number must be at least 10 characters long")]
Location = Annotated[StrictStr, _min_length(2, "Location must be at least 2 characters long")]
Skill = Annotated[StrictStr, _min_length(2, "Skill must be at least 2 characters long")]
Education = Annotated[StrictStr, _min_length(2, "Education must be at least 2 characters long")]
Experience = Annotated[StrictInt, _at_least(0, "Experience must be a positive number")]
CompanyName = Annotated[StrictStr, _min_length(2, "Company Name must be at least 2 characters long")]
Description = Annotated[StrictStr, _min_length(10, "Description must be at least 10 characters long")]
UrlOrEmpty = Annotated[StrictStr, AfterValidator(_url_or_empty)]


def _reject_null(value: object) -> object:
    # Optional fields may be omitted, but an explicit null is not a value.
    if value is None:
        raise PydanticCustomError("null_not_allowed", "Field may be omitted but must not be null")
    return value


class _RequestModel(BaseModel):
    model_config = {"alias_generator": to_camel, "frozen": True}


# ── Schemas ───────────────────────────────────────────────────────────


class LoginRequest(_RequestModel):
    """Login for both job seekers and employers."""

    email: Email
    password: Password


class RegisterUserRequest(_RequestModel):
    """Job seeker registration."""

    email: Email
    password: Password
    name: PersonName
    phone: Phone | None = None
    location: Location | None = None
    skills: list[Skill]
    experience: Experience
    education: Education | None = None
    resume_link: StrictStr | None = None
    portfolio: StrictStr | None = None
    job_title: StrictStr | None = None
    job_type: JobType
    availability: StrictBool

    @field_validator(
        "phone", "location", "education", "resume_link", "portfolio", "job_title",
        mode="before",
    )
    @classmethod
    def optional_not_null(cls, v: object) -> object:
        return _reject_null(v)


class RegisterEmployerRequest(_RequestModel):
    """Employer registration. Unlike job seekers, location is required."""

    email: Email
    password: Password
    name: PersonName
    company_name: CompanyName
    company_website: UrlOrEmpty | None = None
    company_size: CompanySize
    industry: Industry
    location: Location
    description: Description | None = None
    logo_url: UrlOrEmpty | None = None
    # Defaults to verified; an explicit false from the client is honored.
    verified: StrictBool = True

    @field_validator("company_website", "description", "logo_url", mode="before")
    @classmethod
    def optional_not_null(cls, v: object) -> object:
        return _reject_null(v)
