"""Request validation: run a raw payload through one of the auth schemas.

Rejection is a normal outcome, returned as a ``ValidationFailure`` rather
than raised. Only input that is not a key-value mapping at all raises
``InvalidRequestBody``.
"""

import enum
import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ValidationError, model_validator

from .schemas import LoginRequest, RegisterEmployerRequest, RegisterUserRequest

logger = logging.getLogger(__name__)


class SchemaKind(str, enum.Enum):
    LOGIN = "login"
    REGISTER_USER = "register-user"
    REGISTER_EMPLOYER = "register-employer"


SCHEMAS: Mapping[SchemaKind, type[BaseModel]] = MappingProxyType({
    SchemaKind.LOGIN: LoginRequest,
    SchemaKind.REGISTER_USER: RegisterUserRequest,
    SchemaKind.REGISTER_EMPLOYER: RegisterEmployerRequest,
})


class FieldViolation(BaseModel):
    """A single failed rule: dotted field path plus a readable message."""

    field: str
    message: str

    model_config = {"frozen": True}


class ValidationFailure(BaseModel):
    kind: SchemaKind
    violations: tuple[FieldViolation, ...]

    model_config = {"frozen": True}

    @property
    def fields(self) -> list[str]:
        return [v.field for v in self.violations]


class InvalidRequestBody(ValueError):
    """Raised when the payload is not a key-value mapping (or not JSON at all)."""


class RequestValidationFailed(Exception):
    """Raised by callers that prefer an exception over a failure result.

    Handled by the exception handler in main.py.
    """

    def __init__(self, failure: ValidationFailure):
        super().__init__(f"{failure.kind.value}: invalid fields {', '.join(failure.fields)}")
        self.failure = failure


class ValidationResult(BaseModel):
    """Either a typed request value or a failure, never both."""

    value: BaseModel | None = None
    failure: ValidationFailure | None = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def exactly_one_outcome(self) -> "ValidationResult":
        if (self.value is None) == (self.failure is None):
            raise ValueError("ValidationResult needs exactly one of value or failure")
        return self

    @property
    def ok(self) -> bool:
        return self.failure is None

    def unwrap(self) -> BaseModel:
        """Return the typed value, or raise ``RequestValidationFailed``."""
        if self.failure is not None:
            raise RequestValidationFailed(self.failure)
        return self.value


def _field_path(loc: tuple) -> str:
    return ".".join(str(part) for part in loc) or "body"


def validate(kind: SchemaKind | str, raw_input: Any) -> ValidationResult:
    """Validate ``raw_input`` against the schema selected by ``kind``.

    Every field is checked; all violations are collected in field order.
    """
    kind = SchemaKind(kind)
    if not isinstance(raw_input, Mapping):
        raise InvalidRequestBody(
            f"{kind.value} payload must be an object, got {type(raw_input).__name__}"
        )

    schema = SCHEMAS[kind]
    try:
        value = schema.model_validate(dict(raw_input))
    except ValidationError as exc:
        violations = tuple(
            FieldViolation(field=_field_path(err["loc"]), message=err["msg"])
            for err in exc.errors()
        )
        failure = ValidationFailure(kind=kind, violations=violations)
        logger.debug("Rejected %s payload: %s", kind.value, ", ".join(failure.fields))
        return ValidationResult(failure=failure)

    return ValidationResult(value=value)
