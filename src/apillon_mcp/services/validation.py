"""Input contract enforcement for tool arguments."""

from typing import Any, List, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .errors import ArgumentValidationError, FieldViolation

ContractT = TypeVar("ContractT", bound=BaseModel)

_ENUM_ERRORS = {"literal_error", "enum"}


def _field_name(loc: tuple) -> str:
    if not loc:
        return "arguments"
    return ".".join(str(part) for part in loc)


def _to_violation(error: dict) -> FieldViolation:
    """Translate one pydantic error entry into a field violation."""
    field = _field_name(error.get("loc", ()))
    error_type = error.get("type", "")
    detail = error.get("msg", "")

    if error_type == "missing":
        return FieldViolation(field, FieldViolation.MISSING, "missing required field")
    if error_type in _ENUM_ERRORS:
        return FieldViolation(
            field,
            FieldViolation.INVALID_ENUM,
            f"invalid enum value {error.get('input')!r} ({detail})",
        )
    if error_type.endswith("_type") or error_type == "is_instance_of":
        return FieldViolation(field, FieldViolation.WRONG_TYPE, f"wrong type ({detail})")
    return FieldViolation(field, FieldViolation.INVALID_VALUE, detail)


def validate_arguments(
    tool_name: str, contract: Type[ContractT], arguments: Optional[Any]
) -> ContractT:
    """Validate a raw argument bag against an operation's contract.

    Unknown keys are ignored and absent optional fields take their declared
    defaults. Every violation is reported, not only the first.

    Raises:
        ArgumentValidationError: listing each violated field
    """
    if arguments is None:
        arguments = {}

    try:
        return contract.model_validate(arguments)
    except PydanticValidationError as e:
        violations: List[FieldViolation] = [_to_violation(err) for err in e.errors()]
        raise ArgumentValidationError(tool_name, violations) from e
