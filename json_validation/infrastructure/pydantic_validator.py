"""
Pydantic validation adapter.

Runs pydantic model validation and reports failures as the domain
ValidationFailedError, so that route handlers can validate payloads
and let JsonValidationFailureMiddleware produce the response.
"""

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from json_validation.domain.entities import ValidationResult
from json_validation.domain.errors import ValidationFailedError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _property_path(loc: tuple[int | str, ...]) -> str:
    """Join a pydantic error location into a dotted property path.

    Model-level errors have an empty location and map to "".
    """
    return ".".join(str(part) for part in loc)


def result_from_pydantic_error(
    exc: ValidationError, target: str | None = None
) -> ValidationResult:
    """Convert a pydantic ValidationError into a ValidationResult.

    Args:
        exc: The error raised by pydantic.
        target: Name to report for the failing object. Defaults to the
            pydantic model title.

    Returns:
        A result with one (property, message) pair per pydantic error,
        in pydantic's order.
    """
    return ValidationResult(
        target=target or exc.title,
        failures=tuple(
            (_property_path(error["loc"]), error["msg"]) for error in exc.errors()
        ),
    )


def _failed(exc: ValidationError) -> ValidationFailedError:
    result = result_from_pydantic_error(exc)
    logger.debug(
        "Pydantic rejected %s with %d failure(s)", result.target, len(result.failures)
    )
    return ValidationFailedError(result)


def validate_model(model_cls: type[ModelT], data: Any) -> ModelT:
    """Validate ``data`` against ``model_cls``.

    Raises:
        ValidationFailedError: If pydantic rejects the data.
    """
    try:
        return model_cls.model_validate(data)
    except ValidationError as exc:
        raise _failed(exc) from exc


def validate_json(model_cls: type[ModelT], raw: str | bytes) -> ModelT:
    """Parse and validate a raw JSON document against ``model_cls``.

    Malformed JSON and documents that are not objects are reported like
    any other failure, with an empty property.

    Raises:
        ValidationFailedError: If the JSON is invalid or pydantic rejects it.
    """
    try:
        return model_cls.model_validate_json(raw)
    except ValidationError as exc:
        raise _failed(exc) from exc
