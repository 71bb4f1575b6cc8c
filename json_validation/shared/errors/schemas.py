"""
Pydantic schemas for error response bodies.

ValidationFailureResponse is the JSON envelope returned for every
translated validation failure. Field order and names are part of the
wire contract.
"""

from pydantic import BaseModel, Field

from json_validation.domain.entities import ValidationResult

VALIDATION_FAILURE_REASON = "Validation failure."


class ValidationFailureItem(BaseModel):
    """A single failing property and its message."""

    property: str
    message: str


class ValidationFailureResponse(BaseModel):
    """Response body for a failed validation.

    Attributes:
        reason: Always "Validation failure.".
        validation_failures: One item per failure, in the order the
            validator reported them. Serialized as ``validationFailures``.
    """

    reason: str = VALIDATION_FAILURE_REASON
    validation_failures: list[ValidationFailureItem] = Field(
        default_factory=list, serialization_alias="validationFailures"
    )

    @classmethod
    def from_result(cls, result: ValidationResult) -> "ValidationFailureResponse":
        return cls(
            validation_failures=[
                ValidationFailureItem(property=key, message=value)
                for key, value in result.failures
            ]
        )

    def to_json_bytes(self) -> bytes:
        """Serialize as compact UTF-8 JSON using wire field names."""
        return self.model_dump_json(by_alias=True).encode("utf-8")


class ErrorResponse(BaseModel):
    """Standard error response returned by the centralized error handlers."""

    error: str
