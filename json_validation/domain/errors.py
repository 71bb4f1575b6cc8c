"""
Domain-specific errors for validation.

ValidationFailedError is the single failure signal understood by the
JSON validation failure middleware. No framework imports allowed.
"""

from json_validation.domain.entities import ValidationResult


class ValidationFailedError(Exception):
    """Raised when an object fails validation.

    Carries the full ValidationResult so that outer layers can
    report every failing property.
    """

    def __init__(self, result: ValidationResult) -> None:
        super().__init__(f"Validation failed for object {result.target}.")
        self.result = result
