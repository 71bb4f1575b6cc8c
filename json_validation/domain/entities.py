"""
Domain entities for validation outcomes.

A ValidationResult is produced by whichever validator the host application
uses. It contains no framework imports and no IO operations.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a single object.

    Attributes:
        target: Name of the object that failed validation. Only used
            for diagnostics.
        failures: Ordered (property, message) pairs. A property may
            appear more than once.
    """

    target: str
    failures: tuple[tuple[str, str], ...] = field(default_factory=tuple)

    @classmethod
    def from_mapping(
        cls,
        target: str,
        failures: Mapping[str, str] | Iterable[tuple[str, str]],
    ) -> "ValidationResult":
        """Build a result from a mapping or an iterable of pairs."""
        items = failures.items() if isinstance(failures, Mapping) else failures
        return cls(
            target=target,
            failures=tuple((str(key), str(value)) for key, value in items),
        )
