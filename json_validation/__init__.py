"""
JSON validation failure handling for ASGI applications.

Translates validation failures raised anywhere in the request pipeline
into a structured 422 JSON response that clients and proxies never cache.

Layers:
    - domain: Validation result value object and the failure signal.
    - infrastructure: Adapters turning validator output into domain results.
    - interfaces: Pydantic schemas and sample routes.
    - shared: Cross-cutting HTTP concerns (middleware, send hooks, errors, logging).
"""

from json_validation.domain.entities import ValidationResult
from json_validation.domain.errors import ValidationFailedError
from json_validation.shared.http.middleware import JsonValidationFailureMiddleware

__all__ = [
    "JsonValidationFailureMiddleware",
    "ValidationFailedError",
    "ValidationResult",
]
