"""
Domain layer package.

Contains the validation result value object and the error raised when
validation fails. This layer has ZERO framework dependencies.
"""
