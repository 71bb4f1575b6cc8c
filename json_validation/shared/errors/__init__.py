"""
Shared error handling package.

Centralizes error-to-HTTP mapping and the JSON error body schemas.
"""
