"""
Infrastructure layer package.

Adapters that translate third-party validator output into domain
ValidationResult values.
"""
