"""
Interfaces layer package.

Contains FastAPI routers and Pydantic request/response schemas.
Payload validation goes through the pydantic adapter so that failures
surface as ValidationFailedError.
"""
