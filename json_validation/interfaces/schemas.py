"""
Pydantic schemas for the sample API.

These schemas enforce input validation and define the API contract.
No business logic belongs here.
"""

from pydantic import BaseModel, Field

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
DISPLAY_NAME_MIN_LEN = 1
DISPLAY_NAME_MAX_LEN = 64


class HealthResponse(BaseModel):
    """Response schema for the liveness endpoint."""

    status: str
    name: str
    version: str


class CreateAccountRequest(BaseModel):
    """Request schema for the account creation endpoint.

    Attributes:
        email: Contact address for the account.
        display_name: Public name (1-64 chars).
        age: Age in whole years, never negative.
    """

    email: str = Field(..., pattern=EMAIL_PATTERN)
    display_name: str = Field(
        ..., min_length=DISPLAY_NAME_MIN_LEN, max_length=DISPLAY_NAME_MAX_LEN
    )
    age: int = Field(..., ge=0)


class AccountResponse(BaseModel):
    """Response schema for a created account."""

    email: str
    display_name: str
    age: int
