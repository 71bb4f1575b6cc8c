"""
FastAPI router for account creation.

Reads the raw request body and validates it through the pydantic adapter
instead of a typed parameter. Malformed JSON, non-object documents and
field errors are all raised as ValidationFailedError and rendered by
JsonValidationFailureMiddleware.
"""

import logging

from fastapi import APIRouter, Request, status

from json_validation.infrastructure.pydantic_validator import validate_json
from json_validation.interfaces.schemas import AccountResponse, CreateAccountRequest
from json_validation.shared.errors.schemas import ValidationFailureResponse

logger = logging.getLogger(__name__)

HTTP_422 = 422

router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.post(
    "",
    response_model=AccountResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an account",
    responses={HTTP_422: {"model": ValidationFailureResponse}},
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {
                    "schema": CreateAccountRequest.model_json_schema(),
                }
            },
        }
    },
)
async def create_account(request: Request) -> AccountResponse:
    """Validate the JSON body and echo the created account."""
    account = validate_json(CreateAccountRequest, await request.body())
    logger.info("Account accepted for %s", account.display_name)
    return AccountResponse(**account.model_dump())
