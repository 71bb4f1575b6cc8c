"""
JSON validation failure middleware.

Catches ValidationFailedError raised anywhere further down the ASGI stack
and answers with a 422 JSON body listing every failing property. The
response is never cached:
- Cache-Control, Pragma and Expires are overwritten at send time
- ETag is removed

Callers that cannot accept JSON get the error re-raised for the host's
default handling. A response that already started is left alone.
"""

import logging

from starlette.datastructures import Headers
from starlette.responses import Response
from starlette.types import ASGIApp, Receive, Scope, Send

from json_validation.domain.errors import ValidationFailedError
from json_validation.shared.errors.schemas import ValidationFailureResponse
from json_validation.shared.http.cache import clear_cache_headers
from json_validation.shared.http.hooks import ResponseStartHooks

JSON_MEDIA_TYPE = "application/json"
HTTP_422 = 422


def accepts_json(headers: Headers) -> bool:
    """Return True if any Accept header value mentions application/json.

    A missing Accept header counts as not accepting JSON.
    """
    return any(JSON_MEDIA_TYPE in value for value in headers.getlist("accept"))


class JsonValidationFailureMiddleware:
    """Middleware that serializes validation failures as a JSON response.

    Must be added outside any handler that would otherwise consume
    ValidationFailedError, so that the error reaches it unhandled.
    """

    def __init__(self, app: ASGIApp, logger: logging.Logger | None = None) -> None:
        self.app = app
        self.logger = logger or logging.getLogger(__name__)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        hooks = ResponseStartHooks(send)
        try:
            await self.app(scope, receive, hooks)
        except ValidationFailedError as exc:
            if not accepts_json(Headers(scope=scope)):
                self.logger.debug(
                    "Skipping JSON validation failure handling as requester "
                    "cannot accept JSON."
                )
                raise

            self.logger.info(
                "Validation failed for object %s.", exc.result.target, exc_info=exc
            )

            if hooks.started:
                return

            hooks.clear()
            hooks.on_starting(clear_cache_headers)
            response = Response(
                content=ValidationFailureResponse.from_result(exc.result).to_json_bytes(),
                status_code=HTTP_422,
                media_type=JSON_MEDIA_TYPE,
            )
            await response(scope, receive, hooks)
