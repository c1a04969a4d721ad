"""Error middleware rendering gateway API errors as ErrorResponse bodies."""

import logging
import traceback
from typing import Any, Callable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse

from hosted_checkout.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Error returned to the client with a fixed status code and error type."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_type: str = "api_error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class WebhookNotHandledError(APIError):
    """Webhook was rejected: unverifiable or unsupported.

    The message is the same for every cause so verification details never
    reach the caller.
    """

    status_code = status.HTTP_400_BAD_REQUEST
    error_type = "webhook_not_handled"

    def __init__(self) -> None:
        super().__init__("Webhook not handled")


class UpstreamError(APIError):
    """Payment provider call failed."""

    status_code = status.HTTP_502_BAD_GATEWAY
    error_type = "provider_error"

    def __init__(self, message: str = "Payment provider request failed") -> None:
        super().__init__(message)


def create_error_response(error_type: str, message: str, status_code: int, request_id: str | None = None) -> JSONResponse:
    """Render an ErrorResponse body with the given status code."""
    body = ErrorResponse(error=error_type, message=message, request_id=request_id)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json", exclude_none=True))


async def error_handler_middleware(request: Request, call_next: Callable[[Request], Any]) -> Response:
    """Turn APIError and unexpected exceptions into ErrorResponse bodies.

    Causes of an APIError (for example the Stripe exception behind an
    UpstreamError) are logged and never returned.

    Args:
        request: The incoming request.
        call_next: Next middleware or route handler.

    Returns:
        Response: The handler's response or a formatted error response.
    """
    request_id = request.headers.get("X-Request-ID")

    try:
        return await call_next(request)

    except APIError as e:
        logger.warning(
            "API error: %s - %s (cause: %s)",
            e.error_type,
            e.message,
            repr(e.__cause__) if e.__cause__ else "-",
            extra={"request_id": request_id, "status_code": e.status_code},
        )
        return create_error_response(e.error_type, e.message, e.status_code, request_id)

    except Exception as e:
        logger.error(
            "Unhandled exception: %s\n%s",
            str(e),
            traceback.format_exc(),
            extra={"request_id": request_id},
        )
        return create_error_response(
            "internal_error",
            "An unexpected error occurred",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            request_id,
        )
