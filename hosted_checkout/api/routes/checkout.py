"""Checkout API routes for Stripe integration."""

from fastapi import APIRouter, status

from hosted_checkout.api.deps import Gateway
from hosted_checkout.api.middleware.error_handler import UpstreamError
from hosted_checkout.core.exceptions import ProviderError
from hosted_checkout.schemas.checkout import CheckoutSessionCreate, CheckoutSessionResponse

router = APIRouter(prefix="/checkout", tags=["checkout"])


@router.post(
    "/session",
    response_model=CheckoutSessionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Stripe Checkout Session",
    description="Creates a hosted Stripe Checkout Session for a single order payment.",
)
async def create_checkout_session(
    data: CheckoutSessionCreate,
    gateway: Gateway,
) -> CheckoutSessionResponse:
    """Create a Stripe Checkout Session for an order.

    The frontend should redirect to the returned checkout_url. Every call
    creates a new session.

    Args:
        data: Order details for the session.
        gateway: The application's Stripe gateway.

    Returns:
        CheckoutSessionResponse: Contains checkout_url for redirect.

    Raises:
        UpstreamError: 502 if Stripe rejects the request or is unreachable.
    """
    try:
        result = await gateway.create_session(data.to_order_snapshot())
    except ProviderError as e:
        raise UpstreamError("Payment provider request failed") from e

    return CheckoutSessionResponse(
        checkout_url=str(result.redirect_url),
        session_id=result.session_id,
        is_test_mode=gateway.test_mode,
    )
