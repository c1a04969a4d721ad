"""Health check endpoints for monitoring and deployment verification."""

from fastapi import APIRouter

from hosted_checkout.api.deps import Gateway
from hosted_checkout.schemas.common import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Liveness check",
    description="Basic health check to verify the service is running. Used for liveness checks.",
)
async def health_check(gateway: Gateway) -> HealthResponse:
    """Return basic health status.

    This endpoint should always return 200 if the service is running.
    It does not call Stripe.

    Returns:
        HealthResponse: Current health status with timestamp.
    """
    return HealthResponse(
        webhooks_configured=gateway.webhooks.is_configured,
    )
