"""FastAPI dependency injection functions."""

from typing import Annotated

from fastapi import Depends, Request

from hosted_checkout.services.order_payments import OrderPayments
from hosted_checkout.services.stripe_gateway import StripeGateway


def get_gateway(request: Request) -> StripeGateway:
    """Get the gateway built during application startup.

    Args:
        request: The incoming request.

    Returns:
        StripeGateway: The application's gateway.
    """
    return request.app.state.gateway


def get_order_payments(request: Request) -> OrderPayments:
    """Get the order payments sink registered during application startup."""
    return request.app.state.order_payments


Gateway = Annotated[StripeGateway, Depends(get_gateway)]
OrderPaymentsSink = Annotated[OrderPayments, Depends(get_order_payments)]
