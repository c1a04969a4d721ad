"""Checkout Pydantic schemas for API request/response models."""

from pydantic import BaseModel, ConfigDict, Field, HttpUrl

from hosted_checkout.schemas.payments import OrderSnapshot


class CheckoutSessionCreate(BaseModel):
    """Schema for creating a checkout session via POST /checkout/session."""

    model_config = ConfigDict(from_attributes=True)

    order_number: str = Field(min_length=1, description="Merchant-unique order number")
    amount_minor: int = Field(gt=0, description="Amount in minor currency units")
    currency: str = Field(min_length=3, max_length=3, description="ISO 4217 currency code")
    customer_email: str = Field(description="Customer email address")
    success_url: HttpUrl = Field(description="URL to redirect after successful checkout")
    cancel_url: HttpUrl = Field(description="URL to redirect if checkout is cancelled")

    def to_order_snapshot(self) -> OrderSnapshot:
        """Convert the request into the gateway's order snapshot."""
        return OrderSnapshot(
            order_number=self.order_number,
            amount_minor=self.amount_minor,
            currency=self.currency,
            customer_email=self.customer_email,
            success_url=str(self.success_url),
            cancel_url=str(self.cancel_url),
        )


class CheckoutSessionResponse(BaseModel):
    """Schema for checkout session creation response."""

    model_config = ConfigDict(from_attributes=True)

    checkout_url: str = Field(description="Stripe Checkout URL to redirect to")
    session_id: str = Field(description="Stripe Checkout Session ID")
    is_test_mode: bool = Field(default=False, description="Whether the session was created with a test key")


class WebhookAckResponse(BaseModel):
    """Schema for webhook acknowledgment."""

    status: str = Field(default="received", description="Acknowledgment status")
    order_number: str | None = Field(default=None, description="Correlated order number, if any")
