"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from starlette.middleware.base import BaseHTTPMiddleware

from hosted_checkout.api.middleware.error_handler import error_handler_middleware
from hosted_checkout.api.routes import checkout, health, webhooks
from hosted_checkout.core.config import get_settings
from hosted_checkout.services.order_payments import LoggingOrderPayments
from hosted_checkout.services.stripe_gateway import StripeGateway

# Configure logging
logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Builds the Stripe gateway before serving. A missing API key raises
    ConfigurationError here and the application does not start.

    Args:
        app: FastAPI application instance.

    Yields:
        None: Control back to the application.
    """
    # Startup
    settings = get_settings()
    logger.info("Starting %s in %s mode", settings.app_name, settings.app_env)

    app.state.gateway = StripeGateway.from_settings(settings)
    app.state.order_payments = LoggingOrderPayments()
    logger.info("Stripe gateway configured (test_mode=%s)", app.state.gateway.test_mode)

    yield
    # Shutdown
    logger.info("Shutting down %s", settings.app_name)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title="Hosted Checkout API",
        description="Stripe hosted checkout sessions and webhook normalization",
        version="0.1.0",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )

    # Add error handler middleware (outermost - catches all errors)
    app.add_middleware(BaseHTTPMiddleware, dispatch=error_handler_middleware)

    # Mount health routes at root level (no prefix)
    app.include_router(health.router)

    # Create API v1 router for versioned endpoints
    api_v1_router = APIRouter(prefix="/api/v1")
    api_v1_router.include_router(checkout.router)
    api_v1_router.include_router(webhooks.router)

    app.include_router(api_v1_router)

    return app


# Create application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "hosted_checkout.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
