"""Stripe SDK access.

The API key is never assigned to ``stripe.api_key``. Every outbound call
receives the key explicitly so gateways built with different credentials can
run side by side.
"""

import stripe


def get_stripe() -> stripe:
    """Get the Stripe module.

    Returns:
        stripe: The Stripe SDK module.

    Note:
        Returned through a function so tests can patch it per module.
    """
    return stripe


def is_test_key(api_key: str) -> bool:
    """Check whether an API key targets Stripe test mode.

    Args:
        api_key: Stripe secret or restricted key.

    Returns:
        bool: True for ``sk_test_``/``rk_test_`` keys.
    """
    return api_key.startswith(("sk_test_", "rk_test_"))
