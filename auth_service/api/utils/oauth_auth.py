"""
OAuth Callback Authentication

Proves that an account-link request comes from the trusted identity-provider
bridge (the frontend's OAuth callback handler), which shares a secret with
this service.
"""

import hmac

from fastapi import Header

from auth_service.api.error import ClientError
from config import ApplicationConfig


async def verify_oauth_callback_secret(x_oauth_callback_secret: str = Header(None)):
    """
    Verify the shared secret from the X-OAuth-Callback-Secret header.

    The provider handshake itself happens upstream; this only establishes
    that the caller is the component that performed it.

    Raises:
        ClientError: 401 if the secret is missing or wrong

    Returns:
        True if valid
    """
    if not x_oauth_callback_secret:
        raise ClientError.unauthorized("INVALID_CALLBACK_SECRET", "OAuth callback secret required")

    if not hmac.compare_digest(
        x_oauth_callback_secret.encode(), ApplicationConfig.OAUTH_CALLBACK_SECRET.encode()
    ):
        raise ClientError.unauthorized("INVALID_CALLBACK_SECRET", "Invalid OAuth callback secret")

    return True
