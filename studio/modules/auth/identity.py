from typing import Optional
import logging

from supabase import Client

logger = logging.getLogger(__name__)


class IdentityError(Exception):
    """Credential check rejected by the identity provider. The message is the provider's own."""


class IdentityProvider:
    """Thin adapter over Supabase Auth. Passwords go to the provider and nowhere else."""

    def __init__(self, auth_client: Client):
        self.auth_client = auth_client

    def sign_up(self, email: str, password: str, full_name: Optional[str] = None) -> str:
        """Register credentials with the provider and return the provider's user id"""
        user_metadata = {}
        if full_name:
            user_metadata["full_name"] = full_name
        try:
            auth_response = self.auth_client.auth.sign_up({
                "email": email,
                "password": password,
                "options": {
                    "data": user_metadata
                }
            })
        except Exception as e:
            logger.info("Provider rejected sign-up for %s: %s", email, e)
            raise IdentityError(_provider_message(e, "Failed to create user account")) from e

        if not auth_response.user:
            raise IdentityError("Failed to create user account")
        return auth_response.user.id

    def sign_in(self, email: str, password: str) -> str:
        """Check credentials with the provider and return the provider's user id"""
        try:
            auth_response = self.auth_client.auth.sign_in_with_password({
                "email": email,
                "password": password
            })
        except Exception as e:
            logger.info("Provider rejected sign-in for %s: %s", email, e)
            raise IdentityError(_provider_message(e, "Invalid email or password")) from e

        if not auth_response.user:
            raise IdentityError("Invalid email or password")
        return auth_response.user.id


def _provider_message(exc: Exception, fallback: str) -> str:
    message = getattr(exc, "message", None) or str(exc)
    return message or fallback
