"""
Core dependencies for route protection
"""

from datetime import timedelta
from fastapi import Depends, Request
from studio.config.settings import Settings
from studio.core.errors import AuthenticationMissing, ResourceNotFound
from studio.database.supabase_client import get_supabase
from studio.modules.auth.tokens import SessionTokens
from studio.modules.users.schemas import UserResponse
from studio.modules.users.service import UserService
from supabase import Client
import logging

logger = logging.getLogger(__name__)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_session_tokens(settings: Settings = Depends(get_settings)) -> SessionTokens:
    return SessionTokens(
        settings.jwt_secret,
        ttl=timedelta(days=settings.session_ttl_days),
        algorithm=settings.jwt_algorithm,
    )


def get_user_service(supabase: Client = Depends(get_supabase)) -> UserService:
    return UserService(supabase)


def get_current_user(
    request: Request,
    settings: Settings = Depends(get_settings),
    tokens: SessionTokens = Depends(get_session_tokens),
    users: UserService = Depends(get_user_service)
) -> UserResponse:
    """Resolve the caller from the session cookie: token present, token valid, user exists"""
    token = request.cookies.get(settings.cookie_name)
    if not token:
        raise AuthenticationMissing("No authentication token found")

    user_id = tokens.verify(token)
    if user_id is None:
        raise AuthenticationMissing("Invalid or expired token")

    user = users.get_user_by_id(user_id)
    if user is None:
        logger.warning(f"Valid token for unknown user {user_id}")
        raise ResourceNotFound("User not found")
    return user


def is_https_request(request: Request) -> bool:
    """True when the client reached us over HTTPS, directly or through a proxy"""
    return (
        request.headers.get("x-forwarded-proto") == "https"
        or request.headers.get("x-forwarded-ssl") == "on"
        or request.url.scheme == "https"
    )
