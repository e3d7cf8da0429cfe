from fastapi import APIRouter, Depends, Request, Response
from studio.config.settings import Settings
from studio.core.dependencies import (
    get_current_user, get_session_tokens, get_settings, get_user_service, is_https_request
)
from studio.database.supabase_client import get_auth_client
from studio.modules.auth.identity import IdentityProvider
from studio.modules.auth.schemas import AuthResponse, MessageResponse, SignInRequest, SignUpRequest
from studio.modules.auth.service import AuthService
from studio.modules.auth.tokens import SessionTokens
from studio.modules.users.schemas import UserEnvelope, UserResponse
from studio.modules.users.service import UserService
from supabase import Client

router = APIRouter(prefix="/auth", tags=["auth"])


def get_identity_provider(auth_client: Client = Depends(get_auth_client)) -> IdentityProvider:
    return IdentityProvider(auth_client)


def get_auth_service(
    identity: IdentityProvider = Depends(get_identity_provider),
    users: UserService = Depends(get_user_service),
    tokens: SessionTokens = Depends(get_session_tokens)
) -> AuthService:
    return AuthService(identity, users, tokens)


def set_session_cookie(response: Response, request: Request, settings: Settings, token: str, max_age: int):
    response.set_cookie(
        key=settings.cookie_name,
        value=token,
        max_age=max_age,
        path="/",
        secure=is_https_request(request),
        httponly=True,
        samesite="lax",
    )


@router.post("/signup", response_model=AuthResponse, status_code=201)
async def sign_up(
    signup_data: SignUpRequest,
    request: Request,
    response: Response,
    service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings)
):
    """Register a new user and start a session"""
    user, token = service.sign_up(signup_data)
    set_session_cookie(response, request, settings, token, settings.session_ttl_seconds)
    return AuthResponse(message="User created successfully", user=user)


@router.post("/signin", response_model=AuthResponse)
async def sign_in(
    signin_data: SignInRequest,
    request: Request,
    response: Response,
    service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings)
):
    """Sign in and set the session cookie"""
    user, token = service.sign_in(signin_data)
    set_session_cookie(response, request, settings, token, settings.session_ttl_seconds)
    return AuthResponse(message="Signed in successfully", user=user)


@router.post("/signout", response_model=MessageResponse)
async def sign_out(
    request: Request,
    response: Response,
    settings: Settings = Depends(get_settings)
):
    """Clear the session cookie. The token itself stays valid until it expires."""
    set_session_cookie(response, request, settings, "", 0)
    return MessageResponse(message="Signed out successfully")


@router.get("/me", response_model=UserEnvelope)
async def me(current_user: UserResponse = Depends(get_current_user)):
    """Get current authenticated user"""
    return UserEnvelope(user=current_user)
