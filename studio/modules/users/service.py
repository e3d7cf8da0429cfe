from supabase import Client
from studio.core.errors import UpstreamFailure, is_invalid_input
from studio.modules.users.schemas import UserResponse
from typing import Optional
import logging

logger = logging.getLogger(__name__)

USER_COLUMNS = "id, email, full_name, avatar_url, credits, email_verified, created_at, updated_at"
SIGNUP_CREDITS = 5


class UserService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def get_user_by_id(self, user_id: str) -> Optional[UserResponse]:
        """Get user by ID; None when no such user. Not cached: every call hits the database."""
        try:
            result = self.supabase.table("users")\
                .select(USER_COLUMNS)\
                .eq("id", user_id)\
                .limit(1)\
                .execute()
        except Exception as e:
            if is_invalid_input(e):
                return None
            logger.error(f"Error looking up user {user_id}: {e}")
            raise UpstreamFailure(str(e), fallback="Failed to look up user")

        if not result.data:
            return None
        return UserResponse(**result.data[0])

    def create_user(self, user_id: str, email: str, full_name: Optional[str] = None) -> UserResponse:
        """Insert the user row for a freshly registered identity"""
        try:
            result = self.supabase.table("users").insert({
                "id": user_id,
                "email": email.lower(),
                "full_name": full_name or None,
                "credits": SIGNUP_CREDITS,
                "email_verified": True
            }).execute()
        except Exception as e:
            logger.error(f"Error creating user {email}: {e}")
            raise UpstreamFailure(str(e), fallback="Failed to create user account")

        if not result.data:
            raise UpstreamFailure("Failed to create user account")
        return UserResponse(**result.data[0])
