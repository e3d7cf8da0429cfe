from typing import Tuple
import logging

from studio.core.errors import AuthenticationMissing, BadRequest
from studio.modules.auth.identity import IdentityError, IdentityProvider
from studio.modules.auth.schemas import MIN_PASSWORD_LENGTH, SignInRequest, SignUpRequest
from studio.modules.auth.tokens import SessionTokens
from studio.modules.users.schemas import UserResponse
from studio.modules.users.service import UserService

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, identity: IdentityProvider, users: UserService, tokens: SessionTokens):
        self.identity = identity
        self.users = users
        self.tokens = tokens

    def sign_up(self, data: SignUpRequest) -> Tuple[UserResponse, str]:
        """Register with the identity provider, create the user row and issue a session token"""
        if not data.email or not data.password:
            raise BadRequest("Email and password are required")
        if len(data.password) < MIN_PASSWORD_LENGTH:
            raise BadRequest(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")

        email = str(data.email).lower()
        try:
            user_id = self.identity.sign_up(email, data.password, data.full_name)
        except IdentityError as e:
            raise BadRequest(str(e))

        user = self.users.create_user(user_id, email, data.full_name)
        logger.info(f"Registered user {user.id}")
        return user, self.tokens.issue(user.id)

    def sign_in(self, data: SignInRequest) -> Tuple[UserResponse, str]:
        """Check credentials with the identity provider and issue a session token"""
        if not data.email or not data.password:
            raise BadRequest("Email and password are required")

        email = str(data.email).lower()
        try:
            user_id = self.identity.sign_in(email, data.password)
        except IdentityError as e:
            raise AuthenticationMissing(str(e))

        user = self.users.get_user_by_id(user_id)
        if user is None:
            # Sign-up registered the identity but its user row insert failed
            logger.warning(f"Identity {user_id} signed in without a user row; creating it")
            user = self.users.create_user(user_id, email)
        return user, self.tokens.issue(user.id)
