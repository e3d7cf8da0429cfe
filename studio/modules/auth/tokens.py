"""Session tokens: HS256 JWTs carrying the user id.

Tokens are stateless. There is no server-side session table, so a token stays
valid until its ``exp`` claim passes; signing out only clears the cookie.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
import logging

import jwt as pyjwt

logger = logging.getLogger(__name__)


class SessionTokens:
    def __init__(self, secret: str, ttl: timedelta = timedelta(days=7), algorithm: str = "HS256"):
        if not secret:
            raise ValueError("JWT_SECRET environment variable is required")
        self.secret = secret
        self.ttl = ttl
        self.algorithm = algorithm

    def issue(self, user_id: str, now: Optional[datetime] = None) -> str:
        """Mint a token for user_id, expiring ttl after now."""
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "sub": user_id,
            "iat": issued_at,
            "exp": issued_at + self.ttl,
        }
        return pyjwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: Optional[str]) -> Optional[str]:
        """Return the embedded user id, or None if the token is absent, malformed, tampered or expired."""
        if not token:
            return None
        try:
            payload = pyjwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "sub"]},
            )
        except pyjwt.ExpiredSignatureError:
            logger.info("Rejected expired session token")
            return None
        except pyjwt.InvalidTokenError as e:
            logger.info("Rejected invalid session token: %s", e)
            return None

        user_id = payload.get("sub")
        if not isinstance(user_id, str) or not user_id:
            return None
        return user_id
