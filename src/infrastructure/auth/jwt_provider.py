"""JWT authentication provider implementation.

Tokens are HS256-signed and stateless; nothing is stored server-side, so a
token stays valid until it expires.

Payload structure:
    {
        "sub": "user-uuid",
        "iat": 1234567890,
        "exp": 1234571490
    }
"""

import logging
from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from core.config import settings
from infrastructure.auth.provider import TokenUser

logger = logging.getLogger(__name__)


class JWTAuthProvider:
    """JWT-based authentication provider."""

    def __init__(
        self,
        secret_key: str = settings.jwt_secret_key,
        algorithm: str = settings.jwt_algorithm,
        expire_minutes: int = settings.jwt_expire_minutes,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes

    async def validate_token(self, token: str) -> Optional[TokenUser]:
        """
        Validate a JWT and extract the caller identity.

        Args:
            token: The JWT to validate

        Returns:
            TokenUser if the signature verifies and the token has not
            expired, None otherwise
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require_exp": True, "require_sub": True},
            )
        except JWTError as exc:
            logger.debug("Rejected token: %s", exc)
            return None

        try:
            user_id = UUID(str(payload.get("sub")))
        except ValueError:
            return None

        exp = payload.get("exp")
        return TokenUser(
            id=user_id,
            expires_at=datetime.utcfromtimestamp(exp) if isinstance(exp, (int, float)) else None,
        )

    def create_token(self, user_id: UUID) -> str:
        """
        Create a signed JWT for a user.

        Args:
            user_id: The user to create a token for

        Returns:
            The generated JWT string
        """
        now = datetime.utcnow()
        payload: dict = {
            "sub": str(user_id),
            "iat": now,
            "exp": now + timedelta(minutes=self._expire_minutes),
        }

        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
