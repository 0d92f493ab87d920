"""Authentication provider protocol."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Protocol
from uuid import UUID


@dataclass
class TokenUser:
    """Caller identity extracted from a verified token."""

    id: UUID
    expires_at: Optional[datetime] = None


class IAuthProvider(Protocol):
    """Protocol for authentication providers."""

    async def validate_token(self, token: str) -> Optional[TokenUser]:
        """
        Validate an authentication token.

        Args:
            token: The token string taken from the request header

        Returns:
            TokenUser if valid, None if invalid
        """
        ...

    def create_token(self, user_id: UUID) -> str:
        """
        Create an authentication token for a user.

        Args:
            user_id: The user to create a token for

        Returns:
            The generated token string
        """
        ...
