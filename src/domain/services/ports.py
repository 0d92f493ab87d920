"""Capabilities the domain consumes but does not implement."""

from typing import Protocol


class IPasswordHasher(Protocol):
    """One-way password hash and verify."""

    def hash(self, password: str) -> str:
        """Return a salted hash of the password."""
        ...

    def verify(self, password: str, password_hash: str) -> bool:
        """Check a plaintext password against a stored hash."""
        ...


class IAvatarResolver(Protocol):
    """Maps an email address to an avatar URL."""

    def resolve(self, email: str) -> str:
        """Return the avatar URL for an email."""
        ...
