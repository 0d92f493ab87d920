"""Gravatar URL resolution."""

import hashlib
from urllib.parse import urlencode


class GravatarAvatarResolver:
    """Builds a Gravatar URL for an email; no network access."""

    def __init__(
        self,
        size: int = 200,
        rating: str = "pg",
        default: str = "mm",
        base_url: str = "//www.gravatar.com/avatar",
    ) -> None:
        self._query = urlencode({"s": size, "r": rating, "d": default})
        self._base_url = base_url

    def resolve(self, email: str) -> str:
        digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
        return f"{self._base_url}/{digest}?{self._query}"
