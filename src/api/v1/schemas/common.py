"""Common Pydantic schemas shared across the API."""

from pydantic import BaseModel

# Shape check only
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class MessageResponse(BaseModel):
    """Simple message response."""

    message: str
