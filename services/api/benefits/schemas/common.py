"""Common schemas used across the API."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Plain acknowledgement or error body.

    Format: { "message": str }
    """

    message: str
