"""
Response Models
"""

from pydantic import BaseModel


class SecretResponse(BaseModel):
    """Newly generated shared secret."""
    secret: str


class TokenResponse(BaseModel):
    """Token for the requested time step."""
    token: str


class ErrorResponse(BaseModel):
    """Error envelope for 4xx responses."""
    code: int
    message: str
