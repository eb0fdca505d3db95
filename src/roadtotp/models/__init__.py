"""Models package."""

from .otp import SecretResponse, TokenResponse, ErrorResponse

__all__ = ["SecretResponse", "TokenResponse", "ErrorResponse"]
