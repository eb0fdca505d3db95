"""TOTP core package."""

from .engine import (
    DIGITS,
    INTERVAL,
    current_token,
    derive_token,
    derive_token_seconds,
    now_millis,
    time_counter,
    validate,
    validate_now,
    validate_seconds,
)
from .secret import BASE32_ALPHABET, SECRET_LENGTH, decode_secret, encode_secret, generate_secret
from .uri import build_url

__all__ = [
    "BASE32_ALPHABET",
    "DIGITS",
    "INTERVAL",
    "SECRET_LENGTH",
    "build_url",
    "current_token",
    "decode_secret",
    "derive_token",
    "derive_token_seconds",
    "encode_secret",
    "generate_secret",
    "now_millis",
    "time_counter",
    "validate",
    "validate_now",
    "validate_seconds",
]
