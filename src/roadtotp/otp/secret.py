"""
Shared Secret Codec
Generate and decode RFC 4648 Base32 TOTP secrets
"""

import base64
import binascii
import secrets

from ..errors import CryptoUnavailable, InvalidSecretEncoding

BASE32_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
SECRET_LENGTH = 16  # Google Authenticator and Authy use 16


def generate_secret() -> str:
    """Generate a random 16 character Base32 secret (80 bits)."""
    try:
        return "".join(secrets.choice(BASE32_ALPHABET) for _ in range(SECRET_LENGTH))
    except NotImplementedError as e:
        raise CryptoUnavailable("No secure random source available") from e


def encode_secret(raw: bytes) -> str:
    """Encode raw key bytes as unpadded Base32 text."""
    if not raw:
        raise InvalidSecretEncoding("Secret must not be empty")
    return base64.b32encode(raw).decode("ascii").rstrip("=")


def decode_secret(secret: str) -> bytes:
    """
    Decode a Base32 secret to raw key bytes.

    Lowercase input and missing ``=`` padding are accepted. Anything outside
    the alphabet (whitespace, ``0``, ``1``, ``8``, ``9``, non-ASCII) is rejected.
    """
    if not isinstance(secret, str) or not secret:
        raise InvalidSecretEncoding("Secret must be a non-empty string")

    missing_padding = len(secret) % 8
    if missing_padding:
        secret += "=" * (8 - missing_padding)

    try:
        raw = base64.b32decode(secret, casefold=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidSecretEncoding(f"Secret is not valid Base32: {e}") from e

    if not raw:
        raise InvalidSecretEncoding("Secret decodes to an empty key")
    return raw
