"""
TOTP Token Engine (RFC 6238)

Derives 6-digit tokens from a Base32 secret and a wall-clock reading, and
validates candidate tokens within a window of neighbouring time steps.
Every function is pure given its inputs; the only clock read happens in the
``*_now`` helpers, through an injectable callable.
"""

import hashlib
import hmac
import struct
import time
from typing import Callable, Optional

from ..errors import InvalidArgument, UnsupportedAlgorithm
from .secret import decode_secret

INTERVAL = 30  # seconds per time step
ONE_SEC = 1000  # milliseconds
DIGITS = 6  # Google Authenticator and Authy use 6
MODULUS = 10 ** DIGITS
COUNTER_MIN = -(2 ** 63)
COUNTER_MAX = 2 ** 63 - 1

Clock = Callable[[], int]


def now_millis() -> int:
    """System wall clock in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def time_counter(at_millis: int) -> int:
    """Number of whole 30 second steps since the epoch."""
    return at_millis // ONE_SEC // INTERVAL


def _check_counters(first: int, last: int):
    if first < COUNTER_MIN or last > COUNTER_MAX:
        raise InvalidArgument("time is outside the 64-bit counter range")


def _hotp(key: bytes, counter: int) -> int:
    try:
        digest = hmac.new(key, struct.pack(">q", counter), hashlib.sha1).digest()
    except ValueError as e:
        # FIPS-restricted OpenSSL builds refuse SHA-1
        raise UnsupportedAlgorithm("HMAC-SHA1 is not available") from e

    # Dynamic truncation (RFC 4226 5.3)
    offset = digest[-1] & 0x0F
    (code,) = struct.unpack(">I", digest[offset:offset + 4])
    return (code & 0x7FFFFFFF) % MODULUS


def derive_token(secret: str, at_millis: int) -> str:
    """
    Derive the token for the time step containing ``at_millis``.

    :param secret: Base32 shared secret
    :param at_millis: time in milliseconds since the epoch
    :returns: 6 digit token, zero padded
    :raises InvalidSecretEncoding: the secret is not valid Base32
    :raises InvalidArgument: the time step does not fit in 64 bits
    """
    key = decode_secret(secret)
    counter = time_counter(at_millis)
    _check_counters(counter, counter)
    return str(_hotp(key, counter)).zfill(DIGITS)


def derive_token_seconds(secret: str, unix_time: int) -> str:
    """Derive the token for a unix time given in seconds."""
    return derive_token(secret, unix_time * ONE_SEC)


def current_token(secret: str, clock: Optional[Clock] = None) -> str:
    """Derive the token for the current time step."""
    return derive_token(secret, (clock or now_millis)())


def validate(secret: str, candidate: int, at_millis: int, window: int = 0) -> bool:
    """
    Check ``candidate`` against the time step of ``at_millis`` and the
    ``window`` steps on either side of it.

    Tokens are compared as integers, so leading zeros do not matter.

    :raises InvalidSecretEncoding: the secret is not valid Base32
    :raises InvalidArgument: ``window`` is negative, or a checked time step
        does not fit in 64 bits
    """
    if window < 0:
        raise InvalidArgument(f"window must be >= 0, got {window}")

    key = decode_secret(secret)
    counter = time_counter(at_millis)
    _check_counters(counter - window, counter + window)
    for step in range(-window, window + 1):
        if _hotp(key, counter + step) == candidate:
            return True
    return False


def validate_seconds(secret: str, candidate: int, unix_time: int, window: int = 0) -> bool:
    """Same as :func:`validate` with the time given in seconds."""
    return validate(secret, candidate, unix_time * ONE_SEC, window)


def validate_now(
    secret: str,
    candidate: int,
    window: int = 0,
    clock: Optional[Clock] = None,
) -> bool:
    """Same as :func:`validate` against the current time."""
    return validate(secret, candidate, (clock or now_millis)(), window)
