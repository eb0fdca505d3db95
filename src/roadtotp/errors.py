"""
RoadTOTP Errors
Typed failures raised by the OTP core and the QR renderer
"""


class TOTPError(Exception):
    """Base class for all RoadTOTP errors."""


class InvalidSecretEncoding(TOTPError, ValueError):
    """Secret is not valid Base32 (RFC 4648) or decodes to nothing."""


class InvalidArgument(TOTPError, ValueError):
    """An argument is out of range, e.g. a negative window."""


class CryptoUnavailable(TOTPError, RuntimeError):
    """The runtime lacks a required cryptographic primitive."""


class UnsupportedAlgorithm(CryptoUnavailable):
    """HMAC-SHA1 cannot be computed by this runtime."""
