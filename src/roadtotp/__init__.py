"""
RoadTOTP - Time-based One-Time Password Service

Features:
- RFC 6238 TOTP tokens (HMAC-SHA1, 6 digits, 30 second steps)
- Base32 shared secret generation
- Token validation with a clock-skew window
- otpauth:// enrollment URLs and QR code images
- Per-client rate limiting of token checks
"""

__version__ = "0.1.0"
