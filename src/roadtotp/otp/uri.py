"""
Enrollment URL
"""

OTPAUTH_PREFIX = "otpauth://totp/"


def build_url(label: str, secret: str) -> str:
    """
    Build the otpauth URL scanned by authenticator apps.

    Label and secret are concatenated as given, without percent-encoding.
    Some authenticator apps expect the raw form, so a label containing
    reserved URL characters yields a malformed URL.
    """
    return f"{OTPAUTH_PREFIX}{label}?secret={secret}"
