"""Tests for the Base32 secret codec."""

from __future__ import annotations

import pytest

from roadtotp.errors import InvalidSecretEncoding
from roadtotp.otp import BASE32_ALPHABET, SECRET_LENGTH, decode_secret, encode_secret, generate_secret


def test_alphabet():
    assert len(BASE32_ALPHABET) == 32
    assert len(set(BASE32_ALPHABET)) == 32


def test_generate_secret_shape():
    secret = generate_secret()
    assert len(secret) == SECRET_LENGTH == 16
    assert all(c in BASE32_ALPHABET for c in secret)
    assert len(decode_secret(secret)) == 10


def test_generate_secret_no_duplicates():
    secrets = {generate_secret() for _ in range(10_000)}
    assert len(secrets) == 10_000


def test_decode_known_secret():
    assert encode_secret(decode_secret("QB5UDBW7OQKYYDZU")) == "QB5UDBW7OQKYYDZU"


def test_decode_is_case_insensitive():
    assert decode_secret("qb5udbw7oqkyydzu") == decode_secret("QB5UDBW7OQKYYDZU")


def test_decode_padding_optional():
    assert decode_secret("MZXW6") == b"foo"
    assert decode_secret("MZXW6===") == b"foo"


def test_encode_rfc_secret():
    assert encode_secret(b"12345678901234567890") == "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"


@pytest.mark.parametrize(
    "secret",
    [
        "QB5UDBW7OQKYYDZ1",
        "QB5UDBW7OQKYYDZ0",
        "QB5UDBW7OQKYYDZ8",
        "QB5U DBW7OQKYYDZU",
        "QB5UDBW7OQKYYDZU\n",
        "QB5UDBW7OQKYYDZÜ",
        "QB5U=DBW7OQKYYDZ",
        "A",
        "",
    ],
)
def test_decode_rejects_malformed(secret):
    with pytest.raises(InvalidSecretEncoding):
        decode_secret(secret)


def test_decode_rejects_non_string():
    with pytest.raises(InvalidSecretEncoding):
        decode_secret(None)


def test_invalid_secret_is_value_error():
    with pytest.raises(ValueError):
        decode_secret("1111111111111111")


def test_encode_rejects_empty():
    with pytest.raises(InvalidSecretEncoding):
        encode_secret(b"")
