"""Unit tests for the Argon2 password hasher."""

from studyfi.infrastructure.auth import hash_password
from studyfi.infrastructure.auth.password_hasher import verify_password


def test_hash_is_argon2id_and_salted():
    first = hash_password("Passw0rd!")
    second = hash_password("Passw0rd!")

    assert first.startswith("$argon2id$")
    assert first != second


def test_verify_password():
    hashed = hash_password("Passw0rd!")

    assert verify_password("Passw0rd!", hashed) is True
    assert verify_password("passw0rd!", hashed) is False


def test_verify_password_rejects_malformed_hash():
    assert verify_password("Passw0rd!", "not-a-hash") is False
