"""Tests for HMAC token hashing and bcrypt password hashing."""

import pytest

from lenslocked.errors import ErrorKind, HashingError, PasswordIncorrectError, ValidationError
from lenslocked.services.hashing import HMAC, PasswordHasher
from lenslocked.services.tokens import remember_token


def test_hmac_is_deterministic():
    token = remember_token()
    hmac = HMAC("key-one")
    assert hmac.hash(token) == hmac.hash(token)
    assert hmac.hash(token) == HMAC("key-one").hash(token)


def test_hmac_depends_on_key():
    token = remember_token()
    assert HMAC("key-one").hash(token) != HMAC("key-two").hash(token)


def test_hmac_never_returns_input():
    token = remember_token()
    assert HMAC("key-one").hash(token) != token


def test_password_hash_is_not_plaintext(hasher):
    password_hash = hasher.hash("hunter22")
    assert password_hash
    assert "hunter22" not in password_hash
    assert password_hash.startswith("$2")


def test_password_hash_is_salted(hasher):
    assert hasher.hash("hunter22") != hasher.hash("hunter22")


def test_verify_correct_password(hasher):
    password_hash = hasher.hash("hunter22")
    hasher.verify(password_hash, "hunter22")


def test_verify_wrong_password(hasher):
    password_hash = hasher.hash("hunter22")
    with pytest.raises(PasswordIncorrectError):
        hasher.verify(password_hash, "hunter23")


def test_verify_uses_pepper():
    """A hash made with one pepper does not verify under another."""
    password_hash = PasswordHasher("pepper-a", rounds=4).hash("hunter22")
    with pytest.raises(PasswordIncorrectError):
        PasswordHasher("pepper-b", rounds=4).verify(password_hash, "hunter22")


def test_verify_malformed_hash_is_not_a_mismatch(hasher):
    """A broken stored hash is an internal failure, never a success."""
    with pytest.raises(HashingError):
        hasher.verify("not-a-bcrypt-hash", "hunter22")


def test_fits_counts_pepper_bytes():
    hasher = PasswordHasher("p" * 10, rounds=4)
    assert hasher.fits("a" * 62)
    assert not hasher.fits("a" * 63)
    # Multi-byte characters count by their encoded size
    assert not hasher.fits("é" * 32)


def test_hash_refuses_to_truncate():
    """Long inputs are rejected instead of silently dropping the pepper."""
    with pytest.raises(ValidationError) as exc_info:
        PasswordHasher("pepper-a", rounds=4).hash("a" * 72)
    assert exc_info.value.kind == ErrorKind.PASSWORD_TOO_LONG


def test_hash_rejects_null_character(hasher):
    with pytest.raises(ValidationError) as exc_info:
        hasher.hash("bad\x00pw")
    assert exc_info.value.kind == ErrorKind.PASSWORD_INVALID


def test_verify_null_character_is_a_mismatch(hasher):
    password_hash = hasher.hash("hunter22")
    with pytest.raises(PasswordIncorrectError):
        hasher.verify(password_hash, "bad\x00pw")


def test_verify_overlong_password_is_a_mismatch():
    """Input past bcrypt's limit never matches a stored hash."""
    hasher = PasswordHasher("pep", rounds=4)
    password = "a" * 69
    password_hash = hasher.hash(password)
    hasher.verify(password_hash, password)
    with pytest.raises(PasswordIncorrectError):
        hasher.verify(password_hash, password + "pep" + "x")
