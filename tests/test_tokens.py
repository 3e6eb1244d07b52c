"""Tests for remember token generation."""

import base64
from unittest.mock import patch

import pytest

from lenslocked.errors import DecodingError, ErrorKind, GenerationError
from lenslocked.services.tokens import (
    REMEMBER_TOKEN_BYTES,
    decoded_length,
    generate_token,
    remember_token,
)


def test_remember_token_has_minimum_entropy():
    """Generated tokens decode to at least 32 bytes."""
    for _ in range(20):
        assert decoded_length(remember_token()) >= REMEMBER_TOKEN_BYTES


def test_tokens_are_url_safe_and_unique():
    tokens = {generate_token() for _ in range(50)}
    assert len(tokens) == 50
    for token in tokens:
        assert "+" not in token
        assert "/" not in token


def test_generate_token_custom_length():
    assert decoded_length(generate_token(8)) == 8


def test_decoded_length_of_external_token():
    """Tokens produced elsewhere are measured the same way."""
    token = base64.urlsafe_b64encode(b"x" * 16).decode()
    assert decoded_length(token) == 16


def test_decoded_length_rejects_malformed_token():
    with pytest.raises(DecodingError) as exc_info:
        decoded_length("not base64 at all!")
    assert exc_info.value.kind == ErrorKind.TOKEN_DECODING


def test_generation_failure_is_reported():
    with patch("lenslocked.services.tokens.secrets.token_bytes", side_effect=OSError("no entropy")):
        with pytest.raises(GenerationError) as exc_info:
            remember_token()
    assert exc_info.value.kind == ErrorKind.TOKEN_GENERATION
    assert not exc_info.value.is_public


def test_decoded_length_rejects_standard_alphabet():
    """Only the URL-safe alphabet is accepted."""
    raw = b"\xfb\xff" * 16
    standard = base64.b64encode(raw).decode()
    assert "+" in standard or "/" in standard
    with pytest.raises(DecodingError):
        decoded_length(standard)
    assert decoded_length(base64.urlsafe_b64encode(raw).decode()) == 32
