"""Random token generation for remember cookies."""

import base64
import binascii
import re
import secrets

from lenslocked.errors import DecodingError, GenerationError

REMEMBER_TOKEN_BYTES = 32
URLSAFE_B64_REGEX = re.compile(r"[A-Za-z0-9_-]*={0,2}")


def generate_bytes(n: int) -> bytes:
    """Return ``n`` bytes from the OS CSPRNG."""
    try:
        return secrets.token_bytes(n)
    except (OSError, NotImplementedError) as e:
        raise GenerationError(f"models: could not read {n} random bytes: {e}") from e


def generate_token(n_bytes: int = REMEMBER_TOKEN_BYTES) -> str:
    """Return a URL-safe base64 string encoding ``n_bytes`` random bytes."""
    return base64.urlsafe_b64encode(generate_bytes(n_bytes)).decode("ascii")


def remember_token() -> str:
    """Generate a remember token with the minimum accepted entropy."""
    return generate_token(REMEMBER_TOKEN_BYTES)


def decoded_length(token: str) -> int:
    """Number of raw bytes a URL-safe base64 token decodes to."""
    if not URLSAFE_B64_REGEX.fullmatch(token):
        raise DecodingError("models: token is not valid URL-safe base64")
    try:
        return len(base64.b64decode(token, altchars=b"-_", validate=True))
    except (binascii.Error, ValueError) as e:
        raise DecodingError(f"models: token is not valid base64: {e}") from e
