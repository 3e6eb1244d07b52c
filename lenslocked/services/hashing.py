"""Keyed token hashing and peppered password hashing."""

import base64
import hashlib
import hmac

from passlib.context import CryptContext
from passlib.exc import MissingBackendError, PasswordTruncateError, PasswordValueError

from lenslocked.errors import ErrorKind, HashingError, PasswordIncorrectError, ValidationError


class HMAC:
    """Deterministic HMAC-SHA256 keyed with a process-wide secret.

    Used for remember tokens only. Tokens are high entropy and looked up by
    their hash, so a fast keyed hash is enough; passwords go through
    ``PasswordHasher`` instead.
    """

    def __init__(self, key: str):
        self._key = key.encode("utf-8")

    def hash(self, value: str) -> str:
        digest = hmac.new(self._key, value.encode("utf-8"), hashlib.sha256).digest()
        return base64.urlsafe_b64encode(digest).decode("ascii")


# bcrypt ignores everything past this many bytes of input
BCRYPT_MAX_BYTES = 72


class PasswordHasher:
    """bcrypt over ``password + pepper``.

    The peppered input must fit in ``BCRYPT_MAX_BYTES``. ``fits`` lets the
    account pipeline reject longer passwords up front; the context is also
    configured to refuse truncation rather than hash a prefix.
    """

    def __init__(self, pepper: str, rounds: int = 12):
        self.pepper = pepper
        self.context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
            bcrypt__truncate_error=True,
        )

    def fits(self, password: str) -> bool:
        """Whether the peppered password is short enough to hash in full."""
        return len((password + self.pepper).encode("utf-8")) <= BCRYPT_MAX_BYTES

    def hash(self, password: str) -> str:
        """Hash a password."""
        try:
            return self.context.hash(password + self.pepper)
        except PasswordTruncateError as e:
            raise ValidationError(ErrorKind.PASSWORD_TOO_LONG) from e
        except PasswordValueError as e:
            raise ValidationError(ErrorKind.PASSWORD_INVALID) from e
        except (MissingBackendError, ValueError, TypeError) as e:
            raise HashingError(f"models: could not hash password: {e}") from e

    def verify(self, password_hash: str, password: str) -> None:
        """Verify a password against its hash.

        Raises ``PasswordIncorrectError`` when the password does not match,
        including passwords bcrypt refuses to hash at all, and
        ``HashingError`` when the stored hash cannot be checked.
        """
        if not self.fits(password):
            raise PasswordIncorrectError()
        try:
            matched = self.context.verify(password + self.pepper, password_hash)
        except PasswordValueError as e:
            raise PasswordIncorrectError() from e
        except (MissingBackendError, ValueError, TypeError) as e:
            raise HashingError(f"models: could not verify password: {e}") from e
        if not matched:
            raise PasswordIncorrectError()
