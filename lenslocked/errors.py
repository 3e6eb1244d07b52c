"""Domain errors raised by the model services.

Every error carries an ``ErrorKind`` so callers can branch on identity
without matching strings. Internal messages live in the ``models:``
namespace; errors flagged public also expose a user-facing rendering of
that message through ``public()``.
"""

from enum import Enum

NAMESPACE = "models: "
GENERIC_MESSAGE = "Something went wrong. Please try again."


class ErrorKind(str, Enum):
    """Identity of a model error."""

    NOT_FOUND = "not_found"
    ID_INVALID = "id_invalid"
    EMAIL_REQUIRED = "email_required"
    EMAIL_INVALID = "email_invalid"
    EMAIL_TAKEN = "email_taken"
    PASSWORD_REQUIRED = "password_required"
    PASSWORD_TOO_SHORT = "password_too_short"
    PASSWORD_TOO_LONG = "password_too_long"
    PASSWORD_INVALID = "password_invalid"
    PASSWORD_INCORRECT = "password_incorrect"
    REMEMBER_REQUIRED = "remember_required"
    REMEMBER_TOO_SHORT = "remember_too_short"
    USER_ID_REQUIRED = "user_id_required"
    TITLE_REQUIRED = "title_required"
    TOKEN_GENERATION = "token_generation"
    TOKEN_DECODING = "token_decoding"
    HASHING = "hashing"
    INTERNAL = "internal"


MESSAGES = {
    ErrorKind.NOT_FOUND: "models: resource not found",
    ErrorKind.ID_INVALID: "models: invalid ID was provided",
    ErrorKind.EMAIL_REQUIRED: "models: email address is required",
    ErrorKind.EMAIL_INVALID: "models: email address is invalid",
    ErrorKind.EMAIL_TAKEN: "models: email address is already taken",
    ErrorKind.PASSWORD_REQUIRED: "models: password is required",
    ErrorKind.PASSWORD_TOO_SHORT: "models: password must be at least 5 characters long",
    ErrorKind.PASSWORD_TOO_LONG: "models: password is too long",
    ErrorKind.PASSWORD_INVALID: "models: password must not contain null characters",
    ErrorKind.PASSWORD_INCORRECT: "models: incorrect password provided",
    ErrorKind.REMEMBER_REQUIRED: "models: remember token is required",
    ErrorKind.REMEMBER_TOO_SHORT: "models: remember token must be at least 32 bytes",
    ErrorKind.USER_ID_REQUIRED: "models: user ID is required",
    ErrorKind.TITLE_REQUIRED: "models: title is required",
    ErrorKind.TOKEN_GENERATION: "models: could not generate a random token",
    ErrorKind.TOKEN_DECODING: "models: token is not valid base64",
    ErrorKind.HASHING: "models: could not hash credentials",
    ErrorKind.INTERNAL: "models: internal error",
}


def publicize(message: str) -> str:
    """Strip the internal namespace and capitalize the first word.

    >>> publicize("models: email address is required")
    'Email address is required'
    """
    words = message.replace(NAMESPACE, "", 1).split(" ")
    words[0] = words[0][:1].upper() + words[0][1:]
    return " ".join(words)


class ModelError(Exception):
    """Base class for every error raised by the model layer."""

    is_public = False

    def __init__(self, kind: ErrorKind, message: str | None = None):
        self.kind = kind
        self.message = message or MESSAGES[kind]
        self._public = publicize(self.message) if self.is_public else GENERIC_MESSAGE
        super().__init__(self.message)

    def public(self) -> str:
        """Message that is safe to show to end users."""
        return self._public


class NotFoundError(ModelError):
    """Lookup miss, normalized at the store boundary."""

    is_public = True

    def __init__(self, message: str | None = None):
        super().__init__(ErrorKind.NOT_FOUND, message)


class ValidationError(ModelError):
    """A validation rule rejected the candidate record."""

    is_public = True


class PasswordIncorrectError(ModelError):
    """The supplied password does not match the stored hash."""

    is_public = True

    def __init__(self):
        super().__init__(ErrorKind.PASSWORD_INCORRECT)


class InternalError(ModelError):
    """Opaque failure from a crypto primitive."""

    def __init__(self, kind: ErrorKind = ErrorKind.INTERNAL, message: str | None = None):
        super().__init__(kind, message)


class GenerationError(InternalError):
    def __init__(self, message: str | None = None):
        super().__init__(ErrorKind.TOKEN_GENERATION, message)


class DecodingError(InternalError):
    def __init__(self, message: str | None = None):
        super().__init__(ErrorKind.TOKEN_DECODING, message)


class HashingError(InternalError):
    def __init__(self, message: str | None = None):
        super().__init__(ErrorKind.HASHING, message)
