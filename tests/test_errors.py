"""Tests for error publication."""

from lenslocked.errors import (
    GENERIC_MESSAGE,
    ErrorKind,
    GenerationError,
    HashingError,
    InternalError,
    NotFoundError,
    PasswordIncorrectError,
    ValidationError,
    publicize,
)
from lenslocked.schemas.alert import Alert


def test_publicize_strips_namespace():
    assert publicize("models: email address is required") == "Email address is required"


def test_publicize_keeps_rest_of_message():
    assert publicize("models: invalid ID was provided") == "Invalid ID was provided"


def test_validation_errors_are_public():
    err = ValidationError(ErrorKind.EMAIL_TAKEN)
    assert err.is_public
    assert err.public() == "Email address is already taken"
    assert str(err) == "models: email address is already taken"


def test_not_found_and_password_incorrect_are_public():
    assert NotFoundError().public() == "Resource not found"
    assert PasswordIncorrectError().public() == "Incorrect password provided"


def test_internal_errors_are_not_public():
    for err in (InternalError(), GenerationError(), HashingError("models: bcrypt exploded")):
        assert not err.is_public
        assert err.public() == GENERIC_MESSAGE
        assert isinstance(err, InternalError)


def test_kinds_distinguish_errors():
    assert ValidationError(ErrorKind.EMAIL_TAKEN).kind != ValidationError(ErrorKind.EMAIL_INVALID).kind


def test_alert_from_public_error():
    alert = Alert.from_error(ValidationError(ErrorKind.PASSWORD_TOO_SHORT))
    assert alert.level == "danger"
    assert alert.message == "Password must be at least 5 characters long"


def test_alert_from_private_error():
    assert Alert.from_error(HashingError()).message == GENERIC_MESSAGE
    assert Alert.from_error(RuntimeError("db connection reset")).message == GENERIC_MESSAGE
