"""Validation and normalization pipelines for users and galleries.

A rule is a plain callable that takes the candidate record, may normalize
or derive fields on it in place, and raises a ``ModelError`` to reject it.
``run_validators`` applies rules in order and lets the first raised error
propagate. Normalization and validation share one ordered chain so later
rules (email uniqueness, for one) always see the canonical record, and the
store is only called once every rule has passed.
"""

import logging
import re
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

from lenslocked.errors import ErrorKind, ModelError, NotFoundError, ValidationError
from lenslocked.models.gallery import Gallery
from lenslocked.models.user import User
from lenslocked.services.hashing import HMAC, PasswordHasher
from lenslocked.services.tokens import REMEMBER_TOKEN_BYTES, decoded_length, remember_token

if TYPE_CHECKING:
    from lenslocked.services.galleries import GalleryStore
    from lenslocked.services.users import UserStore

logger = logging.getLogger(__name__)

T = TypeVar("T")
Rule = Callable[[T], None]

EMAIL_REGEX = re.compile(r"^[a-z0-9._%+\-]+@[a-z0-9.\-]+\.[a-z]{2,16}$")
PASSWORD_MIN_LENGTH = 5


def run_validators(candidate: T, *rules: Rule) -> None:
    """Apply each rule to the candidate, stopping at the first failure."""
    for rule in rules:
        rule(candidate)


def id_greater_than(n: int) -> Rule:
    """Build a rule rejecting records whose id is not strictly above ``n``."""

    def rule(record) -> None:
        if record.id is None or record.id <= n:
            raise ValidationError(ErrorKind.ID_INVALID)

    return rule


class UserValidator:
    """Runs the user pipelines in front of a ``UserStore``."""

    def __init__(self, store: "UserStore", hmac: HMAC, hasher: PasswordHasher):
        self.store = store
        self.hmac = hmac
        self.hasher = hasher
        self.email_regex = EMAIL_REGEX

        self.create_rules: list[Rule] = [
            self.password_required,
            self.password_min_length,
            self.password_max_length,
            self.password_no_null,
            self.hash_password,
            self.password_hash_required,
            self.set_remember_if_unset,
            self.remember_min_bytes,
            self.hmac_remember,
            self.remember_hash_required,
            self.normalize_email,
            self.email_required,
            self.email_format,
            self.email_is_available,
        ]
        self.update_rules: list[Rule] = [
            self.password_min_length,
            self.password_max_length,
            self.password_no_null,
            self.hash_password,
            self.password_hash_required,
            self.remember_min_bytes,
            self.hmac_remember,
            self.remember_hash_required,
            self.normalize_email,
            self.email_required,
            self.email_format,
            self.email_is_available,
        ]
        self.delete_rules: list[Rule] = [id_greater_than(0)]

    # Lookups

    def by_email(self, email: str) -> User:
        """Normalize the address before looking it up."""
        candidate = User(email=email)
        run_validators(candidate, self.normalize_email)
        return self.store.by_email(candidate.email)

    def by_remember(self, token: str) -> User:
        """Hash the plaintext token and look the user up by hash."""
        candidate = User()
        candidate.remember = token
        run_validators(candidate, self.hmac_remember)
        return self.store.by_remember(candidate.remember_hash or "")

    # Writes

    def create(self, user: User) -> User:
        run_validators(user, *self.create_rules)
        return self.store.create(user)

    def update(self, user: User) -> User:
        try:
            run_validators(user, *self.update_rules)
        except ModelError:
            self.store.discard(user)
            raise
        return self.store.update(user)

    def delete(self, user_id: int) -> None:
        run_validators(User(id=user_id), *self.delete_rules)
        self.store.delete(user_id)

    # Password rules

    def password_required(self, user: User) -> None:
        if not user.password:
            raise ValidationError(ErrorKind.PASSWORD_REQUIRED)

    def password_min_length(self, user: User) -> None:
        if not user.password:
            return
        if len(user.password) < PASSWORD_MIN_LENGTH:
            raise ValidationError(ErrorKind.PASSWORD_TOO_SHORT)

    def password_max_length(self, user: User) -> None:
        """Reject passwords bcrypt would truncate once peppered."""
        if not user.password:
            return
        if not self.hasher.fits(user.password):
            raise ValidationError(ErrorKind.PASSWORD_TOO_LONG)

    def password_no_null(self, user: User) -> None:
        if user.password and "\x00" in user.password:
            raise ValidationError(ErrorKind.PASSWORD_INVALID)

    def hash_password(self, user: User) -> None:
        """Replace the plaintext password with its peppered bcrypt hash."""
        if not user.password:
            return
        user.password_hash = self.hasher.hash(user.password)
        user.password = ""

    def password_hash_required(self, user: User) -> None:
        if not user.password_hash:
            raise ValidationError(ErrorKind.PASSWORD_REQUIRED)

    # Remember token rules

    def set_remember_if_unset(self, user: User) -> None:
        if user.remember:
            return
        user.remember = remember_token()

    def remember_min_bytes(self, user: User) -> None:
        if not user.remember:
            return
        if decoded_length(user.remember) < REMEMBER_TOKEN_BYTES:
            raise ValidationError(ErrorKind.REMEMBER_TOO_SHORT)

    def hmac_remember(self, user: User) -> None:
        if not user.remember:
            return
        user.remember_hash = self.hmac.hash(user.remember)

    def remember_hash_required(self, user: User) -> None:
        if not user.remember_hash:
            raise ValidationError(ErrorKind.REMEMBER_REQUIRED)

    # Email rules

    def normalize_email(self, user: User) -> None:
        user.email = (user.email or "").lower().strip()

    def email_required(self, user: User) -> None:
        if not user.email:
            raise ValidationError(ErrorKind.EMAIL_REQUIRED)

    def email_format(self, user: User) -> None:
        if not user.email:
            return
        if not self.email_regex.match(user.email):
            raise ValidationError(ErrorKind.EMAIL_INVALID)

    def email_is_available(self, user: User) -> None:
        try:
            existing = self.store.by_email(user.email)
        except NotFoundError:
            return
        if existing.id != user.id:
            logger.info(f"Email {user.email} already belongs to user {existing.id}")
            raise ValidationError(ErrorKind.EMAIL_TAKEN)


class GalleryValidator:
    """Runs the gallery pipeline in front of a ``GalleryStore``."""

    def __init__(self, store: "GalleryStore"):
        self.store = store
        self.create_rules: list[Rule] = [self.title_required, self.user_id_required]

    def create(self, gallery: Gallery) -> Gallery:
        run_validators(gallery, *self.create_rules)
        return self.store.create(gallery)

    def title_required(self, gallery: Gallery) -> None:
        if not gallery.title:
            raise ValidationError(ErrorKind.TITLE_REQUIRED)

    def user_id_required(self, gallery: Gallery) -> None:
        if not gallery.user_id or gallery.user_id <= 0:
            raise ValidationError(ErrorKind.USER_ID_REQUIRED)
