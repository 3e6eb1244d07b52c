"""User persistence and the account service built on top of it."""

import logging

from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from lenslocked.config import Settings, get_settings
from lenslocked.errors import NotFoundError, PasswordIncorrectError
from lenslocked.models.user import User
from lenslocked.services.hashing import HMAC, PasswordHasher
from lenslocked.services.validation import UserValidator

logger = logging.getLogger(__name__)


class UserStore:
    """SQLAlchemy-backed storage for users.

    Lookups never normalize their input. A query that finds no row raises
    ``NotFoundError``; any other database error propagates unchanged.
    """

    def __init__(self, db: Session):
        self.db = db

    def by_id(self, user_id: int) -> User:
        return self._first(self.db.query(User).filter(User.id == user_id))

    def by_email(self, email: str) -> User:
        return self._first(self.db.query(User).filter(User.email == email))

    def by_remember(self, remember_hash: str) -> User:
        return self._first(self.db.query(User).filter(User.remember_hash == remember_hash))

    def create(self, user: User) -> User:
        """Insert the user and backfill id and timestamps."""
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        self.db.refresh(user)
        return user

    def update(self, user: User) -> User:
        """Persist every field of an existing user."""
        if user not in self.db:
            if not user.id or self.db.get(User, user.id) is None:
                raise NotFoundError()
            user = self._merge(user)
        elif inspect(user).deleted:
            raise NotFoundError()
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        self.db.refresh(user)
        return user

    def delete(self, user_id: int) -> None:
        user = self.db.get(User, user_id)
        if user is None:
            raise NotFoundError()
        self.db.delete(user)
        self.db.commit()

    def discard(self, user: User) -> None:
        """Drop unsaved changes on a session-attached user."""
        if user in self.db and inspect(user).persistent:
            self.db.expire(user)

    def _merge(self, user: User) -> User:
        merged = self.db.merge(user)
        merged.password = user.password
        merged.remember = user.remember
        return merged

    @staticmethod
    def _first(query) -> User:
        user = query.first()
        if user is None:
            raise NotFoundError()
        return user


class UserService:
    """Account operations: validated writes, lookups and authentication."""

    def __init__(self, db: Session, hmac: HMAC, hasher: PasswordHasher):
        self.store = UserStore(db)
        self.hasher = hasher
        self.validator = UserValidator(self.store, hmac, hasher)

    @classmethod
    def from_settings(cls, db: Session, settings: Settings | None = None) -> "UserService":
        """Build a service keyed with the configured pepper and HMAC secret."""
        settings = settings or get_settings()
        return cls(
            db,
            hmac=HMAC(settings.hmac_secret_key),
            hasher=PasswordHasher(settings.user_pw_pepper, rounds=settings.bcrypt_rounds),
        )

    def by_id(self, user_id: int) -> User:
        return self.store.by_id(user_id)

    def by_email(self, email: str) -> User:
        return self.validator.by_email(email)

    def by_remember(self, token: str) -> User:
        """Look a user up by the plaintext remember token from their cookie."""
        return self.validator.by_remember(token)

    def create(self, user: User) -> User:
        """Create a user. ``user.remember`` holds the plaintext token afterwards."""
        user = self.validator.create(user)
        logger.info(f"Created user {user.id} <{user.email}>")
        return user

    def update(self, user: User) -> User:
        return self.validator.update(user)

    def delete(self, user_id: int) -> None:
        self.validator.delete(user_id)
        logger.info(f"Deleted user {user_id}")

    def authenticate(self, email: str, password: str) -> User:
        """Return the user matching the email and password.

        Raises ``NotFoundError`` for an unknown email and
        ``PasswordIncorrectError`` for a wrong password. Callers showing the
        result to end users should not reveal which of the two occurred.
        """
        user = self.by_email(email)
        try:
            self.hasher.verify(user.password_hash, password)
        except PasswordIncorrectError:
            logger.warning(f"Rejected password for user {user.id}")
            raise
        logger.info(f"Authenticated user {user.id}")
        return user
