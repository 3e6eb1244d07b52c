"""User model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from lenslocked.database import Base
from lenslocked.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User account used for authentication and gallery ownership.

    ``password`` and ``remember`` are plain instance attributes, not columns.
    They carry plaintext values in from callers and are only ever persisted
    as ``password_hash`` and ``remember_hash``.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    remember_hash = Column(String(255), unique=True, nullable=False, index=True)

    # Transient, never persisted
    password = ""
    remember = ""

    # Relationships
    galleries = relationship("Gallery", back_populates="user", cascade="all, delete-orphan")

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"
