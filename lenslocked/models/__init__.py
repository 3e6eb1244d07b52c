"""SQLAlchemy models."""

from lenslocked.models.gallery import Gallery
from lenslocked.models.user import User

__all__ = [
    "User",
    "Gallery",
]
