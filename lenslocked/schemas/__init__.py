"""Pydantic schemas for API requests and responses."""

from lenslocked.schemas.alert import Alert
from lenslocked.schemas.auth import UserLogin, UserResponse, UserSignup
from lenslocked.schemas.gallery import GalleryCreate, GalleryResponse

__all__ = [
    "Alert",
    "UserSignup",
    "UserLogin",
    "UserResponse",
    "GalleryCreate",
    "GalleryResponse",
]
