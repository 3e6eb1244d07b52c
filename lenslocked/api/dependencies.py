"""FastAPI dependencies for authentication and services."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session

from lenslocked.config import get_settings
from lenslocked.database import get_db
from lenslocked.errors import NotFoundError
from lenslocked.models.user import User
from lenslocked.schemas.alert import Alert
from lenslocked.services.galleries import GalleryService
from lenslocked.services.tokens import remember_token
from lenslocked.services.users import UserService

settings = get_settings()


def get_user_service(
    db: Annotated[Session, Depends(get_db)],
) -> UserService:
    """Get user service keyed with the configured secrets."""
    return UserService.from_settings(db, settings)


def get_gallery_service(
    db: Annotated[Session, Depends(get_db)],
) -> GalleryService:
    """Get gallery service with dependencies."""
    return GalleryService(db)


def get_current_user(
    request: Request,
    users: Annotated[UserService, Depends(get_user_service)],
) -> User:
    """Get the current user from the remember token cookie."""
    token = request.cookies.get(settings.remember_cookie_name)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=Alert.error("You must be logged in").model_dump(),
        )

    try:
        return users.by_remember(token)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=Alert.error("You must be logged in").model_dump(),
        ) from None


def rotate_remember(users: UserService, user: User) -> User:
    """Issue a fresh remember token, invalidating the previous one."""
    user.remember = remember_token()
    return users.update(user)


def set_remember_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.remember_cookie_name,
        value=token,
        httponly=True,
        samesite="lax",
        secure=settings.is_production,
    )
