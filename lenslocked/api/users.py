"""User signup, login and session endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from lenslocked.api.dependencies import (
    get_current_user,
    get_user_service,
    rotate_remember,
    set_remember_cookie,
)
from lenslocked.config import get_settings
from lenslocked.errors import ModelError, NotFoundError, PasswordIncorrectError, ValidationError
from lenslocked.models.user import User
from lenslocked.schemas.alert import Alert
from lenslocked.schemas.auth import UserLogin, UserResponse, UserSignup
from lenslocked.services.users import UserService

logger = logging.getLogger(__name__)

settings = get_settings()

router = APIRouter(prefix="/api/v1/users", tags=["users"])

INVALID_CREDENTIALS = "Invalid email address or password"


@router.post("/signup", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def signup(
    form: UserSignup,
    response: Response,
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Create an account and sign the new user in."""
    user = User(name=form.name, email=form.email, password=form.password)
    try:
        user = users.create(user)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=Alert.from_error(e).model_dump(),
        ) from e
    except ModelError as e:
        logger.error(f"Signup failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=Alert.from_error(e).model_dump(),
        ) from e

    set_remember_cookie(response, user.remember)
    return user


@router.post("/login", response_model=UserResponse)
def login(
    credentials: UserLogin,
    response: Response,
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Login with email and password."""
    try:
        user = users.authenticate(credentials.email, credentials.password)
    except (NotFoundError, PasswordIncorrectError) as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=Alert.error(INVALID_CREDENTIALS).model_dump(),
        ) from e
    except ModelError as e:
        logger.error(f"Login failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=Alert.from_error(e).model_dump(),
        ) from e

    try:
        user = rotate_remember(users, user)
    except ModelError as e:
        logger.error(f"Could not sign in user {user.id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=Alert.from_error(e).model_dump(),
        ) from e

    set_remember_cookie(response, user.remember)
    return user


@router.get("/me", response_model=UserResponse)
def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get the user owning the remember cookie."""
    return current_user


@router.post("/logout")
def logout(response: Response):
    """Logout by dropping the remember cookie."""
    response.delete_cookie(settings.remember_cookie_name)
    return {"message": "Logged out successfully"}
