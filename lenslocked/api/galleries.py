"""Gallery API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from lenslocked.api.dependencies import get_current_user, get_gallery_service
from lenslocked.errors import NotFoundError, ValidationError
from lenslocked.models.gallery import Gallery
from lenslocked.models.user import User
from lenslocked.schemas.alert import Alert
from lenslocked.schemas.gallery import GalleryCreate, GalleryResponse
from lenslocked.services.galleries import GalleryService

router = APIRouter(prefix="/api/v1/galleries", tags=["galleries"])


@router.get("", response_model=list[GalleryResponse])
def list_galleries(
    current_user: Annotated[User, Depends(get_current_user)],
    galleries: Annotated[GalleryService, Depends(get_gallery_service)],
):
    """List the current user's galleries."""
    return galleries.by_user_id(current_user.id)


@router.post("", response_model=GalleryResponse, status_code=status.HTTP_201_CREATED)
def create_gallery(
    gallery_data: GalleryCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    galleries: Annotated[GalleryService, Depends(get_gallery_service)],
):
    """Create a gallery owned by the current user."""
    gallery = Gallery(title=gallery_data.title.strip(), user_id=current_user.id)
    try:
        return galleries.create(gallery)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=Alert.from_error(e).model_dump(),
        ) from e


@router.get("/{gallery_id}", response_model=GalleryResponse)
def get_gallery(
    gallery_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    galleries: Annotated[GalleryService, Depends(get_gallery_service)],
):
    """Get a gallery owned by the current user."""
    try:
        gallery = galleries.by_id(gallery_id)
    except NotFoundError:
        gallery = None
    if gallery is None or gallery.user_id != current_user.id:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Gallery not found")
    return gallery
