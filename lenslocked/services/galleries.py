"""Gallery persistence and service."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from lenslocked.errors import NotFoundError
from lenslocked.models.gallery import Gallery
from lenslocked.services.validation import GalleryValidator

logger = logging.getLogger(__name__)


class GalleryStore:
    """SQLAlchemy-backed storage for galleries."""

    def __init__(self, db: Session):
        self.db = db

    def by_id(self, gallery_id: int) -> Gallery:
        gallery = self.db.query(Gallery).filter(Gallery.id == gallery_id).first()
        if gallery is None:
            raise NotFoundError()
        return gallery

    def by_user_id(self, user_id: int) -> list[Gallery]:
        return self.db.query(Gallery).filter(Gallery.user_id == user_id).order_by(Gallery.id).all()

    def create(self, gallery: Gallery) -> Gallery:
        self.db.add(gallery)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        self.db.refresh(gallery)
        return gallery


class GalleryService:
    """Service for gallery-related operations."""

    def __init__(self, db: Session):
        self.store = GalleryStore(db)
        self.validator = GalleryValidator(self.store)

    def by_id(self, gallery_id: int) -> Gallery:
        return self.store.by_id(gallery_id)

    def by_user_id(self, user_id: int) -> list[Gallery]:
        return self.store.by_user_id(user_id)

    def create(self, gallery: Gallery) -> Gallery:
        gallery = self.validator.create(gallery)
        logger.info(f"Created gallery {gallery.id} for user {gallery.user_id}")
        return gallery
