"""Gallery model."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from lenslocked.database import Base
from lenslocked.models.mixins import TimestampMixin


class Gallery(Base, TimestampMixin):
    """Image container owned by a user."""

    __tablename__ = "galleries"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)

    # Relationships
    user = relationship("User", back_populates="galleries")
