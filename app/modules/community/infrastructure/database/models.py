# 📄 File: app/modules/community/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how garden photos, the comments people leave on them and their likes are
# stored in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for ``garden_images``, ``image_comments`` and ``image_likes``. A user can
# like an image at most once, enforced by a unique (image_id, user_id) constraint.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.infrastructure.database.connection (shared declarative base)
# - garden_planning models (garden_plans foreign key target)
#
# 🔄 Connected Modules / Calls From:
# - garden_image_repository_impl.py, image_comment_repository_impl.py, image_like_repository_impl.py
# - migrations/env.py (metadata)

"""
SQLAlchemy Models for Community Features

Models:
- GardenImageModel: A photo attached to a garden plan
- ImageCommentModel: A user's comment on a garden image
- ImageLikeModel: A user's like on a garden image (one per user and image)
"""

from uuid import uuid4

from sqlalchemy import Column, DateTime, ForeignKey, String, Text, UniqueConstraint, Uuid

from app.shared.config.database import utc_now
from app.shared.infrastructure.database.connection import Base


# =============================================================================
# GARDEN IMAGE MODEL
# =============================================================================

class GardenImageModel(Base):
    __tablename__ = "garden_images"

    id = Column(Uuid, primary_key=True, default=uuid4, comment="Unique identifier for each image")
    garden_plan_id = Column(
        Uuid,
        ForeignKey("garden_plans.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
        comment="Garden plan the image belongs to"
    )
    image_url = Column(Text, nullable=False)
    title = Column(String(255), nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)

    def __repr__(self) -> str:
        return f"<GardenImageModel(id={self.id}, title={self.title})>"


# =============================================================================
# IMAGE COMMENT MODEL
# =============================================================================

class ImageCommentModel(Base):
    __tablename__ = "image_comments"

    id = Column(Uuid, primary_key=True, default=uuid4)
    image_id = Column(
        Uuid,
        ForeignKey("garden_images.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    user_id = Column(Uuid, nullable=False, index=True, comment="Commenting profile")
    comment = Column(Text, nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)

    def __repr__(self) -> str:
        return f"<ImageCommentModel(id={self.id}, image_id={self.image_id})>"


# =============================================================================
# IMAGE LIKE MODEL
# =============================================================================

class ImageLikeModel(Base):
    """
    SQLAlchemy model for image likes.

    At most one row per (image_id, user_id).
    """
    __tablename__ = "image_likes"
    __table_args__ = (
        UniqueConstraint("image_id", "user_id", name="uq_image_likes_image_user"),
    )

    id = Column(Uuid, primary_key=True, default=uuid4)
    image_id = Column(
        Uuid,
        ForeignKey("garden_images.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    user_id = Column(Uuid, nullable=False, index=True, comment="Liking profile")

    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)

    def __repr__(self) -> str:
        return f"<ImageLikeModel(image_id={self.image_id}, user_id={self.user_id})>"
