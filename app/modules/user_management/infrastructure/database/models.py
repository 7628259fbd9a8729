# 📄 File: app/modules/user_management/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how gardener profiles are stored in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for the ``profiles`` table with a UUID key and python-side timestamps.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.infrastructure.database.connection (shared declarative base)
#
# 🔄 Connected Modules / Calls From:
# - profile_repository_impl.py (CRUD operations)
# - migrations/env.py (metadata)

from uuid import uuid4

from sqlalchemy import Column, DateTime, String, Text, Uuid

from app.shared.config.database import utc_now
from app.shared.infrastructure.database.connection import Base


# =============================================================================
# PROFILE MODEL
# =============================================================================

class ProfileModel(Base):
    """
    SQLAlchemy model for gardener profiles.

    Garden plans, comments and likes refer to a profile through their
    ``user_id`` column.
    """
    __tablename__ = "profiles"

    id = Column(Uuid, primary_key=True, default=uuid4, comment="Unique identifier for each profile")
    full_name = Column(String(255), nullable=True, index=True, comment="Display name")
    avatar_url = Column(Text, nullable=True, comment="Profile picture URL")

    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    def __repr__(self) -> str:
        return f"<ProfileModel(id={self.id}, full_name={self.full_name})>"
