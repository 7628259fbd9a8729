# 📄 File: app/modules/activities/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how activity log entries ("watered the tomatoes") are stored.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for the ``activities`` table. The garden plan link is optional and cleared
# when the plan is deleted.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.infrastructure.database.connection (shared declarative base)
#
# 🔄 Connected Modules / Calls From:
# - activity_repository_impl.py
# - migrations/env.py (metadata)

from uuid import uuid4

from sqlalchemy import Column, DateTime, ForeignKey, String, Text, Uuid

from app.shared.config.database import utc_now
from app.shared.infrastructure.database.connection import Base


class ActivityModel(Base):
    """
    SQLAlchemy model for activity feed entries.
    """
    __tablename__ = "activities"

    id = Column(Uuid, primary_key=True, default=uuid4)
    user_id = Column(Uuid, nullable=False, index=True, comment="Gardener who did it")
    garden_plan_id = Column(Uuid, ForeignKey("garden_plans.id", ondelete="SET NULL"), nullable=True, index=True)
    activity_type = Column(String(255), nullable=False, comment="Planting, watering, harvesting, ...")
    description = Column(Text, nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)

    def __repr__(self) -> str:
        return f"<ActivityModel(id={self.id}, type={self.activity_type}, user_id={self.user_id})>"
