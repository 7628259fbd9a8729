# 📄 File: app/modules/care_management/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how plant care reminders (water on Tuesday, fertilise next week) are stored.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for the ``plant_reminders`` table, referencing plants and garden plans.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.infrastructure.database.connection (shared declarative base)
#
# 🔄 Connected Modules / Calls From:
# - plant_reminder_repository_impl.py
# - migrations/env.py (metadata)

from uuid import uuid4

from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, String, Text, Uuid

from app.shared.config.database import utc_now
from app.shared.infrastructure.database.connection import Base


class PlantReminderModel(Base):
    """
    SQLAlchemy model for plant care reminders.

    A reminder is due once ``reminder_date`` is today or earlier.
    """
    __tablename__ = "plant_reminders"

    id = Column(Uuid, primary_key=True, default=uuid4)
    plant_id = Column(Uuid, ForeignKey("plants.id", ondelete="CASCADE"), nullable=False, index=True)
    garden_plan_id = Column(Uuid, ForeignKey("garden_plans.id", ondelete="CASCADE"), nullable=False, index=True)
    reminder_type = Column(String(100), nullable=False, comment="Watering, fertilizing, pruning, ...")
    reminder_date = Column(Date, nullable=False, index=True)
    notes = Column(Text, nullable=True)
    is_completed = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)

    def __repr__(self) -> str:
        return f"<PlantReminderModel(id={self.id}, type={self.reminder_type}, date={self.reminder_date})>"
