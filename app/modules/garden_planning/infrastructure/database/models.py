# 📄 File: app/modules/garden_planning/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how garden plans and the plants inside them are stored in the database,
# including where each plant sits on the garden grid.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for the ``garden_plans`` and ``plants`` tables with UUID keys,
# python-side timestamps and a cascading plan -> plants foreign key.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.infrastructure.database.connection (shared declarative base)
#
# 🔄 Connected Modules / Calls From:
# - garden_plan_repository_impl.py, plant_repository_impl.py
# - care_management and community models (foreign keys)
# - migrations/env.py (metadata)

"""
SQLAlchemy Models for Garden Planning

Models:
- GardenPlanModel: A user's garden layout (public or private)
- PlantModel: A plant placed in a garden plan at an optional grid position
"""

from uuid import uuid4

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text, Uuid

from app.shared.config.database import utc_now
from app.shared.infrastructure.database.connection import Base


# =============================================================================
# GARDEN PLAN MODEL
# =============================================================================

class GardenPlanModel(Base):
    """
    SQLAlchemy model for garden plans.

    ``user_id`` is the owning profile's ID; public plans are visible to
    everyone in the community listings.
    """
    __tablename__ = "garden_plans"

    id = Column(Uuid, primary_key=True, default=uuid4, comment="Unique identifier for each garden plan")
    user_id = Column(Uuid, nullable=False, index=True, comment="Owner of the plan")
    name = Column(String(255), nullable=False, comment="Plan name")
    type = Column(String(100), nullable=False, comment="Vegetable garden, herb garden, ...")
    description = Column(Text, nullable=True)
    location = Column(String(255), nullable=True, comment="Free-form location")
    thumbnail_url = Column(Text, nullable=True)
    is_public = Column(Boolean, nullable=False, default=False, comment="Shown in public listings")

    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    def __repr__(self) -> str:
        return f"<GardenPlanModel(id={self.id}, name={self.name})>"


# =============================================================================
# PLANT MODEL
# =============================================================================

class PlantModel(Base):
    """
    SQLAlchemy model for plants placed in a garden plan.
    """
    __tablename__ = "plants"

    id = Column(Uuid, primary_key=True, default=uuid4, comment="Unique identifier for each plant")
    garden_plan_id = Column(
        Uuid,
        ForeignKey("garden_plans.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Garden plan the plant belongs to"
    )
    name = Column(String(255), nullable=False)
    type = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    watering_frequency = Column(String(100), nullable=True)
    sunlight_requirements = Column(String(100), nullable=True)
    position_x = Column(Integer, nullable=True, comment="Grid column")
    position_y = Column(Integer, nullable=True, comment="Grid row")
    image_url = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    def __repr__(self) -> str:
        return f"<PlantModel(id={self.id}, name={self.name}, garden_plan_id={self.garden_plan_id})>"
