# 📄 File: app/modules/plant_library/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how plant encyclopedia entries are stored in the database: names, growing
# conditions, care level, companion plants and the pests or diseases that usually bother them.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for the ``plants_library`` table. List-valued attributes use the portable JSON
# type and the temperature range is split into min/max columns so the schema runs on PostgreSQL and SQLite.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.infrastructure.database.connection (shared declarative base)
#
# 🔄 Connected Modules / Calls From:
# - plant_library_repository_impl.py (CRUD and search)
# - garden_planning add-from-library, health_monitoring pest/disease lookups
# - migrations/env.py (metadata)

from uuid import uuid4

from sqlalchemy import JSON, Boolean, Column, DateTime, Float, Numeric, String, Text, Uuid

from app.shared.config.database import utc_now
from app.shared.infrastructure.database.connection import Base


class PlantsLibraryModel(Base):
    """
    SQLAlchemy model for plant reference entries.

    Entries are read by gardeners when choosing plants and copied into
    garden plans; they do not belong to a user.
    """
    __tablename__ = "plants_library"

    id = Column(Uuid, primary_key=True, default=uuid4, comment="Unique identifier for each entry")

    # Names and description
    common_name = Column(String(255), nullable=True, index=True, comment="Common name")
    other_name = Column(String(255), nullable=True, comment="Alternative names")
    scientific_name = Column(String(255), nullable=True, comment="Botanical name")
    short_description = Column(Text, nullable=True, comment="Short description")
    origin = Column(String(255), nullable=True, comment="Region of origin")

    # Classification
    plant_type = Column(String(100), nullable=True, index=True, comment="Vegetable, herb, flower, ...")
    climate = Column(String(100), nullable=True)
    life_cycle = Column(String(100), nullable=True, comment="Annual, biennial, perennial")

    # Growing conditions
    watering_frequency = Column(String(100), nullable=True)
    soil_type = Column(String(255), nullable=True)
    size = Column(String(100), nullable=True)
    sunlight_requirement = Column(String(100), nullable=True)
    growth_rate = Column(String(100), nullable=True)
    ideal_place = Column(String(255), nullable=True)
    care_level = Column(String(100), nullable=True)
    image_url = Column(Text, nullable=True)
    best_planting_season = Column(String(100), nullable=True)
    gardening_tips = Column(Text, nullable=True)
    pruning_guide = Column(Text, nullable=True)

    # Numeric attributes
    seed_depth = Column(Float, nullable=True, comment="Seed depth (cm)")
    germination_time = Column(Float, nullable=True, comment="Germination time (days)")
    time_to_harvest = Column(Float, nullable=True, comment="Time to harvest (days)")
    temperature_min = Column(Numeric(5, 2), nullable=True, comment="Lower bound of tolerated temperature (°C)")
    temperature_max = Column(Numeric(5, 2), nullable=True, comment="Upper bound of tolerated temperature (°C)")

    # Flags
    flower = Column(Boolean, nullable=True)
    fruit = Column(Boolean, nullable=True)
    medicinal = Column(Boolean, nullable=True)

    # Lists
    common_pests = Column(JSON, nullable=True, comment="Pest common names")
    common_diseases = Column(JSON, nullable=True, comment="Disease common names")
    companion_plants = Column(JSON, nullable=True)
    avoid_planting_with = Column(JSON, nullable=True)
    pest_disease_prevention_tips = Column(JSON, nullable=True)
    cool_facts = Column(JSON, nullable=True)
    edible_parts = Column(JSON, nullable=True)

    # Timestamps
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    def __repr__(self) -> str:
        return f"<PlantsLibraryModel(id={self.id}, common_name={self.common_name})>"
