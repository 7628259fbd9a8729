# 📄 File: app/modules/health_monitoring/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how the pest and plant disease reference catalogues are stored.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for ``pests`` and ``plant_diseases``. Both use auto-incrementing integer keys
# (BIGINT on PostgreSQL, INTEGER on SQLite so rowid autoincrement applies).
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.infrastructure.database.connection (shared declarative base)
#
# 🔄 Connected Modules / Calls From:
# - pest_repository_impl.py, plant_disease_repository_impl.py
# - migrations/env.py (metadata)

from sqlalchemy import BigInteger, Column, DateTime, Integer, String, Text

from app.shared.config.database import utc_now
from app.shared.infrastructure.database.connection import Base

IdType = BigInteger().with_variant(Integer, "sqlite")


# =============================================================================
# PEST MODEL
# =============================================================================

class PestModel(Base):
    __tablename__ = "pests"

    id = Column(IdType, primary_key=True, autoincrement=True)
    common_name = Column(String(255), nullable=False, index=True)
    scientific_name = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    damage_symptoms = Column(Text, nullable=True)
    life_cycle = Column(Text, nullable=True)
    season_active = Column(String(255), nullable=True)
    organic_control = Column(Text, nullable=True)
    chemical_control = Column(Text, nullable=True)
    prevention_tips = Column(Text, nullable=True)
    image_url = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    def __repr__(self) -> str:
        return f"<PestModel(id={self.id}, common_name={self.common_name})>"


# =============================================================================
# PLANT DISEASE MODEL
# =============================================================================

class PlantDiseaseModel(Base):
    __tablename__ = "plant_diseases"

    id = Column(IdType, primary_key=True, autoincrement=True)
    common_name = Column(String(255), nullable=False, index=True)
    scientific_name = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    symptoms = Column(Text, nullable=True)
    favorable_conditions = Column(Text, nullable=True)
    prevention_tips = Column(Text, nullable=True)
    organic_control = Column(Text, nullable=True)
    chemical_control = Column(Text, nullable=True)
    image_url = Column(Text, nullable=True)
    transmission_method = Column(String(255), nullable=True)
    contagiousness = Column(String(100), nullable=True)
    severity_rating = Column(String(100), nullable=True)
    time_to_onset = Column(String(100), nullable=True)
    recovery_chances = Column(String(100), nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    def __repr__(self) -> str:
        return f"<PlantDiseaseModel(id={self.id}, common_name={self.common_name})>"
