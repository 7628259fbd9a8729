# 📄 File: app/modules/health_monitoring/presentation/api/schemas/health_schemas.py
#
# 🧭 Purpose (Layman Explanation):
# Describes a pest or a plant disease as the app returns it.
#
# 🧪 Purpose (Technical Summary):
# Pydantic response schemas for the pest and plant disease endpoints.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - app.modules.health_monitoring.domain.services.health_monitoring_service
# - app.modules.health_monitoring.presentation.api.v1 (pests, plant_diseases)

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class PestResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    common_name: str
    scientific_name: Optional[str] = None
    description: Optional[str] = None
    damage_symptoms: Optional[str] = None
    life_cycle: Optional[str] = None
    season_active: Optional[str] = None
    organic_control: Optional[str] = None
    chemical_control: Optional[str] = None
    prevention_tips: Optional[str] = None
    image_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class PlantDiseaseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    common_name: str
    scientific_name: Optional[str] = None
    description: Optional[str] = None
    symptoms: Optional[str] = None
    favorable_conditions: Optional[str] = None
    prevention_tips: Optional[str] = None
    organic_control: Optional[str] = None
    chemical_control: Optional[str] = None
    image_url: Optional[str] = None
    transmission_method: Optional[str] = None
    contagiousness: Optional[str] = None
    severity_rating: Optional[str] = None
    time_to_onset: Optional[str] = None
    recovery_chances: Optional[str] = None
    created_at: datetime
    updated_at: datetime
