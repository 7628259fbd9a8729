# 📄 File: app/modules/plant_library/presentation/api/schemas/plant_library_schemas.py
#
# 🧭 Purpose (Layman Explanation):
# This file defines what a plant encyclopedia entry looks like when it is sent to or returned by the API.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the plants library endpoints.
#
# 🔗 Dependencies:
# - pydantic for schema validation and serialization
#
# 🔄 Connected Modules / Calls From:
# - app.modules.plant_library.presentation.api.v1.plants_library (endpoints)
# - app.modules.plant_library.domain.services.plant_library_service (mapping)

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PlantsLibraryBase(BaseModel):
    """Fields shared by library requests and responses."""
    common_name: Optional[str] = Field(None, max_length=255, description="Common name")
    other_name: Optional[str] = Field(None, max_length=255)
    scientific_name: Optional[str] = Field(None, max_length=255)
    short_description: Optional[str] = None
    origin: Optional[str] = Field(None, max_length=255)
    plant_type: Optional[str] = Field(None, max_length=100)
    climate: Optional[str] = Field(None, max_length=100)
    life_cycle: Optional[str] = Field(None, max_length=100)
    watering_frequency: Optional[str] = Field(None, max_length=100)
    soil_type: Optional[str] = Field(None, max_length=255)
    size: Optional[str] = Field(None, max_length=100)
    sunlight_requirement: Optional[str] = Field(None, max_length=100)
    growth_rate: Optional[str] = Field(None, max_length=100)
    ideal_place: Optional[str] = Field(None, max_length=255)
    care_level: Optional[str] = Field(None, max_length=100)
    image_url: Optional[str] = None
    best_planting_season: Optional[str] = Field(None, max_length=100)
    gardening_tips: Optional[str] = None
    pruning_guide: Optional[str] = None
    seed_depth: Optional[float] = Field(None, ge=0, description="Seed depth (cm)")
    germination_time: Optional[float] = Field(None, ge=0, description="Germination time (days)")
    time_to_harvest: Optional[float] = Field(None, ge=0, description="Time to harvest (days)")
    temperature_min: Optional[float] = Field(None, description="Lowest tolerated temperature (°C)")
    temperature_max: Optional[float] = Field(None, description="Highest tolerated temperature (°C)")
    flower: Optional[bool] = None
    fruit: Optional[bool] = None
    medicinal: Optional[bool] = None
    common_pests: Optional[List[str]] = None
    common_diseases: Optional[List[str]] = None
    companion_plants: Optional[List[str]] = None
    avoid_planting_with: Optional[List[str]] = None
    pest_disease_prevention_tips: Optional[List[str]] = None
    cool_facts: Optional[List[str]] = None
    edible_parts: Optional[List[str]] = None


class PlantsLibraryRequest(PlantsLibraryBase):
    """Create/replace payload; every field is overwritten on update."""

    @model_validator(mode="after")
    def check_temperature_range(self):
        if (
            self.temperature_min is not None
            and self.temperature_max is not None
            and self.temperature_min > self.temperature_max
        ):
            raise ValueError("temperature_min must not exceed temperature_max")
        return self


class PlantsLibraryResponse(PlantsLibraryBase):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    created_at: datetime
    updated_at: datetime
