# 📄 File: app/modules/garden_planning/presentation/api/schemas/plant_schemas.py
#
# 🧭 Purpose (Layman Explanation):
# Describes a plant placed in a garden plan, and the short request used to copy a plant from the
# encyclopedia into a plan.
#
# 🧪 Purpose (Technical Summary):
# Pydantic schemas for garden plant CRUD and the add-from-library request.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - app.modules.garden_planning.presentation.api.v1.plants
# - app.modules.garden_planning.domain.services (plant_service, add_plant_service)

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class PlantBase(BaseModel):
    garden_plan_id: UUID = Field(..., description="Garden plan the plant belongs to")
    name: str = Field(..., min_length=1, max_length=255)
    type: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    watering_frequency: Optional[str] = Field(None, max_length=100)
    sunlight_requirements: Optional[str] = Field(None, max_length=100)
    position_x: Optional[int] = Field(None, ge=0, description="Grid column")
    position_y: Optional[int] = Field(None, ge=0, description="Grid row")
    image_url: Optional[str] = None


class PlantRequest(PlantBase):
    pass


class PlantResponse(PlantBase):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    created_at: datetime
    updated_at: datetime


class AddPlantFromLibraryRequest(BaseModel):
    """Copy a plants library entry into a garden plan."""
    garden_plan_id: UUID = Field(..., description="Target garden plan")
    plants_library_id: UUID = Field(..., description="Plants library entry to copy")
