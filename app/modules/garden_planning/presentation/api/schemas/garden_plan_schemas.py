# 📄 File: app/modules/garden_planning/presentation/api/schemas/garden_plan_schemas.py
#
# 🧭 Purpose (Layman Explanation):
# Describes what a garden plan looks like when someone creates one or when the app sends one back.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for garden plan endpoints.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - app.modules.garden_planning.presentation.api.v1.garden_plans
# - app.modules.garden_planning.domain.services.garden_plan_service

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class GardenPlanBase(BaseModel):
    user_id: UUID = Field(..., description="Owner profile ID")
    name: str = Field(..., min_length=1, max_length=255, description="Plan name")
    type: str = Field(..., min_length=1, max_length=100, description="Garden type, e.g. vegetable garden")
    description: Optional[str] = None
    location: Optional[str] = Field(None, max_length=255)
    thumbnail_url: Optional[str] = None
    is_public: bool = Field(False, description="Visible in public listings")


class GardenPlanRequest(GardenPlanBase):
    """Create/replace payload."""
    pass


class GardenPlanResponse(GardenPlanBase):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    created_at: datetime
    updated_at: datetime
