# 📄 File: app/modules/activities/presentation/api/schemas/activity_schemas.py
#
# 🧭 Purpose (Layman Explanation):
# Describes an activity log entry as the app sends and receives it.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for activities. Type and description must carry text;
# surrounding whitespace is trimmed.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - app.modules.activities.presentation.api.v1.activities
# - app.modules.activities.domain.services.activity_service

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ActivityRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "user_id": "3f1c2b9e-8a4d-4e7b-9c21-5d6e7f8a9b0c",
                "garden_plan_id": "7a8b9c0d-1e2f-4a3b-8c4d-5e6f7a8b9c0d",
                "activity_type": "Harvesting",
                "description": "Picked the first cherry tomatoes",
            }
        }
    )

    user_id: UUID = Field(..., description="Gardener who did it")
    garden_plan_id: Optional[UUID] = Field(None, description="Garden plan the activity belongs to")
    activity_type: str = Field(..., max_length=255)
    description: str = Field(..., max_length=2000)

    @field_validator("activity_type", "description")
    @classmethod
    def not_blank(cls, v: str, info):
        v = v.strip()
        if not v:
            raise ValueError(f"{info.field_name} is required")
        return v


class ActivityResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    garden_plan_id: Optional[UUID] = None
    activity_type: str
    description: str
    created_at: datetime
