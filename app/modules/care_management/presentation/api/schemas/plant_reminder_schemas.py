# 📄 File: app/modules/care_management/presentation/api/schemas/plant_reminder_schemas.py
#
# 🧭 Purpose (Layman Explanation):
# Describes a care reminder as the app sends and receives it.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for plant reminders.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - app.modules.care_management.presentation.api.v1.plant_reminders
# - app.modules.care_management.domain.services.plant_reminder_service

from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class PlantReminderRequest(BaseModel):
    plant_id: UUID
    garden_plan_id: UUID
    reminder_type: str = Field(..., min_length=1, max_length=100, examples=["Watering"])
    reminder_date: date
    notes: Optional[str] = None
    is_completed: Optional[bool] = Field(None, description="Defaults to false on create")


class PlantReminderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    plant_id: UUID
    garden_plan_id: UUID
    reminder_type: str
    reminder_date: date
    notes: Optional[str] = None
    is_completed: bool
    created_at: datetime
