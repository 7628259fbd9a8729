# 📄 File: app/modules/care_management/domain/services/plant_reminder_service.py
# 🧭 Purpose (Layman Explanation):
# Manages care reminders: creating them, ticking them off and finding the ones that are due.
# 🧪 Purpose (Technical Summary):
# Domain service over PlantReminderRepository. Missing completion flags default to False on create
# and on update.
# 🔗 Dependencies:
# PlantReminderRepository, reminder schemas
# 🔄 Connected Modules / Calls From:
# app.modules.care_management.presentation.api.v1.plant_reminders

import logging
from datetime import date
from typing import List, Optional
from uuid import UUID

from app.shared.config.database import utc_now
from app.shared.core.exceptions import NotFoundError
from app.shared.infrastructure.database.search import Page, PageRequest

from ..repositories.plant_reminder_repository import PlantReminderRepository
from app.modules.care_management.infrastructure.database.models import PlantReminderModel
from app.modules.care_management.presentation.api.schemas.plant_reminder_schemas import (
    PlantReminderRequest,
    PlantReminderResponse,
)

logger = logging.getLogger(__name__)


def to_response(reminder: PlantReminderModel) -> PlantReminderResponse:
    return PlantReminderResponse.model_validate(reminder, from_attributes=True)


class PlantReminderService:

    def __init__(self, repository: PlantReminderRepository):
        self.repository = repository

    async def find_all(self, page_request: PageRequest) -> Page:
        return (await self.repository.find_all(page_request)).map(to_response)

    async def list_all(self) -> List[PlantReminderResponse]:
        return [to_response(r) for r in await self.repository.list_all()]

    async def get_by_id(self, reminder_id: UUID) -> PlantReminderResponse:
        return to_response(await self._require(reminder_id))

    async def create(self, request: PlantReminderRequest) -> PlantReminderResponse:
        values = request.model_dump()
        values["is_completed"] = bool(values["is_completed"])
        reminder = await self.repository.create(PlantReminderModel(**values, created_at=utc_now()))

        logger.info(f"Reminder {reminder.id} ({reminder.reminder_type}) set for {reminder.reminder_date}")
        return to_response(reminder)

    async def update(self, reminder_id: UUID, request: PlantReminderRequest) -> PlantReminderResponse:
        reminder = await self._require(reminder_id)
        for field, value in request.model_dump().items():
            setattr(reminder, field, value)
        reminder.is_completed = bool(reminder.is_completed)
        return to_response(await self.repository.update(reminder))

    async def complete(self, reminder_id: UUID) -> PlantReminderResponse:
        reminder = await self._require(reminder_id)
        reminder.is_completed = True
        return to_response(await self.repository.update(reminder))

    async def delete(self, reminder_id: UUID) -> None:
        if not await self.repository.delete(reminder_id):
            raise NotFoundError(
                f"Plant reminder not found with id: {reminder_id}",
                resource_type="plant_reminder",
                resource_id=reminder_id,
            )

    async def find_by_plant_id(self, plant_id: UUID, page_request: PageRequest) -> Page:
        return (await self.repository.find_by_plant_id(plant_id, page_request)).map(to_response)

    async def find_by_garden_plan_id(self, garden_plan_id: UUID, page_request: PageRequest) -> Page:
        return (await self.repository.find_by_garden_plan_id(garden_plan_id, page_request)).map(to_response)

    async def list_incomplete_by_plant_id(self, plant_id: UUID) -> List[PlantReminderResponse]:
        return [to_response(r) for r in await self.repository.list_by_plant_id_and_completed(plant_id, False)]

    async def find_due(self, on_or_before: Optional[date], page_request: PageRequest) -> Page:
        on_or_before = on_or_before or date.today()
        return (await self.repository.find_due(on_or_before, page_request)).map(to_response)

    async def _require(self, reminder_id: UUID) -> PlantReminderModel:
        reminder = await self.repository.get_by_id(reminder_id)
        if reminder is None:
            raise NotFoundError(
                f"Plant reminder not found with id: {reminder_id}",
                resource_type="plant_reminder",
                resource_id=reminder_id,
            )
        return reminder
