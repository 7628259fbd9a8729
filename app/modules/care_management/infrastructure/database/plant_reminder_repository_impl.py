# 📄 File: app/modules/care_management/infrastructure/database/plant_reminder_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Stores and finds plant care reminders in the database.
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of PlantReminderRepository.
# 🔗 Dependencies:
# SQLAlchemyRepository, PlantReminderModel
# 🔄 Connected Modules / Calls From:
# app.modules.care_management.presentation.dependencies

from datetime import date
from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, true

from app.modules.care_management.domain.repositories.plant_reminder_repository import PlantReminderRepository
from app.modules.care_management.infrastructure.database.models import PlantReminderModel
from app.shared.infrastructure.database.repository import SQLAlchemyRepository
from app.shared.infrastructure.database.search import Page, PageRequest


class PlantReminderRepositoryImpl(SQLAlchemyRepository, PlantReminderRepository):

    model = PlantReminderModel
    entity_name = "plant reminder"

    async def find_all(self, page_request: PageRequest) -> Page:
        return await self._page(true(), page_request)

    async def list_all(self) -> List[PlantReminderModel]:
        return await self._list(true(), PlantReminderModel.reminder_date.asc())

    async def get_by_id(self, reminder_id: UUID) -> Optional[PlantReminderModel]:
        return await self._get(reminder_id)

    async def create(self, reminder: PlantReminderModel) -> PlantReminderModel:
        return await self._add(reminder)

    async def update(self, reminder: PlantReminderModel) -> PlantReminderModel:
        return await self._flush(reminder)

    async def delete(self, reminder_id: UUID) -> bool:
        return await self._delete(reminder_id)

    async def find_by_plant_id(self, plant_id: UUID, page_request: PageRequest) -> Page:
        return await self._page(PlantReminderModel.plant_id == plant_id, page_request)

    async def find_by_garden_plan_id(self, garden_plan_id: UUID, page_request: PageRequest) -> Page:
        return await self._page(PlantReminderModel.garden_plan_id == garden_plan_id, page_request)

    async def list_by_plant_id_and_completed(self, plant_id: UUID, is_completed: bool) -> List[PlantReminderModel]:
        return await self._list(
            and_(PlantReminderModel.plant_id == plant_id, PlantReminderModel.is_completed.is_(is_completed)),
            PlantReminderModel.reminder_date.asc(),
        )

    async def find_due(self, on_or_before: date, page_request: PageRequest) -> Page:
        return await self._page(PlantReminderModel.reminder_date <= on_or_before, page_request)
