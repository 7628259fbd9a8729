# 📄 File: app/modules/care_management/domain/repositories/plant_reminder_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how care reminders are saved and looked up per plant, per garden and by due date.
# 🧪 Purpose (Technical Summary):
# Repository interface for PlantReminder entities.
# 🔗 Dependencies:
# abc, app.shared.infrastructure.database.search
# 🔄 Connected Modules / Calls From:
# PlantReminderService, PlantReminderRepositoryImpl

from abc import ABC, abstractmethod
from datetime import date
from typing import List
from uuid import UUID

from app.shared.infrastructure.database.search import Page, PageRequest


class PlantReminderRepository(ABC):

    @abstractmethod
    async def find_all(self, page_request: PageRequest) -> Page:
        pass

    @abstractmethod
    async def list_all(self) -> List:
        pass

    @abstractmethod
    async def get_by_id(self, reminder_id: UUID):
        pass

    @abstractmethod
    async def create(self, reminder):
        pass

    @abstractmethod
    async def update(self, reminder):
        pass

    @abstractmethod
    async def delete(self, reminder_id: UUID) -> bool:
        pass

    @abstractmethod
    async def find_by_plant_id(self, plant_id: UUID, page_request: PageRequest) -> Page:
        pass

    @abstractmethod
    async def find_by_garden_plan_id(self, garden_plan_id: UUID, page_request: PageRequest) -> Page:
        pass

    @abstractmethod
    async def list_by_plant_id_and_completed(self, plant_id: UUID, is_completed: bool) -> List:
        pass

    @abstractmethod
    async def find_due(self, on_or_before: date, page_request: PageRequest) -> Page:
        """Reminders whose date is ``on_or_before`` or earlier."""
        pass
