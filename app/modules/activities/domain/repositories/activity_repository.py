# 📄 File: app/modules/activities/domain/repositories/activity_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how activity log entries are saved and looked up per gardener, per garden and per kind.
# 🧪 Purpose (Technical Summary):
# Repository interface for Activity entities.
# 🔗 Dependencies:
# abc, app.shared.infrastructure.database.search
# 🔄 Connected Modules / Calls From:
# ActivityService, ActivityRepositoryImpl

from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from app.shared.infrastructure.database.search import Page, PageRequest


class ActivityRepository(ABC):

    @abstractmethod
    async def find_all(self, page_request: PageRequest) -> Page:
        pass

    @abstractmethod
    async def list_all(self) -> List:
        pass

    @abstractmethod
    async def get_by_id(self, activity_id: UUID):
        pass

    @abstractmethod
    async def create(self, activity):
        pass

    @abstractmethod
    async def update(self, activity):
        pass

    @abstractmethod
    async def delete(self, activity_id: UUID) -> bool:
        pass

    @abstractmethod
    async def find_by_user_id(self, user_id: UUID, page_request: PageRequest) -> Page:
        pass

    @abstractmethod
    async def find_by_garden_plan_id(self, garden_plan_id: UUID, page_request: PageRequest) -> Page:
        pass

    @abstractmethod
    async def find_by_user_id_and_type(self, user_id: UUID, activity_type: str, page_request: PageRequest) -> Page:
        """Activities of one exact type (case-sensitive) for a user."""
        pass

    @abstractmethod
    async def find_by_garden_plan_id_and_type(
        self, garden_plan_id: UUID, activity_type: str, page_request: PageRequest
    ) -> Page:
        pass
