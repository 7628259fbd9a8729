# 📄 File: app/modules/community/domain/repositories/garden_image_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how garden photos are saved, listed per garden and found by title.
# 🧪 Purpose (Technical Summary):
# Repository interface for GardenImage entities.
# 🔗 Dependencies:
# abc, app.shared.infrastructure.database.search
# 🔄 Connected Modules / Calls From:
# GardenImageService, GardenImageRepositoryImpl

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from app.shared.infrastructure.database.search import Page, PageRequest


class GardenImageRepository(ABC):

    @abstractmethod
    async def find_all(self, page_request: PageRequest) -> Page:
        pass

    @abstractmethod
    async def list_all(self) -> List:
        pass

    @abstractmethod
    async def get_by_id(self, image_id: UUID):
        pass

    @abstractmethod
    async def create(self, image):
        pass

    @abstractmethod
    async def update(self, image):
        pass

    @abstractmethod
    async def delete(self, image_id: UUID) -> bool:
        pass

    @abstractmethod
    async def find_by_garden_plan_id(self, garden_plan_id: UUID, page_request: PageRequest) -> Page:
        pass

    @abstractmethod
    async def search(
        self,
        title: Optional[str],
        garden_plan_id: Optional[UUID],
        page_request: PageRequest,
    ) -> Page:
        """
        Images whose title contains ``title`` (case-insensitive), optionally
        within one garden plan. A blank title matches every image in scope.
        """
        pass
