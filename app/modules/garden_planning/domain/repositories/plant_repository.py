# 📄 File: app/modules/garden_planning/domain/repositories/plant_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for how the plants inside garden plans are saved, found and searched.
# 🧪 Purpose (Technical Summary):
# Repository interface and search criteria for garden Plant entities.
# 🔗 Dependencies:
# abc, typing, app.shared.infrastructure.database.search
# 🔄 Connected Modules / Calls From:
# PlantService, AddPlantService, PlantRepositoryImpl

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional
from uuid import UUID

from app.shared.infrastructure.database.search import Page, PageRequest, SearchCriteria


@dataclass(frozen=True)
class PlantSearchCriteria(SearchCriteria):
    """Relevance search input for garden plants."""
    query: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    watering_frequency: Optional[str] = None
    sunlight_requirements: Optional[str] = None
    garden_plan_id: Optional[UUID] = None


class PlantRepository(ABC):
    """
    Repository interface for garden Plant data access operations.
    """

    @abstractmethod
    async def find_all(self, page_request: PageRequest) -> Page:
        pass

    @abstractmethod
    async def list_all(self) -> List:
        pass

    @abstractmethod
    async def get_by_id(self, plant_id: UUID):
        pass

    @abstractmethod
    async def create(self, plant):
        pass

    @abstractmethod
    async def update(self, plant):
        pass

    @abstractmethod
    async def delete(self, plant_id: UUID) -> bool:
        pass

    @abstractmethod
    async def find_by_garden_plan_id(self, garden_plan_id: UUID, page_request: PageRequest) -> Page:
        pass

    @abstractmethod
    async def list_by_garden_plan_id(self, garden_plan_id: UUID) -> List:
        """Every plant of a garden plan (used for grid placement)."""
        pass

    @abstractmethod
    async def find_by_type(self, plant_type: str, page_request: PageRequest) -> Page:
        pass

    @abstractmethod
    async def list_by_type(self, plant_type: str) -> List:
        pass

    @abstractmethod
    async def search(
        self,
        query: Optional[str],
        garden_plan_id: Optional[UUID],
        page_request: PageRequest,
    ) -> Page:
        """
        Free-text OR search over name, description, type, watering frequency
        and sunlight requirements, optionally within one garden plan.
        """
        pass

    @abstractmethod
    async def search_ranked(self, criteria: PlantSearchCriteria, page_request: PageRequest) -> Page:
        """
        Relevance-ranked search.

        Raises:
            RepositoryError: If the ranked query fails
        """
        pass
