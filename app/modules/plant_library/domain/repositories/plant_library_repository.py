# 📄 File: app/modules/plant_library/domain/repositories/plant_library_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for how plant encyclopedia entries are saved, found, searched and removed.
# 🧪 Purpose (Technical Summary):
# Repository interface and search criteria for plants library entries, following the Repository pattern.
# 🔗 Dependencies:
# abc, typing, app.shared.infrastructure.database.search
# 🔄 Connected Modules / Calls From:
# PlantLibraryService, PlantLibraryRepositoryImpl, garden_planning add-from-library

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional
from uuid import UUID

from app.shared.infrastructure.database.search import Page, PageRequest, SearchCriteria


@dataclass(frozen=True)
class PlantsLibrarySearchCriteria(SearchCriteria):
    """Optional filters for the advanced plants library search."""
    common_name: Optional[str] = None
    other_name: Optional[str] = None
    scientific_name: Optional[str] = None
    origin: Optional[str] = None
    plant_type: Optional[str] = None
    climate: Optional[str] = None
    life_cycle: Optional[str] = None
    watering_frequency: Optional[str] = None
    soil_type: Optional[str] = None
    size: Optional[str] = None
    sunlight_requirement: Optional[str] = None
    growth_rate: Optional[str] = None
    ideal_place: Optional[str] = None
    care_level: Optional[str] = None
    best_planting_season: Optional[str] = None
    time_to_harvest: Optional[float] = None
    flower: Optional[bool] = None
    fruit: Optional[bool] = None
    medicinal: Optional[bool] = None


class PlantLibraryRepository(ABC):
    """
    Repository interface for plants library data access operations.

    Implementation Notes:
    - Concrete implementations are in the infrastructure layer
    - Methods return ORM entries; mapping to API schemas happens in the service
    - All operations are async for non-blocking I/O
    """

    @abstractmethod
    async def find_all(self, page_request: PageRequest) -> Page:
        """
        Get a page of library entries.

        Args:
            page_request: Paging and sorting parameters

        Returns:
            Page of entries
        """
        pass

    @abstractmethod
    async def list_all(self) -> List:
        """Get every library entry ordered by common name."""
        pass

    @abstractmethod
    async def get_by_id(self, entry_id: UUID):
        """
        Get a library entry by ID.

        Args:
            entry_id: Entry ID to find

        Returns:
            Entry if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, entry):
        """
        Persist a new library entry.

        Raises:
            RepositoryError: If database operation fails
        """
        pass

    @abstractmethod
    async def update(self, entry):
        """
        Flush changes made to a loaded entry.

        Raises:
            RepositoryError: If database operation fails
        """
        pass

    @abstractmethod
    async def delete(self, entry_id: UUID) -> bool:
        """
        Delete a library entry by ID.

        Returns:
            True if deleted, False if not found
        """
        pass

    @abstractmethod
    async def search(self, query: Optional[str], page_request: PageRequest) -> Page:
        """
        Free-text search across names, description and growing attributes.

        A blank query returns the unfiltered page.
        """
        pass

    @abstractmethod
    async def search_advanced(
        self,
        criteria: PlantsLibrarySearchCriteria,
        page_request: PageRequest,
    ) -> Page:
        """
        Search with every present criteria field applied (strict AND).
        """
        pass

    @abstractmethod
    async def find_by_plant_type(self, plant_type: str, page_request: PageRequest) -> Page:
        pass

    @abstractmethod
    async def find_by_life_cycle(self, life_cycle: str, page_request: PageRequest) -> Page:
        pass

    @abstractmethod
    async def find_by_medicinal(self, medicinal: bool, page_request: PageRequest) -> Page:
        pass
