# 📄 File: app/modules/garden_planning/domain/repositories/garden_plan_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for how garden plans are saved, found, listed per gardener and searched.
# 🧪 Purpose (Technical Summary):
# Repository interface and search criteria for GardenPlan entities, including the relevance-ranked
# search and its plain OR counterpart.
# 🔗 Dependencies:
# abc, typing, app.shared.infrastructure.database.search
# 🔄 Connected Modules / Calls From:
# GardenPlanService, GardenPlanRepositoryImpl

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional
from uuid import UUID

from app.shared.infrastructure.database.search import Page, PageRequest, SearchCriteria


@dataclass(frozen=True)
class GardenPlanSearchCriteria(SearchCriteria):
    """
    Relevance search input: named fields, a free-text query and scope.
    """
    query: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    location: Optional[str] = None
    user_id: Optional[UUID] = None
    is_public: Optional[bool] = None


class GardenPlanRepository(ABC):
    """
    Repository interface for GardenPlan data access operations.

    Implementation Notes:
    - Concrete implementations are in infrastructure layer
    - ``search_ranked`` may fail on backends lacking the scoring features;
      callers fall back to ``search``
    """

    @abstractmethod
    async def find_all(self, page_request: PageRequest) -> Page:
        pass

    @abstractmethod
    async def list_all(self) -> List:
        pass

    @abstractmethod
    async def get_by_id(self, plan_id: UUID):
        """
        Get garden plan by ID.

        Returns:
            Garden plan if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, plan):
        pass

    @abstractmethod
    async def update(self, plan):
        pass

    @abstractmethod
    async def delete(self, plan_id: UUID) -> bool:
        """
        Delete garden plan by ID.

        Returns:
            True if deleted, False if not found
        """
        pass

    @abstractmethod
    async def find_by_user_id(self, user_id: UUID, page_request: PageRequest) -> Page:
        pass

    @abstractmethod
    async def list_by_user_id(self, user_id: UUID) -> List:
        pass

    @abstractmethod
    async def find_public(self, page_request: PageRequest) -> Page:
        pass

    @abstractmethod
    async def list_public(self) -> List:
        pass

    @abstractmethod
    async def search(
        self,
        query: Optional[str],
        user_id: Optional[UUID],
        is_public: Optional[bool],
        page_request: PageRequest,
    ) -> Page:
        """
        Free-text OR search over name, description, type and location,
        restricted to the given owner / visibility when supplied.
        """
        pass

    @abstractmethod
    async def search_ranked(self, criteria: GardenPlanSearchCriteria, page_request: PageRequest) -> Page:
        """
        Relevance-ranked search.

        Named fields must all match (substring, case-insensitive), the query
        must match at least one text attribute, scope fields match exactly.
        Results are ordered by score, then by the requested sort.

        Raises:
            RepositoryError: If the ranked query fails
        """
        pass
