# 📄 File: app/modules/user_management/domain/repositories/profile_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for how gardener profiles are saved, found by name and searched.
# 🧪 Purpose (Technical Summary):
# Repository interface and relevance search criteria for Profile entities.
# 🔗 Dependencies:
# abc, typing, app.shared.infrastructure.database.search
# 🔄 Connected Modules / Calls From:
# ProfileService, ProfileRepositoryImpl

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional
from uuid import UUID

from app.shared.infrastructure.database.search import Page, PageRequest, SearchCriteria


@dataclass(frozen=True)
class ProfileSearchCriteria(SearchCriteria):
    query: Optional[str] = None
    full_name: Optional[str] = None


class ProfileRepository(ABC):
    """
    Repository interface for Profile data access operations.

    Implementation Notes:
    - Concrete implementations are in infrastructure layer
    - All operations are async for non-blocking I/O
    """

    @abstractmethod
    async def find_all(self, page_request: PageRequest) -> Page:
        pass

    @abstractmethod
    async def list_all(self) -> List:
        pass

    @abstractmethod
    async def get_by_id(self, profile_id: UUID):
        """
        Get profile by profile ID.

        Returns:
            Profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, profile):
        pass

    @abstractmethod
    async def update(self, profile):
        pass

    @abstractmethod
    async def delete(self, profile_id: UUID) -> bool:
        pass

    @abstractmethod
    async def find_by_full_name(self, full_name: str, page_request: PageRequest) -> Page:
        """Profiles whose full name contains ``full_name`` (case-insensitive)."""
        pass

    @abstractmethod
    async def list_by_full_name(self, full_name: str) -> List:
        pass

    @abstractmethod
    async def search(self, query: Optional[str], page_request: PageRequest) -> Page:
        pass

    @abstractmethod
    async def search_ranked(self, criteria: ProfileSearchCriteria, page_request: PageRequest) -> Page:
        """
        Relevance-ranked search on full name.

        Raises:
            RepositoryError: If the ranked query fails
        """
        pass
