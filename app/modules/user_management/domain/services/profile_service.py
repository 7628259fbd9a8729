# 📄 File: app/modules/user_management/domain/services/profile_service.py
# 🧭 Purpose (Layman Explanation):
# Manages gardener profiles: creating them, changing names and pictures, and finding people by name.
# 🧪 Purpose (Technical Summary):
# Domain service for Profile entities. Advanced search runs the relevance-ranked query and falls back
# to the plain name search on any non-client failure.
# 🔗 Dependencies:
# ProfileRepository, profile schemas, app.shared.infrastructure.database.search
# 🔄 Connected Modules / Calls From:
# app.modules.user_management.presentation.api.v1.profiles

import logging
from typing import List, Optional
from uuid import UUID

from app.shared.config.database import utc_now
from app.shared.core.exceptions import NotFoundError
from app.shared.infrastructure.database.search import Page, PageRequest, search_with_fallback

from ..repositories.profile_repository import ProfileRepository, ProfileSearchCriteria
from app.modules.user_management.infrastructure.database.models import ProfileModel
from app.modules.user_management.presentation.api.schemas.profile_schemas import (
    ProfileRequest,
    ProfileResponse,
)

logger = logging.getLogger(__name__)


def to_response(profile: ProfileModel) -> ProfileResponse:
    return ProfileResponse.model_validate(profile, from_attributes=True)


class ProfileService:
    """
    Domain service for profile management.

    Handles profile creation, replacement, name lookups and search.
    """

    def __init__(self, repository: ProfileRepository):
        self.repository = repository

    async def find_all(self, page_request: PageRequest) -> Page:
        return (await self.repository.find_all(page_request)).map(to_response)

    async def list_all(self) -> List[ProfileResponse]:
        return [to_response(p) for p in await self.repository.list_all()]

    async def get_by_id(self, profile_id: UUID) -> ProfileResponse:
        return to_response(await self._require(profile_id))

    async def create(self, request: ProfileRequest) -> ProfileResponse:
        now = utc_now()
        profile = await self.repository.create(
            ProfileModel(**request.model_dump(), created_at=now, updated_at=now)
        )
        logger.info(f"Profile created: {profile.id}")
        return to_response(profile)

    async def update(self, profile_id: UUID, request: ProfileRequest) -> ProfileResponse:
        profile = await self._require(profile_id)
        profile.full_name = request.full_name
        profile.avatar_url = request.avatar_url
        profile.updated_at = utc_now()
        return to_response(await self.repository.update(profile))

    async def delete(self, profile_id: UUID) -> None:
        if not await self.repository.delete(profile_id):
            raise NotFoundError(
                f"Profile not found with id: {profile_id}",
                resource_type="profile",
                resource_id=profile_id,
            )
        logger.info(f"Profile deleted: {profile_id}")

    async def find_by_full_name(self, full_name: str, page_request: PageRequest) -> Page:
        return (await self.repository.find_by_full_name(full_name, page_request)).map(to_response)

    async def list_by_full_name(self, full_name: str) -> List[ProfileResponse]:
        return [to_response(p) for p in await self.repository.list_by_full_name(full_name)]

    async def search(self, query: Optional[str], page_request: PageRequest) -> Page:
        return (await self.repository.search(query, page_request)).map(to_response)

    async def search_advanced(self, criteria: ProfileSearchCriteria, page_request: PageRequest) -> Page:
        page = await search_with_fallback(
            lambda: self.repository.search_ranked(criteria, page_request),
            lambda: self.repository.search(criteria.query, page_request),
            "profiles",
            criteria=criteria.present(),
        )
        return page.map(to_response)

    async def _require(self, profile_id: UUID) -> ProfileModel:
        profile = await self.repository.get_by_id(profile_id)
        if profile is None:
            raise NotFoundError(
                f"Profile not found with id: {profile_id}",
                resource_type="profile",
                resource_id=profile_id,
            )
        return profile
