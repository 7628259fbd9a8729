# 📄 File: app/modules/user_management/infrastructure/database/profile_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles all database operations for gardener profiles, from simple lookups to the
# name search that lists exact matches first.
#
# 🧪 Purpose (Technical Summary):
# Concrete implementation of ProfileRepository using SQLAlchemy. Ranked search scores the full name
# 100/80/60 (exact/prefix/substring) plus 10 for a query hit, inside a SAVEPOINT.
#
# 🔗 Dependencies:
# - app.modules.user_management.domain.repositories.profile_repository
# - app.modules.user_management.infrastructure.database.models (ProfileModel)
# - app.shared.infrastructure.database (base repository, search toolkit)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.dependencies

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, true

from app.modules.user_management.domain.repositories.profile_repository import (
    ProfileRepository,
    ProfileSearchCriteria,
)
from app.modules.user_management.infrastructure.database.models import ProfileModel
from app.shared.infrastructure.database.repository import SQLAlchemyRepository
from app.shared.infrastructure.database.search import (
    FilterField,
    MatchKind,
    Page,
    PageRequest,
    compose_and,
    compose_or,
    match_score,
)
from app.shared.infrastructure.database.search.filters import contains
from app.shared.infrastructure.database.search.relevance import query_bonus

logger = logging.getLogger(__name__)

SEARCH_ATTRIBUTES = ("full_name",)

RANKED_FILTERS = (FilterField("full_name", MatchKind.CONTAINS),)


class ProfileRepositoryImpl(SQLAlchemyRepository, ProfileRepository):
    """
    SQLAlchemy implementation of the ProfileRepository interface.
    """

    model = ProfileModel
    entity_name = "profile"

    async def find_all(self, page_request: PageRequest) -> Page:
        return await self._page(true(), page_request)

    async def list_all(self) -> List[ProfileModel]:
        return await self._list(true(), ProfileModel.created_at.desc())

    async def get_by_id(self, profile_id: UUID) -> Optional[ProfileModel]:
        return await self._get(profile_id)

    async def create(self, profile: ProfileModel) -> ProfileModel:
        return await self._add(profile)

    async def update(self, profile: ProfileModel) -> ProfileModel:
        return await self._flush(profile)

    async def delete(self, profile_id: UUID) -> bool:
        return await self._delete(profile_id)

    async def find_by_full_name(self, full_name: str, page_request: PageRequest) -> Page:
        return await self._page(contains(ProfileModel.full_name, full_name), page_request)

    async def list_by_full_name(self, full_name: str) -> List[ProfileModel]:
        return await self._list(contains(ProfileModel.full_name, full_name), ProfileModel.full_name.asc())

    async def search(self, query: Optional[str], page_request: PageRequest) -> Page:
        return await self._page(compose_or(ProfileModel, query, SEARCH_ATTRIBUTES), page_request)

    async def search_ranked(self, criteria: ProfileSearchCriteria, page_request: PageRequest) -> Page:
        text_filter = compose_or(ProfileModel, criteria.query, SEARCH_ATTRIBUTES)
        score = (
            match_score(ProfileModel.full_name, criteria.full_name, 100, 80, 60)
            + query_bonus(text_filter, criteria.query)
        )
        where = and_(compose_and(ProfileModel, criteria, RANKED_FILTERS), text_filter)

        async with self._session.begin_nested():
            return await self._page(where, page_request, order_first=(score.desc(),))
