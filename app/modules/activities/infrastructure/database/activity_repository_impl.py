# 📄 File: app/modules/activities/infrastructure/database/activity_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Stores and finds activity log entries in the database.
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of ActivityRepository.
# 🔗 Dependencies:
# SQLAlchemyRepository, ActivityModel
# 🔄 Connected Modules / Calls From:
# app.modules.activities.presentation.dependencies

from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, true

from app.modules.activities.domain.repositories.activity_repository import ActivityRepository
from app.modules.activities.infrastructure.database.models import ActivityModel
from app.shared.infrastructure.database.repository import SQLAlchemyRepository
from app.shared.infrastructure.database.search import Page, PageRequest


class ActivityRepositoryImpl(SQLAlchemyRepository, ActivityRepository):

    model = ActivityModel
    entity_name = "activity"

    async def find_all(self, page_request: PageRequest) -> Page:
        return await self._page(true(), page_request)

    async def list_all(self) -> List[ActivityModel]:
        return await self._list(true(), ActivityModel.created_at.desc())

    async def get_by_id(self, activity_id: UUID) -> Optional[ActivityModel]:
        return await self._get(activity_id)

    async def create(self, activity: ActivityModel) -> ActivityModel:
        return await self._add(activity)

    async def update(self, activity: ActivityModel) -> ActivityModel:
        return await self._flush(activity)

    async def delete(self, activity_id: UUID) -> bool:
        return await self._delete(activity_id)

    async def find_by_user_id(self, user_id: UUID, page_request: PageRequest) -> Page:
        return await self._page(ActivityModel.user_id == user_id, page_request)

    async def find_by_garden_plan_id(self, garden_plan_id: UUID, page_request: PageRequest) -> Page:
        return await self._page(ActivityModel.garden_plan_id == garden_plan_id, page_request)

    async def find_by_user_id_and_type(self, user_id: UUID, activity_type: str, page_request: PageRequest) -> Page:
        return await self._page(
            and_(ActivityModel.user_id == user_id, ActivityModel.activity_type == activity_type),
            page_request,
        )

    async def find_by_garden_plan_id_and_type(
        self, garden_plan_id: UUID, activity_type: str, page_request: PageRequest
    ) -> Page:
        return await self._page(
            and_(ActivityModel.garden_plan_id == garden_plan_id, ActivityModel.activity_type == activity_type),
            page_request,
        )
