# 📄 File: app/modules/activities/domain/services/activity_service.py
# 🧭 Purpose (Layman Explanation):
# Manages the activity feed: recording what gardeners did and listing it back.
# 🧪 Purpose (Technical Summary):
# Domain service over ActivityRepository. The creation time is set here and never changes on update.
# 🔗 Dependencies:
# ActivityRepository, activity schemas
# 🔄 Connected Modules / Calls From:
# app.modules.activities.presentation.api.v1.activities

import logging
from typing import List
from uuid import UUID

from app.shared.config.database import utc_now
from app.shared.core.exceptions import NotFoundError
from app.shared.infrastructure.database.search import Page, PageRequest

from ..repositories.activity_repository import ActivityRepository
from app.modules.activities.infrastructure.database.models import ActivityModel
from app.modules.activities.presentation.api.schemas.activity_schemas import ActivityRequest, ActivityResponse

logger = logging.getLogger(__name__)


def to_response(activity: ActivityModel) -> ActivityResponse:
    return ActivityResponse.model_validate(activity, from_attributes=True)


class ActivityService:

    def __init__(self, repository: ActivityRepository):
        self.repository = repository

    async def find_all(self, page_request: PageRequest) -> Page:
        return (await self.repository.find_all(page_request)).map(to_response)

    async def list_all(self) -> List[ActivityResponse]:
        return [to_response(a) for a in await self.repository.list_all()]

    async def get_by_id(self, activity_id: UUID) -> ActivityResponse:
        return to_response(await self._require(activity_id))

    async def create(self, request: ActivityRequest) -> ActivityResponse:
        activity = await self.repository.create(ActivityModel(**request.model_dump(), created_at=utc_now()))

        logger.info(f"Activity {activity.id} ({activity.activity_type}) recorded for user {activity.user_id}")
        return to_response(activity)

    async def update(self, activity_id: UUID, request: ActivityRequest) -> ActivityResponse:
        activity = await self._require(activity_id)
        for field, value in request.model_dump().items():
            setattr(activity, field, value)
        return to_response(await self.repository.update(activity))

    async def delete(self, activity_id: UUID) -> None:
        if not await self.repository.delete(activity_id):
            raise NotFoundError(
                f"Activity not found with id: {activity_id}",
                resource_type="activity",
                resource_id=activity_id,
            )

    async def find_by_user_id(self, user_id: UUID, page_request: PageRequest) -> Page:
        return (await self.repository.find_by_user_id(user_id, page_request)).map(to_response)

    async def find_by_garden_plan_id(self, garden_plan_id: UUID, page_request: PageRequest) -> Page:
        return (await self.repository.find_by_garden_plan_id(garden_plan_id, page_request)).map(to_response)

    async def find_by_user_id_and_type(self, user_id: UUID, activity_type: str, page_request: PageRequest) -> Page:
        page = await self.repository.find_by_user_id_and_type(user_id, activity_type, page_request)
        return page.map(to_response)

    async def find_by_garden_plan_id_and_type(
        self, garden_plan_id: UUID, activity_type: str, page_request: PageRequest
    ) -> Page:
        page = await self.repository.find_by_garden_plan_id_and_type(garden_plan_id, activity_type, page_request)
        return page.map(to_response)

    async def _require(self, activity_id: UUID) -> ActivityModel:
        activity = await self.repository.get_by_id(activity_id)
        if activity is None:
            raise NotFoundError(
                f"Activity not found with id: {activity_id}",
                resource_type="activity",
                resource_id=activity_id,
            )
        return activity
