# 📄 File: app/modules/activities/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Gives each activity request a database helper and the activity service.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers for the activity repository and service.
# 🔗 Dependencies:
# FastAPI Depends, app.shared.infrastructure.database.session
# 🔄 Connected Modules / Calls From:
# app.modules.activities.presentation.api.v1.activities

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.activities.domain.repositories.activity_repository import ActivityRepository
from app.modules.activities.domain.services.activity_service import ActivityService
from app.modules.activities.infrastructure.database.activity_repository_impl import ActivityRepositoryImpl
from app.shared.infrastructure.database.session import get_db_session


def get_activity_repository(session: AsyncSession = Depends(get_db_session)) -> ActivityRepository:
    return ActivityRepositoryImpl(session)


def get_activity_service(repository: ActivityRepository = Depends(get_activity_repository)) -> ActivityService:
    return ActivityService(repository)
