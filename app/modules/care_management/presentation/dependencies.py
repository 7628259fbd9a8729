# 📄 File: app/modules/care_management/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Gives each reminder request a database helper and the reminder service.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers for the plant reminder repository and service.
# 🔗 Dependencies:
# FastAPI Depends, app.shared.infrastructure.database.session
# 🔄 Connected Modules / Calls From:
# app.modules.care_management.presentation.api.v1.plant_reminders

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.care_management.domain.repositories.plant_reminder_repository import PlantReminderRepository
from app.modules.care_management.domain.services.plant_reminder_service import PlantReminderService
from app.modules.care_management.infrastructure.database.plant_reminder_repository_impl import (
    PlantReminderRepositoryImpl,
)
from app.shared.infrastructure.database.session import get_db_session


def get_plant_reminder_repository(session: AsyncSession = Depends(get_db_session)) -> PlantReminderRepository:
    return PlantReminderRepositoryImpl(session)


def get_plant_reminder_service(
    repository: PlantReminderRepository = Depends(get_plant_reminder_repository),
) -> PlantReminderService:
    return PlantReminderService(repository)
