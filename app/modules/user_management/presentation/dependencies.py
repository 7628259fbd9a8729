# 📄 File: app/modules/user_management/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Gives each profile request a database helper and the profile service built on top of it.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers for the profile repository and service.
# 🔗 Dependencies:
# FastAPI Depends, app.shared.infrastructure.database.session
# 🔄 Connected Modules / Calls From:
# app.modules.user_management.presentation.api.v1.profiles

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.user_management.domain.repositories.profile_repository import ProfileRepository
from app.modules.user_management.domain.services.profile_service import ProfileService
from app.modules.user_management.infrastructure.database.profile_repository_impl import ProfileRepositoryImpl
from app.shared.infrastructure.database.session import get_db_session


def get_profile_repository(session: AsyncSession = Depends(get_db_session)) -> ProfileRepository:
    return ProfileRepositoryImpl(session)


def get_profile_service(repository: ProfileRepository = Depends(get_profile_repository)) -> ProfileService:
    return ProfileService(repository)
