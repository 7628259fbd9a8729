# 📄 File: app/modules/plant_library/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Hands each plant encyclopedia request the tools it needs: a database librarian and the service on top of it,
# or a connection to the online plant encyclopedia for external lookups.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers wiring the request-scoped session into the repository and service, and a
# request-scoped PerenualClient (aiohttp session opened and closed around the request) into ExternalPlantService.
# 🔗 Dependencies:
# FastAPI Depends, app.shared.infrastructure.database.session
# 🔄 Connected Modules / Calls From:
# app.modules.plant_library.presentation.api.v1.plants_library, external_plants, garden_planning dependencies

from typing import AsyncIterator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.plant_library.domain.repositories.plant_library_repository import PlantLibraryRepository
from app.modules.plant_library.domain.services.external_plant_service import ExternalPlantService
from app.modules.plant_library.domain.services.plant_library_service import PlantLibraryService
from app.modules.plant_library.infrastructure.database.plant_library_repository_impl import (
    PlantLibraryRepositoryImpl,
)
from app.modules.plant_library.infrastructure.external.perenual_client import PerenualClient
from app.shared.infrastructure.database.session import get_db_session


def get_plant_library_repository(
    session: AsyncSession = Depends(get_db_session),
) -> PlantLibraryRepository:
    return PlantLibraryRepositoryImpl(session)


def get_plant_library_service(
    repository: PlantLibraryRepository = Depends(get_plant_library_repository),
) -> PlantLibraryService:
    return PlantLibraryService(repository)


async def get_perenual_client() -> AsyncIterator[PerenualClient]:
    async with PerenualClient.from_settings() as client:
        yield client


def get_external_plant_service(client: PerenualClient = Depends(get_perenual_client)) -> ExternalPlantService:
    return ExternalPlantService(client)
