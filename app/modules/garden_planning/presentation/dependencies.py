# 📄 File: app/modules/garden_planning/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Gives each garden plan and plant request the database helpers and services it needs.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers for garden plan / plant repositories and services. The
# add-from-library service also receives the plants library repository on the same session.
# 🔗 Dependencies:
# FastAPI Depends, app.shared.infrastructure.database.session, plant_library dependencies
# 🔄 Connected Modules / Calls From:
# app.modules.garden_planning.presentation.api.v1 (garden_plans, plants)

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.garden_planning.domain.repositories.garden_plan_repository import GardenPlanRepository
from app.modules.garden_planning.domain.repositories.plant_repository import PlantRepository
from app.modules.garden_planning.domain.services.add_plant_service import AddPlantService
from app.modules.garden_planning.domain.services.garden_plan_service import GardenPlanService
from app.modules.garden_planning.domain.services.plant_service import PlantService
from app.modules.garden_planning.infrastructure.database.garden_plan_repository_impl import (
    GardenPlanRepositoryImpl,
)
from app.modules.garden_planning.infrastructure.database.plant_repository_impl import PlantRepositoryImpl
from app.modules.plant_library.domain.repositories.plant_library_repository import PlantLibraryRepository
from app.modules.plant_library.presentation.dependencies import get_plant_library_repository
from app.shared.infrastructure.database.session import get_db_session


def get_garden_plan_repository(
    session: AsyncSession = Depends(get_db_session),
) -> GardenPlanRepository:
    return GardenPlanRepositoryImpl(session)


def get_plant_repository(
    session: AsyncSession = Depends(get_db_session),
) -> PlantRepository:
    return PlantRepositoryImpl(session)


def get_garden_plan_service(
    repository: GardenPlanRepository = Depends(get_garden_plan_repository),
) -> GardenPlanService:
    return GardenPlanService(repository)


def get_plant_service(
    repository: PlantRepository = Depends(get_plant_repository),
) -> PlantService:
    return PlantService(repository)


def get_add_plant_service(
    plant_repository: PlantRepository = Depends(get_plant_repository),
    garden_plan_repository: GardenPlanRepository = Depends(get_garden_plan_repository),
    plant_library_repository: PlantLibraryRepository = Depends(get_plant_library_repository),
) -> AddPlantService:
    return AddPlantService(plant_repository, garden_plan_repository, plant_library_repository)
