# 📄 File: app/modules/health_monitoring/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Gives pest and disease requests the catalogue readers and the plant encyclopedia they need.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers for the health monitoring repositories and service.
# 🔗 Dependencies:
# FastAPI Depends, app.shared.infrastructure.database.session, plant_library dependencies
# 🔄 Connected Modules / Calls From:
# app.modules.health_monitoring.presentation.api.v1 (pests, plant_diseases)

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.health_monitoring.domain.repositories.health_repositories import (
    PestRepository,
    PlantDiseaseRepository,
)
from app.modules.health_monitoring.domain.services.health_monitoring_service import HealthMonitoringService
from app.modules.health_monitoring.infrastructure.database.health_repositories_impl import (
    PestRepositoryImpl,
    PlantDiseaseRepositoryImpl,
)
from app.modules.plant_library.domain.repositories.plant_library_repository import PlantLibraryRepository
from app.modules.plant_library.presentation.dependencies import get_plant_library_repository
from app.shared.infrastructure.database.session import get_db_session


def get_pest_repository(session: AsyncSession = Depends(get_db_session)) -> PestRepository:
    return PestRepositoryImpl(session)


def get_plant_disease_repository(session: AsyncSession = Depends(get_db_session)) -> PlantDiseaseRepository:
    return PlantDiseaseRepositoryImpl(session)


def get_health_monitoring_service(
    pest_repository: PestRepository = Depends(get_pest_repository),
    disease_repository: PlantDiseaseRepository = Depends(get_plant_disease_repository),
    plant_library_repository: PlantLibraryRepository = Depends(get_plant_library_repository),
) -> HealthMonitoringService:
    return HealthMonitoringService(pest_repository, disease_repository, plant_library_repository)
