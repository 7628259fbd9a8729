# 📄 File: app/modules/health_monitoring/domain/services/health_monitoring_service.py
# 🧭 Purpose (Layman Explanation):
# Answers "which pests and diseases should I watch for on this plant?" using the plant's
# encyclopedia entry.
# 🧪 Purpose (Technical Summary):
# Read-only service over the pest / disease repositories. Lookups by plants library entry match the
# entry's common_pests / common_diseases lists case-insensitively; a missing entry yields [].
# 🔗 Dependencies:
# PestRepository, PlantDiseaseRepository, PlantLibraryRepository
# 🔄 Connected Modules / Calls From:
# app.modules.health_monitoring.presentation.api.v1 (pests, plant_diseases)

import logging
from typing import List
from uuid import UUID

from ..repositories.health_repositories import PestRepository, PlantDiseaseRepository
from app.modules.health_monitoring.presentation.api.schemas.health_schemas import (
    PestResponse,
    PlantDiseaseResponse,
)
from app.modules.plant_library.domain.repositories.plant_library_repository import PlantLibraryRepository

logger = logging.getLogger(__name__)


class HealthMonitoringService:

    def __init__(
        self,
        pest_repository: PestRepository,
        disease_repository: PlantDiseaseRepository,
        plant_library_repository: PlantLibraryRepository,
    ):
        self.pest_repository = pest_repository
        self.disease_repository = disease_repository
        self.plant_library_repository = plant_library_repository

    async def list_pests(self) -> List[PestResponse]:
        return [PestResponse.model_validate(p) for p in await self.pest_repository.list_all()]

    async def list_diseases(self) -> List[PlantDiseaseResponse]:
        return [PlantDiseaseResponse.model_validate(d) for d in await self.disease_repository.list_all()]

    async def pests_for_library_entry(self, plant_library_id: UUID) -> List[PestResponse]:
        entry = await self.plant_library_repository.get_by_id(plant_library_id)
        if entry is None:
            logger.debug(f"No plants library entry {plant_library_id}, returning no pests")
            return []

        pests = await self.pest_repository.list_by_common_names(entry.common_pests or [])
        return [PestResponse.model_validate(p) for p in pests]

    async def diseases_for_library_entry(self, plant_library_id: UUID) -> List[PlantDiseaseResponse]:
        entry = await self.plant_library_repository.get_by_id(plant_library_id)
        if entry is None:
            logger.debug(f"No plants library entry {plant_library_id}, returning no diseases")
            return []

        diseases = await self.disease_repository.list_by_common_names(entry.common_diseases or [])
        return [PlantDiseaseResponse.model_validate(d) for d in diseases]
