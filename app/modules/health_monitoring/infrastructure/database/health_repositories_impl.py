# 📄 File: app/modules/health_monitoring/infrastructure/database/health_repositories_impl.py
# 🧭 Purpose (Layman Explanation):
# Reads pests and diseases from the database, including looking them up by a list of names.
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementations of PestRepository and PlantDiseaseRepository. Name lookups compare
# lower(common_name) against the lower-cased names.
# 🔗 Dependencies:
# SQLAlchemyRepository, PestModel, PlantDiseaseModel
# 🔄 Connected Modules / Calls From:
# app.modules.health_monitoring.presentation.dependencies

from typing import Iterable, List

from sqlalchemy import func, true

from app.modules.health_monitoring.domain.repositories.health_repositories import (
    PestRepository,
    PlantDiseaseRepository,
)
from app.modules.health_monitoring.infrastructure.database.models import PestModel, PlantDiseaseModel
from app.shared.infrastructure.database.repository import SQLAlchemyRepository


class _CommonNameLookup(SQLAlchemyRepository):

    async def list_all(self) -> List:
        return await self._list(true(), self.model.common_name.asc())

    async def list_by_common_names(self, names: Iterable[str]) -> List:
        lowered = {name.lower() for name in names if name}
        if not lowered:
            return []
        return await self._list(func.lower(self.model.common_name).in_(lowered), self.model.common_name.asc())


class PestRepositoryImpl(_CommonNameLookup, PestRepository):
    model = PestModel
    entity_name = "pest"


class PlantDiseaseRepositoryImpl(_CommonNameLookup, PlantDiseaseRepository):
    model = PlantDiseaseModel
    entity_name = "plant disease"
