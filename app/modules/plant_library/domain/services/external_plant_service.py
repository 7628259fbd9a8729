# 📄 File: app/modules/plant_library/domain/services/external_plant_service.py
# 🧭 Purpose (Layman Explanation):
# Looks things up in the online plant encyclopedia (Perenual) when our own library
# does not have them: plant lists, a plant's full profile, pests and diseases.
# 🧪 Purpose (Technical Summary):
# Orchestrates PerenualClient calls and validates the payloads into the external
# plant schemas. Malformed payloads surface as ExternalAPIError; a details payload
# without an id means the species does not exist.
# 🔗 Dependencies:
# PerenualClient, external plant schemas, app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# app.modules.plant_library.presentation.api.v1.external_plants

import logging
from typing import Any, Dict, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PayloadValidationError

from app.modules.plant_library.infrastructure.external.perenual_client import PerenualClient
from app.modules.plant_library.presentation.api.schemas.external_plant_schemas import (
    DiseasePestFilters,
    DiseasePestPage,
    ExternalPlantDetails,
    ExternalPlantFilters,
    ExternalPlantPage,
)
from app.shared.core.exceptions import ExternalAPIError, NotFoundError

logger = logging.getLogger(__name__)

PayloadModel = TypeVar("PayloadModel", bound=BaseModel)


class ExternalPlantService:

    def __init__(self, client: PerenualClient):
        self.client = client

    def _parse(self, model: Type[PayloadModel], payload: Dict[str, Any], what: str) -> PayloadModel:
        try:
            return model.model_validate(payload)
        except PayloadValidationError as e:
            logger.error(f"Error parsing {what} from {self.client.api_name}: {e}")
            raise ExternalAPIError(f"Failed to parse {what}", api_name=self.client.api_name) from e

    async def get_plant_list(self, filters: ExternalPlantFilters) -> ExternalPlantPage:
        logger.info(f"Fetching plant list from external API (page {filters.page}, query: {filters.q or 'none'})")
        payload = await self.client.list_species(filters.model_dump())
        return self._parse(ExternalPlantPage, payload, "plant list")

    async def get_plant_details(self, plant_id: int) -> ExternalPlantDetails:
        logger.info(f"Fetching plant details from external API for id {plant_id}")
        payload = await self.client.get_species_details(plant_id)
        if not isinstance(payload, dict) or payload.get("id") is None:
            raise NotFoundError(
                f"Plant not found in external API with id: {plant_id}",
                resource_type="external_plant",
                resource_id=plant_id,
            )
        return self._parse(ExternalPlantDetails, payload, "plant details")

    async def get_disease_pest_list(self, filters: DiseasePestFilters) -> DiseasePestPage:
        logger.info(f"Fetching diseases and pests from external API (page {filters.page})")
        payload = await self.client.list_pests_and_diseases(filters.model_dump())
        return self._parse(DiseasePestPage, payload, "disease and pest list")
