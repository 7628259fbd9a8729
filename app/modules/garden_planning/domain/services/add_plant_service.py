# 📄 File: app/modules/garden_planning/domain/services/add_plant_service.py
# 🧭 Purpose (Layman Explanation):
# Copies a plant from the encyclopedia into a garden plan and puts it in the first empty square of
# the plan's 10 by 10 grid.
# 🧪 Purpose (Technical Summary):
# Maps a PlantsLibraryModel onto a new PlantModel (common_name -> name, plant_type -> type,
# short_description -> description, watering_frequency, sunlight_requirement -> sunlight_requirements,
# image_url) and assigns the first free (x, y) cell scanning row by row.
# 🔗 Dependencies:
# PlantRepository, GardenPlanRepository, PlantLibraryRepository
# 🔄 Connected Modules / Calls From:
# app.modules.garden_planning.presentation.api.v1.plants (POST /plants/from-library)

import logging
from typing import Iterable, Optional, Tuple
from uuid import UUID

from app.shared.config.database import utc_now
from app.shared.core.exceptions import NotFoundError, ValidationError

from ..repositories.garden_plan_repository import GardenPlanRepository
from ..repositories.plant_repository import PlantRepository
from .plant_service import to_response
from app.modules.garden_planning.infrastructure.database.models import PlantModel
from app.modules.garden_planning.presentation.api.schemas.plant_schemas import (
    AddPlantFromLibraryRequest,
    PlantResponse,
)
from app.modules.plant_library.domain.repositories.plant_library_repository import PlantLibraryRepository
from app.modules.plant_library.infrastructure.database.models import PlantsLibraryModel

logger = logging.getLogger(__name__)

GRID_SIZE = 10


def first_free_position(
    occupied: Iterable[Tuple[int, int]],
    grid_size: int = GRID_SIZE,
) -> Tuple[Optional[int], Optional[int]]:
    """
    First unoccupied ``(x, y)`` cell, scanning rows (y) then columns (x).

    Returns ``(None, None)`` when every cell is taken.
    """
    taken = set(occupied)
    for y in range(grid_size):
        for x in range(grid_size):
            if (x, y) not in taken:
                return x, y
    return None, None


def plant_from_library(entry: PlantsLibraryModel, garden_plan_id: UUID) -> PlantModel:
    if not entry.common_name:
        raise ValidationError(
            f"Plants library entry {entry.id} has no common name",
            details={"plants_library_id": str(entry.id)},
        )

    now = utc_now()
    return PlantModel(
        garden_plan_id=garden_plan_id,
        name=entry.common_name,
        type=entry.plant_type or "Other",
        description=entry.short_description,
        watering_frequency=entry.watering_frequency,
        sunlight_requirements=entry.sunlight_requirement,
        image_url=entry.image_url,
        created_at=now,
        updated_at=now,
    )


class AddPlantService:
    """
    Adds plants library entries to garden plans.
    """

    def __init__(
        self,
        plant_repository: PlantRepository,
        garden_plan_repository: GardenPlanRepository,
        plant_library_repository: PlantLibraryRepository,
    ):
        self.plant_repository = plant_repository
        self.garden_plan_repository = garden_plan_repository
        self.plant_library_repository = plant_library_repository

    async def add_from_library(self, request: AddPlantFromLibraryRequest) -> PlantResponse:
        """
        Copy a library entry into a garden plan.

        Raises:
            NotFoundError: If the library entry or the garden plan does not exist
        """
        entry = await self.plant_library_repository.get_by_id(request.plants_library_id)
        if entry is None:
            raise NotFoundError(
                f"Plants library entry not found with ID: {request.plants_library_id}",
                resource_type="plants_library",
                resource_id=request.plants_library_id,
            )

        if await self.garden_plan_repository.get_by_id(request.garden_plan_id) is None:
            raise NotFoundError(
                f"Garden plan not found with id: {request.garden_plan_id}",
                resource_type="garden_plan",
                resource_id=request.garden_plan_id,
            )

        plant = plant_from_library(entry, request.garden_plan_id)

        existing = await self.plant_repository.list_by_garden_plan_id(request.garden_plan_id)
        plant.position_x, plant.position_y = first_free_position(
            (p.position_x, p.position_y)
            for p in existing
            if p.position_x is not None and p.position_y is not None
        )
        logger.debug(f"Plant positioned at ({plant.position_x}, {plant.position_y})")

        plant = await self.plant_repository.create(plant)
        logger.info(f"Added library entry {entry.id} to garden plan {request.garden_plan_id} as plant {plant.id}")
        return to_response(plant)
