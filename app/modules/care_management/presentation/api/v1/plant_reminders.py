# 📄 File: app/modules/care_management/presentation/api/v1/plant_reminders.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for plant care reminders: list, add, edit, tick off and find what is due.
#
# 🧪 Purpose (Technical Summary):
# FastAPI router for /plant-reminders. Listings sort by reminder date ascending unless told otherwise.
#
# 🔗 Dependencies:
# - FastAPI router, Query parameters
# - app.modules.care_management.presentation.dependencies
# - app.shared.core.responses, app.shared.core.dependencies
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/v1/plant-reminders)

from datetime import date
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from app.modules.care_management.domain.services.plant_reminder_service import PlantReminderService
from app.modules.care_management.presentation.api.schemas.plant_reminder_schemas import (
    PlantReminderRequest,
    PlantReminderResponse,
)
from app.modules.care_management.presentation.dependencies import get_plant_reminder_service
from app.shared.core.dependencies import page_request_with_default_sort
from app.shared.core.responses import ERROR_RESPONSES, ApiResponse, PageResponse, created, ok
from app.shared.infrastructure.database.search import PageRequest

plant_reminders_router = APIRouter()

reminder_page_request = page_request_with_default_sort("reminder_date", "ASC")


@plant_reminders_router.get(
    "",
    response_model=ApiResponse[PageResponse[PlantReminderResponse]],
    summary="List plant reminders",
    responses=ERROR_RESPONSES,
)
async def get_all_plant_reminders(
    page_request: PageRequest = Depends(reminder_page_request),
    service: PlantReminderService = Depends(get_plant_reminder_service),
):
    page = await service.find_all(page_request)
    return ok(PageResponse.from_page(page), "Successfully retrieved plant reminders")


@plant_reminders_router.get(
    "/all",
    response_model=ApiResponse[List[PlantReminderResponse]],
    summary="List every plant reminder",
)
async def get_all_plant_reminders_without_pagination(
    service: PlantReminderService = Depends(get_plant_reminder_service),
):
    return ok(await service.list_all(), "Successfully retrieved all plant reminders")


@plant_reminders_router.get(
    "/due",
    response_model=ApiResponse[PageResponse[PlantReminderResponse]],
    summary="Due reminders",
    description="Reminders dated on or before the given date (today when omitted).",
    responses=ERROR_RESPONSES,
)
async def get_due_reminders(
    due_date: Optional[date] = Query(None, alias="date", description="ISO date, defaults to today"),
    page_request: PageRequest = Depends(reminder_page_request),
    service: PlantReminderService = Depends(get_plant_reminder_service),
):
    page = await service.find_due(due_date, page_request)
    return ok(PageResponse.from_page(page), "Successfully retrieved due reminders")


@plant_reminders_router.get(
    "/plant/{plant_id}",
    response_model=ApiResponse[PageResponse[PlantReminderResponse]],
    summary="Reminders for a plant",
    responses=ERROR_RESPONSES,
)
async def get_reminders_by_plant(
    plant_id: UUID,
    page_request: PageRequest = Depends(reminder_page_request),
    service: PlantReminderService = Depends(get_plant_reminder_service),
):
    page = await service.find_by_plant_id(plant_id, page_request)
    return ok(PageResponse.from_page(page), "Successfully retrieved reminders for plant")


@plant_reminders_router.get(
    "/plant/{plant_id}/incomplete",
    response_model=ApiResponse[List[PlantReminderResponse]],
    summary="Open reminders for a plant",
    responses=ERROR_RESPONSES,
)
async def get_incomplete_reminders_by_plant(
    plant_id: UUID,
    service: PlantReminderService = Depends(get_plant_reminder_service),
):
    return ok(
        await service.list_incomplete_by_plant_id(plant_id),
        "Successfully retrieved incomplete reminders for plant",
    )


@plant_reminders_router.get(
    "/garden-plan/{garden_plan_id}",
    response_model=ApiResponse[PageResponse[PlantReminderResponse]],
    summary="Reminders for a garden plan",
    responses=ERROR_RESPONSES,
)
async def get_reminders_by_garden_plan(
    garden_plan_id: UUID,
    page_request: PageRequest = Depends(reminder_page_request),
    service: PlantReminderService = Depends(get_plant_reminder_service),
):
    page = await service.find_by_garden_plan_id(garden_plan_id, page_request)
    return ok(PageResponse.from_page(page), "Successfully retrieved reminders for garden plan")


@plant_reminders_router.get(
    "/{reminder_id}",
    response_model=ApiResponse[PlantReminderResponse],
    summary="Get plant reminder",
    responses=ERROR_RESPONSES,
)
async def get_plant_reminder_by_id(
    reminder_id: UUID,
    service: PlantReminderService = Depends(get_plant_reminder_service),
):
    return ok(await service.get_by_id(reminder_id), "Successfully retrieved plant reminder")


@plant_reminders_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[PlantReminderResponse],
    summary="Create plant reminder",
    responses=ERROR_RESPONSES,
)
async def create_plant_reminder(
    request: PlantReminderRequest,
    service: PlantReminderService = Depends(get_plant_reminder_service),
):
    return created(await service.create(request), "Plant reminder created successfully")


@plant_reminders_router.put(
    "/{reminder_id}",
    response_model=ApiResponse[PlantReminderResponse],
    summary="Replace plant reminder",
    responses=ERROR_RESPONSES,
)
async def update_plant_reminder(
    reminder_id: UUID,
    request: PlantReminderRequest,
    service: PlantReminderService = Depends(get_plant_reminder_service),
):
    return ok(await service.update(reminder_id, request), "Plant reminder updated successfully")


@plant_reminders_router.put(
    "/{reminder_id}/complete",
    response_model=ApiResponse[PlantReminderResponse],
    summary="Mark reminder as completed",
    responses=ERROR_RESPONSES,
)
async def complete_plant_reminder(
    reminder_id: UUID,
    service: PlantReminderService = Depends(get_plant_reminder_service),
):
    return ok(await service.complete(reminder_id), "Plant reminder marked as completed")


@plant_reminders_router.delete(
    "/{reminder_id}",
    response_model=ApiResponse[None],
    summary="Delete plant reminder",
    responses=ERROR_RESPONSES,
)
async def delete_plant_reminder(
    reminder_id: UUID,
    service: PlantReminderService = Depends(get_plant_reminder_service),
):
    await service.delete(reminder_id)
    return ok(None, "Plant reminder deleted successfully")
