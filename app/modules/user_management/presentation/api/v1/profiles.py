# 📄 File: app/modules/user_management/presentation/api/v1/profiles.py
# 🧭 Purpose (Layman Explanation):
# This file contains the web endpoints for gardener profiles: create, view, edit and delete them,
# and find people by name.
#
# 🧪 Purpose (Technical Summary):
# FastAPI router for /profiles with paged listings, CRUD, name lookups, plain search and
# relevance-ranked search with plain-search fallback.
#
# 🔗 Dependencies:
# - FastAPI router, Query parameters, status codes
# - app.modules.user_management.presentation.dependencies (service injection)
# - app.shared.core.responses, app.shared.core.dependencies
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/v1/profiles)

"""
Profiles API Endpoints

Endpoints:
- GET /: Paged profiles
- GET /all: Every profile
- GET /search: Name search
- GET /search/advanced: Closest name matches first
- GET /name/{full_name}, /name/{full_name}/all: Name contains lookups
- GET /{profile_id}, POST /, PUT /{profile_id}, DELETE /{profile_id}: CRUD
"""

import logging
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from app.modules.user_management.domain.repositories.profile_repository import ProfileSearchCriteria
from app.modules.user_management.domain.services.profile_service import ProfileService
from app.modules.user_management.presentation.api.schemas.profile_schemas import (
    ProfileRequest,
    ProfileResponse,
)
from app.modules.user_management.presentation.dependencies import get_profile_service
from app.shared.core.dependencies import get_page_request
from app.shared.core.responses import ERROR_RESPONSES, ApiResponse, PageResponse, created, ok
from app.shared.infrastructure.database.search import PageRequest

logger = logging.getLogger(__name__)

profiles_router = APIRouter()


@profiles_router.get(
    "",
    response_model=ApiResponse[PageResponse[ProfileResponse]],
    summary="List profiles",
    responses=ERROR_RESPONSES,
)
async def get_all_profiles(
    page_request: PageRequest = Depends(get_page_request),
    service: ProfileService = Depends(get_profile_service),
):
    page = await service.find_all(page_request)
    return ok(PageResponse.from_page(page), "Successfully retrieved profiles")


@profiles_router.get("/all", response_model=ApiResponse[List[ProfileResponse]], summary="List every profile")
async def get_all_profiles_without_pagination(service: ProfileService = Depends(get_profile_service)):
    return ok(await service.list_all(), "Successfully retrieved all profiles")


@profiles_router.get(
    "/search",
    response_model=ApiResponse[PageResponse[ProfileResponse]],
    summary="Search profiles",
    description="Case-insensitive search on full name. A blank query returns every profile.",
    responses=ERROR_RESPONSES,
)
async def search_profiles(
    query: Optional[str] = Query(None, description="Search keyword"),
    page_request: PageRequest = Depends(get_page_request),
    service: ProfileService = Depends(get_profile_service),
):
    page = await service.search(query, page_request)
    return ok(PageResponse.from_page(page), "Successfully searched profiles")


@profiles_router.get(
    "/search/advanced",
    response_model=ApiResponse[PageResponse[ProfileResponse]],
    summary="Relevance search for profiles",
    description="Exact name matches first, then prefix, then substring matches.",
    responses=ERROR_RESPONSES,
)
async def search_profiles_advanced(
    query: Optional[str] = Query(None),
    full_name: Optional[str] = Query(None),
    page_request: PageRequest = Depends(get_page_request),
    service: ProfileService = Depends(get_profile_service),
):
    criteria = ProfileSearchCriteria(query=query, full_name=full_name)
    page = await service.search_advanced(criteria, page_request)
    return ok(PageResponse.from_page(page), "Successfully searched profiles")


@profiles_router.get(
    "/name/{full_name}",
    response_model=ApiResponse[PageResponse[ProfileResponse]],
    summary="Profiles by name",
)
async def get_profiles_by_name(
    full_name: str,
    page_request: PageRequest = Depends(get_page_request),
    service: ProfileService = Depends(get_profile_service),
):
    page = await service.find_by_full_name(full_name, page_request)
    return ok(PageResponse.from_page(page), "Successfully retrieved profiles by name")


@profiles_router.get(
    "/name/{full_name}/all",
    response_model=ApiResponse[List[ProfileResponse]],
    summary="Every profile matching a name",
)
async def get_all_profiles_by_name(
    full_name: str,
    service: ProfileService = Depends(get_profile_service),
):
    return ok(await service.list_by_full_name(full_name), "Successfully retrieved all profiles by name")


@profiles_router.get(
    "/{profile_id}",
    response_model=ApiResponse[ProfileResponse],
    summary="Get profile",
    responses=ERROR_RESPONSES,
)
async def get_profile_by_id(profile_id: UUID, service: ProfileService = Depends(get_profile_service)):
    return ok(await service.get_by_id(profile_id), "Successfully retrieved profile")


@profiles_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[ProfileResponse],
    summary="Create profile",
    responses=ERROR_RESPONSES,
)
async def create_profile(request: ProfileRequest, service: ProfileService = Depends(get_profile_service)):
    return created(await service.create(request), "Profile created successfully")


@profiles_router.put(
    "/{profile_id}",
    response_model=ApiResponse[ProfileResponse],
    summary="Replace profile",
    responses=ERROR_RESPONSES,
)
async def update_profile(
    profile_id: UUID,
    request: ProfileRequest,
    service: ProfileService = Depends(get_profile_service),
):
    return ok(await service.update(profile_id, request), "Profile updated successfully")


@profiles_router.delete(
    "/{profile_id}",
    response_model=ApiResponse[None],
    summary="Delete profile",
    responses=ERROR_RESPONSES,
)
async def delete_profile(profile_id: UUID, service: ProfileService = Depends(get_profile_service)):
    await service.delete(profile_id)
    return ok(None, "Profile deleted successfully")
