# 📄 File: app/modules/community/presentation/api/schemas/community_schemas.py
#
# 🧭 Purpose (Layman Explanation):
# Describes garden photos, comments and likes as the app sends and receives them.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the garden image, image comment and image like endpoints.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - app.modules.community.presentation.api.v1 (garden_images, image_comments, image_likes)
# - app.modules.community.domain.services

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# GARDEN IMAGES
# =============================================================================

class GardenImageRequest(BaseModel):
    garden_plan_id: Optional[UUID] = Field(None, description="Garden plan the image belongs to")
    image_url: str = Field(..., min_length=1, description="Image URL")
    title: Optional[str] = Field(None, max_length=255)


class GardenImageResponse(GardenImageRequest):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    created_at: datetime


# =============================================================================
# IMAGE COMMENTS
# =============================================================================

class ImageCommentRequest(BaseModel):
    image_id: UUID
    user_id: UUID
    comment: str = Field(..., min_length=1, description="Comment text")


class ImageCommentResponse(ImageCommentRequest):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    created_at: datetime


# =============================================================================
# IMAGE LIKES
# =============================================================================

class ImageLikeRequest(BaseModel):
    image_id: UUID
    user_id: UUID


class ImageLikeResponse(ImageLikeRequest):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    created_at: datetime
