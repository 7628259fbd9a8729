# 📄 File: app/modules/user_management/presentation/api/schemas/profile_schemas.py
# 🧭 Purpose (Layman Explanation):
# This file makes sure profile information sent to and from the app has the right shape: a display
# name and an optional picture.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the profile endpoints.
#
# 🔗 Dependencies:
# - pydantic models for request/response validation
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.api.v1.profiles
# - app.modules.user_management.domain.services.profile_service

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class ProfileRequest(BaseModel):
    """
    Profile create/replace request.

    A blank full name is stored as no name.
    """
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "full_name": "Jane Smith",
                "avatar_url": "https://example.com/avatars/jane.png",
            }
        }
    )

    full_name: Optional[str] = Field(
        default=None,
        max_length=255,
        description="Gardener's display name",
        examples=["Jane Smith"],
    )
    avatar_url: Optional[str] = Field(default=None, description="Profile picture URL")

    @field_validator("full_name")
    @classmethod
    def strip_full_name(cls, v):
        if v is None:
            return v
        v = v.strip()
        return v or None


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class ProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime
