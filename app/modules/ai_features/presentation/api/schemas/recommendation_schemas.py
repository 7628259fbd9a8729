# 📄 File: app/modules/ai_features/presentation/api/schemas/recommendation_schemas.py
#
# 🧭 Purpose (Layman Explanation):
# Describes what you tell the garden assistant about your garden and what it
# answers: a handful of suggested plants with care notes and a photo.
#
# 🧪 Purpose (Technical Summary):
# Pydantic models for the plant recommendation request (garden facts, user
# preferences, optional season override), a single recommendation as parsed
# from the model's JSON and the response wrapper with its meta block.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - app.modules.ai_features.domain.services (prompt builder, parser, service)
# - app.modules.ai_features.presentation.api.v1.plant_recommendations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

SEASONS = ("spring", "summer", "autumn", "winter")


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


class UserPreferences(BaseModel):
    experience_level: Optional[str] = Field(None, description="beginner / intermediate / expert")
    garden_size: Optional[str] = Field(None, description="e.g. small balcony, 20 m² plot")
    time_commitment: Optional[str] = Field(None, description="low / moderate / high")
    harvest_goals: List[str] = Field(default_factory=list)
    sunlight_exposure: Optional[str] = Field(None, description="full sun / partial shade / shade")

    @field_validator("experience_level", "garden_size", "time_commitment", "sunlight_exposure", mode="before")
    @classmethod
    def blank_as_missing(cls, v):
        return _blank_to_none(v)

    @field_validator("harvest_goals", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        return v or []


class PlantRecommendationRequest(BaseModel):
    garden_type: str = Field(..., min_length=1, description="e.g. balcony, vegetable bed, rooftop")
    location: Optional[str] = Field(None, max_length=100)
    message: str = Field(..., min_length=1, max_length=500, description="What the user is asking for")
    existing_plants: List[str] = Field(default_factory=list)
    user_preferences: Optional[UserPreferences] = None
    season: Optional[str] = Field(None, description="Overrides the season derived from date and location")

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "garden_type": "balcony",
            "location": "Colombo, Sri Lanka",
            "message": "Easy herbs I can cook with",
            "existing_plants": ["Basil"],
            "user_preferences": {"experience_level": "beginner", "harvest_goals": ["herbs"]},
        }
    })

    @field_validator("garden_type", "message", mode="before")
    @classmethod
    def strip_required(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("location", mode="before")
    @classmethod
    def blank_location(cls, v):
        return _blank_to_none(v)

    @field_validator("existing_plants", mode="before")
    @classmethod
    def no_existing_plants(cls, v):
        return v or []

    @field_validator("season", mode="before")
    @classmethod
    def known_season(cls, v):
        v = _blank_to_none(v)
        if v is None:
            return None
        v = v.lower()
        if v == "fall":
            return "autumn"
        if v not in SEASONS:
            raise ValueError(f"Season must be one of {', '.join(SEASONS)}")
        return v


class PlantRecommendation(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1)
    type: Optional[str] = None
    description: Optional[str] = None
    sunlight_requirements: Optional[str] = None
    watering_frequency: Optional[str] = None
    seasonal_tips: Optional[str] = None
    companion_plants: List[str] = Field(default_factory=list)
    personal_note: Optional[str] = None
    difficulty: Optional[str] = None
    image_url: Optional[str] = None

    @field_validator("companion_plants", mode="before")
    @classmethod
    def single_companion_as_list(cls, v):
        # models sometimes answer "Basil" instead of ["Basil"]
        if v is None:
            return []
        if isinstance(v, str):
            return [p.strip() for p in v.split(",") if p.strip()]
        return v

    @field_validator("image_url", mode="before")
    @classmethod
    def empty_image(cls, v):
        return _blank_to_none(v)


class RecommendationMeta(BaseModel):
    season: str
    location: str
    garden_type: str


class PlantRecommendationResponse(BaseModel):
    success: bool
    recommendations: List[PlantRecommendation] = Field(default_factory=list)
    meta: Optional[RecommendationMeta] = None
    error: Optional[str] = None
