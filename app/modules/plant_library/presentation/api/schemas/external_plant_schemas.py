# 📄 File: app/modules/plant_library/presentation/api/schemas/external_plant_schemas.py
#
# 🧭 Purpose (Layman Explanation):
# Describes what the online plant encyclopedia sends back: plant lists, a plant's full
# profile and the pest and disease catalogue.
#
# 🧪 Purpose (Technical Summary):
# Pydantic models for Perenual payloads and the list filters accepted by the
# /plants/external endpoints. Provider fields are loosely typed because the free
# tier substitutes upgrade notices for some values.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - app.modules.plant_library.domain.services.external_plant_service
# - app.modules.plant_library.presentation.api.v1.external_plants

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Order = Literal["asc", "desc"]
Cycle = Literal["perennial", "annual", "biennial", "biannual"]
Watering = Literal["frequent", "average", "minimum", "none"]
Sunlight = Literal["full_shade", "part_shade", "sun-part_shade", "full_sun"]


class ExternalPlantFilters(BaseModel):
    """Species list filters, passed through to Perenual."""
    page: int = Field(1, ge=1)
    order: Optional[Order] = None
    cycle: Optional[Cycle] = None
    watering: Optional[Watering] = None
    sunlight: Optional[Sunlight] = None
    hardiness: Optional[int] = Field(None, ge=1, le=13, description="USDA hardiness zone")
    edible: Optional[bool] = None
    poisonous: Optional[bool] = None
    indoor: Optional[bool] = None
    q: Optional[str] = Field(None, max_length=100, description="Plant name search")


class DiseasePestFilters(BaseModel):
    id: Optional[int] = Field(None, ge=1)
    page: int = Field(1, ge=1)
    q: Optional[str] = Field(None, max_length=100)


class ProviderImage(BaseModel):
    license: Optional[Union[int, str]] = None
    license_name: Optional[str] = None
    license_url: Optional[str] = None
    original_url: Optional[str] = None
    regular_url: Optional[str] = None
    medium_url: Optional[str] = None
    small_url: Optional[str] = None
    thumbnail: Optional[str] = None


class ProviderPage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total: Optional[int] = None
    current_page: Optional[int] = None
    last_page: Optional[int] = None
    per_page: Optional[int] = None
    from_: Optional[int] = Field(None, alias="from")
    to: Optional[int] = None


class ExternalPlant(BaseModel):
    id: int
    common_name: Optional[str] = None
    scientific_name: Optional[Union[List[str], str]] = None
    other_name: Optional[Union[List[str], str]] = None
    cycle: Optional[str] = None
    watering: Optional[str] = None
    sunlight: Optional[Union[List[str], str]] = None
    default_image: Optional[ProviderImage] = None


class ExternalPlantPage(ProviderPage):
    data: List[ExternalPlant] = Field(default_factory=list)


class ExternalPlantDetails(ExternalPlant):
    """Full species profile; fields not listed here are kept as sent."""
    model_config = ConfigDict(extra="allow")

    family: Optional[str] = None
    type: Optional[str] = None
    description: Optional[str] = None
    care_level: Optional[str] = None
    maintenance: Optional[str] = None
    growth_rate: Optional[str] = None
    watering_period: Optional[str] = None
    hardiness: Optional[Dict[str, Any]] = None
    indoor: Optional[bool] = None
    edible_fruit: Optional[bool] = None
    edible_leaf: Optional[bool] = None
    medicinal: Optional[bool] = None
    poisonous_to_humans: Optional[bool] = None
    poisonous_to_pets: Optional[bool] = None
    drought_tolerant: Optional[bool] = None
    soil: Optional[List[str]] = None
    pest_susceptibility: Optional[List[Any]] = None
    flowering_season: Optional[str] = None
    harvest_season: Optional[str] = None


class DescriptionBlock(BaseModel):
    subtitle: Optional[str] = None
    description: Optional[str] = None


class DiseasePest(BaseModel):
    id: int
    common_name: Optional[str] = None
    scientific_name: Optional[str] = None
    other_name: Optional[List[str]] = None
    family: Optional[str] = None
    host: Optional[List[str]] = None
    description: Optional[List[DescriptionBlock]] = None
    solution: Optional[List[DescriptionBlock]] = None
    images: Optional[List[ProviderImage]] = None


class DiseasePestPage(ProviderPage):
    data: List[DiseasePest] = Field(default_factory=list)
