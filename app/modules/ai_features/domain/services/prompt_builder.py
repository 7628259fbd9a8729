# 📄 File: app/modules/ai_features/domain/services/prompt_builder.py
# 🧭 Purpose (Layman Explanation):
# Works out which season it is where the user gardens and writes the
# instructions and question we send to the AI gardening assistant.
#
# 🧪 Purpose (Technical Summary):
# Month based season lookup with a southern hemisphere flip, plus the system
# and user prompts for the chat completion call.
#
# 🔗 Dependencies:
# - app.modules.ai_features.presentation.api.schemas.recommendation_schemas
#
# 🔄 Connected Modules / Calls From:
# - app.modules.ai_features.domain.services.plant_recommendation_service

from datetime import date
from typing import List, Optional

from app.modules.ai_features.presentation.api.schemas.recommendation_schemas import (
    PlantRecommendationRequest,
    UserPreferences,
)

UNKNOWN_LOCATION = "Unknown"

SOUTHERN_HEMISPHERE_COUNTRIES = (
    "australia",
    "new zealand",
    "argentina",
    "chile",
    "south africa",
    "brazil",
)

NORTHERN_SEASONS = {
    1: "winter", 2: "winter", 3: "spring", 4: "spring", 5: "spring", 6: "summer",
    7: "summer", 8: "summer", 9: "autumn", 10: "autumn", 11: "autumn", 12: "winter",
}
OPPOSITE_SEASON = {"spring": "autumn", "summer": "winter", "autumn": "spring", "winter": "summer"}


def is_southern_hemisphere(location: Optional[str]) -> bool:
    if not location:
        return False
    lowered = location.lower()
    return any(country in lowered for country in SOUTHERN_HEMISPHERE_COUNTRIES)


def current_season(location: Optional[str], today: Optional[date] = None) -> str:
    """Meteorological season for ``today`` (default: now) at ``location``."""
    month = (today or date.today()).month
    season = NORTHERN_SEASONS[month]
    return OPPOSITE_SEASON[season] if is_southern_hemisphere(location) else season


def _join(values: List[str], default: str) -> str:
    cleaned = [v.strip() for v in values if v and v.strip()]
    return ", ".join(cleaned) if cleaned else default


def build_system_prompt(season: str) -> str:
    return (
        "You are a knowledgeable and warm gardening assistant helping a user plan their garden. "
        "Make recommendations feel personal and intimate, as if coming from an experienced gardener friend.\n\n"
        "Provide plant recommendations in JSON format based on the user's garden type, location, "
        "experience level, and existing plants.\n"
        "Format your response as a JSON array of plant objects with these exact fields and data types:\n"
        "- name: String - Plant name\n"
        "- type: String - vegetable/herb/flower/etc\n"
        "- description: String - Personal, warm description of the plant addressing the user directly\n"
        "- sunlight_requirements: String - full sun/partial shade/shade\n"
        "- watering_frequency: String - daily/twice a week/weekly\n"
        f"- seasonal_tips: String - Tips specific to the current season ({season})\n"
        "- companion_plants: Array of strings - Plants that grow well with this one\n"
        "- personal_note: String - A friendly, encouraging note about growing this plant\n"
        "- difficulty: String - easy/moderate/challenging\n"
        "- image_url: String - URL to a plant image (leave empty string)\n\n"
        "CRITICALLY IMPORTANT: Return ONLY valid, parseable JSON. Do not include any text before or after "
        "the JSON array. Make sure companion_plants is always an array of strings, even if there's only one "
        "companion plant. Do not include trailing commas in arrays or objects. "
        'Example format: [{"name":"Tomato",...}, {"name":"Basil",...}]'
    )


def build_user_prompt(request: PlantRecommendationRequest, season: str) -> str:
    prefs = request.user_preferences or UserPreferences()

    lines = [
        "Garden information:",
        f"- Type: {request.garden_type}",
        f"- Location: {request.location or UNKNOWN_LOCATION}",
        f"- Current season: {season}",
        f"- Gardening experience: {prefs.experience_level or 'beginner'}",
        f"- Time commitment: {prefs.time_commitment or 'moderate'}",
        f"- Harvest goals: {_join(prefs.harvest_goals, 'general gardening')}",
        f"- Existing plants: {_join(request.existing_plants, 'None yet')}",
    ]
    if prefs.garden_size:
        lines.append(f"- Garden size: {prefs.garden_size}")
    if prefs.sunlight_exposure:
        lines.append(f"- Sunlight exposure: {prefs.sunlight_exposure}")

    return (
        "\n".join(lines)
        + f"\n\nUser query: {request.message}\n\n"
        + "Please provide 3-5 personalized plant recommendations for this garden that would make the user "
        + "feel like they're getting advice from a friendly expert gardener."
    )
