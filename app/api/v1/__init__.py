# 📄 File: app/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes version 1 of the garden planner API so a later version can be added
# without breaking existing apps.
# 🧪 Purpose (Technical Summary):
# API v1 metadata and the route prefix table used by the v1 router.
# 🔗 Dependencies:
# None
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, app.main

"""
Garden Planner API Version 1

Resources:
- Plants library, plants and garden plans
- External plant data (Perenual)
- Profiles
- Garden images, comments and likes
- Plant reminders
- Pests and plant diseases
- Weather and AI plant recommendations
- Activity feed

Structure:
    v1/
    ├── __init__.py          # This file
    ├── router.py            # Main v1 router aggregation
    └── health.py            # Health check endpoints

Module endpoints live in app/modules/<module>/presentation/api/v1/.
"""

__version__ = "1.0.0"
__api_version__ = "v1"
__status__ = "stable"

API_V1_CONFIG = {
    "version": __version__,
    "api_version": __api_version__,
    "status": __status__,
    "description": "Garden Planner API Version 1",
}

# API v1 route prefixes
ROUTE_PREFIXES = {
    "plants_library": "/plants-library",
    "plants_external": "/plants/external",
    "plants": "/plants",
    "garden_plans": "/garden-plans",
    "profiles": "/profiles",
    "garden_images": "/garden-images",
    "image_comments": "/image-comments",
    "image_likes": "/image-likes",
    "plant_reminders": "/plant-reminders",
    "pests": "/pests",
    "plant_diseases": "/plant-diseases",
    "weather": "/weather",
    "plant_recommendations": "/plant-recommendations",
    "activities": "/activities",
}
