# 📄 File: app/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file marks the api folder as a Python package so other parts of the app can import and use
# the API functionality, like a table of contents for all our API features.
# 🧪 Purpose (Technical Summary):
# Package initialization for the API layer: version constants shared by the
# application factory and the v1 router.
# 🔗 Dependencies:
# None (package initialization)
# 🔄 Connected Modules / Calls From:
# app.main.py, all API route imports, middleware imports

"""
Garden Planner API Package

This package contains all API-related modules including:
- API versioning (v1)
- Middleware for request logging and error handling
- Health check endpoints
- Route management and organization

Structure:
    api/
    ├── __init__.py          # This file
    ├── middleware/          # API middleware components
    │   ├── logging.py
    │   └── error_handling.py
    └── v1/                  # API version 1
        ├── __init__.py
        ├── router.py        # Main v1 router
        └── health.py        # Health check endpoints
"""

__version__ = "1.0.0"
__author__ = "Garden Planner Team"
__description__ = "Garden Planner REST API"

API_PREFIX = "/api"
CURRENT_VERSION = "v1"
SUPPORTED_VERSIONS = ["v1"]

__all__ = [
    "API_PREFIX",
    "CURRENT_VERSION",
    "SUPPORTED_VERSIONS",
]
