# 📄 File: app/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tells Python this 'app' folder holds the Garden Planner backend and keeps the
# basic version and package information in one place.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version metadata for the Garden
# Planner FastAPI application.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - app.main (application title and version)
# - pyproject.toml (project version)

"""
Garden Planner API

Backend for planning gardens: a plant library, garden plans and their plants,
garden photos with comments and likes, care reminders, pests and diseases,
weather-aware gardening advice and AI plant recommendations.
"""

__version__ = "1.0.0"
__title__ = "Garden Planner API"
__description__ = "Garden planning, plant library and care backend"
__author__ = "Garden Planner Team"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
    "__author__",
    "__license__",
]
