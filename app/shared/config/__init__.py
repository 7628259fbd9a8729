# 📄 File: app/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Holds the settings that tell the Garden Planner app how to reach its database
# and outside services, and how to behave in each environment.
#
# 🧪 Purpose (Technical Summary):
# Configuration package initialization exporting settings management.
#
# 🔗 Dependencies:
# - settings.py (application settings)
# - database.py (declarative base and engine options)
#
# 🔄 Connected Modules / Calls From:
# - app.main (application startup)
# - Infrastructure components

from .settings import get_settings, Settings

__all__ = [
    "get_settings",
    "Settings",
]
