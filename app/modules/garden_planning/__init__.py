# 📄 File: app/modules/garden_planning/__init__.py
# 🧭 Purpose (Layman Explanation):
# Everything about a gardener's plans: the garden layouts themselves and the plants placed in them.
# 🧪 Purpose (Technical Summary):
# Garden planning module with garden plans, garden plants, relevance-ranked search with plain-search
# fallback and copying plants library entries into a plan grid.
# 🔗 Dependencies:
# FastAPI, SQLAlchemy, pydantic, app.shared, app.modules.plant_library
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, community (garden images), care_management (reminders)
