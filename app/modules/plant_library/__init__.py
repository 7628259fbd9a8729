# 📄 File: app/modules/plant_library/__init__.py
# 🧭 Purpose (Layman Explanation):
# The plant encyclopedia: reference entries describing how each plant grows, which gardeners copy into their plans.
# 🧪 Purpose (Technical Summary):
# Plants library module (CRUD, plain OR search, criteria-based advanced search, Perenual lookups) following the
# domain / infrastructure / presentation layering used across modules.
# 🔗 Dependencies:
# FastAPI, SQLAlchemy, pydantic, app.shared
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, garden_planning (add-from-library), health_monitoring (pests/diseases per entry)
