# 📄 File: app/modules/activities/__init__.py
# 🧭 Purpose (Layman Explanation):
# The activity feed: a running log of what gardeners did (planted, watered, harvested, shared).
# 🧪 Purpose (Technical Summary):
# Activities module with CRUD and per-user, per-garden-plan and per-type listings.
# 🔗 Dependencies:
# FastAPI, SQLAlchemy, pydantic, app.shared
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
