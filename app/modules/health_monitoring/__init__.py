# 📄 File: app/modules/health_monitoring/__init__.py
# 🧭 Purpose (Layman Explanation):
# Reference information about garden pests and plant diseases, and which ones threaten a given plant.
# 🧪 Purpose (Technical Summary):
# Read-only health monitoring module: pest and disease catalogues matched against a plants library
# entry's common_pests / common_diseases lists.
# 🔗 Dependencies:
# FastAPI, SQLAlchemy, pydantic, app.shared, app.modules.plant_library
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
