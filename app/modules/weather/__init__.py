# 📄 File: app/modules/weather/__init__.py
# 🧭 Purpose (Layman Explanation):
# Weather for the garden: current conditions, forecasts, gardening advice and plant hazards.
# 🧪 Purpose (Technical Summary):
# Weather module wrapping the World Weather Online API with rule based advice and hazard lists.
# 🔗 Dependencies:
# FastAPI, pydantic, aiohttp (via the shared APIClient), app.shared
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
