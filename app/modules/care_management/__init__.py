# 📄 File: app/modules/care_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# Care reminders: watering, feeding and pruning dates for the plants in a garden.
# 🧪 Purpose (Technical Summary):
# Care management module with plant reminders, due-date queries and completion.
# 🔗 Dependencies:
# FastAPI, SQLAlchemy, pydantic, app.shared
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
