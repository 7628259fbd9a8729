# 📄 File: app/modules/community/__init__.py
# 🧭 Purpose (Layman Explanation):
# The social side of the app: photos of gardens, comments on them and likes.
# 🧪 Purpose (Technical Summary):
# Community module with garden images, image comments and image likes (unique per user and image,
# duplicate like -> 409, idempotent unlike, toggle).
# 🔗 Dependencies:
# FastAPI, SQLAlchemy, pydantic, app.shared
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
