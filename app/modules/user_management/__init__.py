# 📄 File: app/modules/user_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# Gardener profiles: the name and picture people show to the rest of the community.
# 🧪 Purpose (Technical Summary):
# User management module reduced to profile CRUD, name lookups, plain search and relevance-ranked
# search with plain-search fallback.
# 🔗 Dependencies:
# FastAPI, SQLAlchemy, pydantic, app.shared
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
