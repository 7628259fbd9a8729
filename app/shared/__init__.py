# 📄 File: app/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as the toolbox every Garden Planner module can use:
# settings, database access, search helpers, errors and logging.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package for cross-cutting concerns used by all modules.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - All application modules importing shared utilities

__all__ = []
