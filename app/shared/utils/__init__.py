# 📄 File: app/shared/utils/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Small helpers shared by the whole app, mainly the structured logging setup.
#
# 🧪 Purpose (Technical Summary):
# Utilities package exporting logging configuration helpers.
#
# 🔗 Dependencies:
# - logging.py (python-json-logger based setup)

from .logging import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
