# 📄 File: app/shared/infrastructure/external_apis/__init__.py

# 🧭 Purpose (Layman Explanation):
# This file sets up the foundation for communicating with outside services like
# the weather forecast provider, the AI assistant and the plant photo library.

# 🧪 Purpose (Technical Summary):
# Exposes the shared async HTTP client used by every third-party integration.

# 🔗 Dependencies:
# - api_client: Generic HTTP client with retry logic

# 🔄 Connected Modules / Calls From:
# Used by: Weather module, AI recommendation module, plant library (Perenual)

from .api_client import APIClient

__all__ = ['APIClient']
