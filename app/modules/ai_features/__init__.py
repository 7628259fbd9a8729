# 📄 File: app/modules/ai_features/__init__.py
# 🧭 Purpose (Layman Explanation):
# The garden assistant: asks an AI model which plants would suit a garden and finds a photo of each.
# 🧪 Purpose (Technical Summary):
# AI features module: seasonal prompt assembly, OpenAI chat completions, tolerant JSON parsing
# of the model's answer and Unsplash image lookup.
# 🔗 Dependencies:
# FastAPI, pydantic, aiohttp (via the shared APIClient), app.shared
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
