"""OpenAI and Unsplash clients."""
