"""
Infrastructure layer package for the Garden Planner application.
Provides database connections, search composition and external API clients.
"""
