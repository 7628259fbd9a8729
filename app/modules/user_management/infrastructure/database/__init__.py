"""
User Management Database Layer

SQLAlchemy profile model and its repository implementation.
"""
