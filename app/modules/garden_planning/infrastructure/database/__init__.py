"""
Garden Planning Database Layer

SQLAlchemy models (garden plans, plants) and their repository
implementations.
"""
