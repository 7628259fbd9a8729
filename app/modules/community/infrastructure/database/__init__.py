"""
Community Database Layer

Models for garden images, image comments and image likes, plus their
repository implementations.
"""
