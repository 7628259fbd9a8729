"""
Database infrastructure: engine lifecycle, sessions and the shared
search/pagination toolkit used by module repositories.
"""
