# 📄 File: app/shared/infrastructure/database/search/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# The search toolbox every list screen uses: what the user asked for, how it
# becomes a database filter, how results are split into pages and how the
# "best match first" search quietly falls back to a simple one.
#
# 🧪 Purpose (Technical Summary):
# Public surface of the criteria/filter/pagination/relevance helpers.
#
# 🔗 Dependencies:
# - sqlalchemy
#
# 🔄 Connected Modules / Calls From:
# - Module repository implementations
# - Module presentation layers (PageRequest construction)

from .criteria import SearchCriteria, clean
from .filters import FilterField, MatchKind, compose_and, compose_or
from .pagination import Page, PageRequest, SortDirection, paginate
from .relevance import match_score, search_with_fallback

__all__ = [
    "SearchCriteria",
    "clean",
    "FilterField",
    "MatchKind",
    "compose_and",
    "compose_or",
    "Page",
    "PageRequest",
    "SortDirection",
    "paginate",
    "match_score",
    "search_with_fallback",
]
