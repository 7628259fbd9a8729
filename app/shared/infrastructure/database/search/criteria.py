# 📄 File: app/shared/infrastructure/database/search/criteria.py
#
# 🧭 Purpose (Layman Explanation):
# Collects the optional filters a user typed into a search form and throws away
# the empty boxes, so only real choices narrow the results.
#
# 🧪 Purpose (Technical Summary):
# Immutable criteria base class. Blank or whitespace-only strings and None are
# normalized to None at construction; every other value is kept as given.
#
# 🔗 Dependencies:
# - dataclasses
#
# 🔄 Connected Modules / Calls From:
# - filters.compose_and (reads present fields)
# - Module repositories (per-entity criteria subclasses)

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional


def clean(value: Any) -> Optional[Any]:
    """Return ``None`` for missing or blank values, the value otherwise."""
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    return value


@dataclass(frozen=True)
class SearchCriteria:
    """
    Base class for per-entity search criteria.

    Subclasses are frozen dataclasses whose fields all default to ``None``.
    An unset field never constrains a query.
    """

    def __post_init__(self):
        for f in fields(self):
            object.__setattr__(self, f.name, clean(getattr(self, f.name)))

    @classmethod
    def from_params(cls, **params: Any) -> "SearchCriteria":
        """
        Build criteria from raw request parameters.

        Unknown keys are ignored so callers can pass a whole query dict.
        """
        names = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in params.items() if key in names})

    def present(self) -> Dict[str, Any]:
        """Fields that carry a value, in declaration order."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    def is_empty(self) -> bool:
        return not self.present()
