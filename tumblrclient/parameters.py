"""Query parameter set for Tumblr API methods.

Parameters whose value equals their declared default are left out of the
request entirely, so the API applies its own server-side default.
"""

from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Iterator

from .utils.dates import to_timestamp


class _NoDefault:
    """Marker for parameters added without a declared default."""

    def __repr__(self) -> str:
        return "NO_DEFAULT"


NO_DEFAULT: Any = _NoDefault()


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def _is_default(value: Any, default: Any) -> bool:
    if default is NO_DEFAULT:
        return False
    # False == 0 in Python; a bool is never the default of an int parameter.
    if isinstance(value, bool) != isinstance(default, bool):
        return False
    return value == default


def serialize_value(value: Any) -> str:
    """Serialize a parameter value to its query-string form."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value).lower()
    if isinstance(value, datetime):
        return str(to_timestamp(value))
    return str(value)


class MethodParameterSet(Mapping):
    """Ordered mapping of API parameters with default suppression."""

    def __init__(self) -> None:
        self._values: Dict[str, Any] = {}

    def add(self, key: str, value: Any, default: Any = NO_DEFAULT) -> "MethodParameterSet":
        """Add a parameter unless it is empty or equal to its default.

        Args:
            key: Parameter name
            value: Parameter value
            default: Server-side default; the pair is omitted when value equals it

        Returns:
            This parameter set, for chaining
        """
        if not key:
            raise ValueError("Parameter name cannot be empty.")

        if _is_empty(value) or _is_default(value, default):
            self._values.pop(key, None)
            return self

        self._values[key] = value
        return self

    def to_query(self) -> Dict[str, str]:
        """Get the parameters serialized for the query string."""
        return {key: serialize_value(value) for key, value in self._values.items()}

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"MethodParameterSet({self._values!r})"
