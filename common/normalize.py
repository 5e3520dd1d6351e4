"""
Response-shape normalization.

Tradier returns conceptual lists in three shapes:
- a single object when there is exactly one element
- an array when there are several
- `null`, the string "null", `{}`, `[]` or a missing key when there are none

Everything here collapses those into one ordered (possibly empty) list.
"""

from __future__ import annotations

from typing import Annotated, Any, List, Mapping, TypeVar

from pydantic import BeforeValidator

from common.errors import ResponseShapeError

T = TypeVar("T")


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and value.strip().lower() in ("", "null"):
        return True
    if isinstance(value, Mapping) and not value:
        return True
    if isinstance(value, (list, tuple)) and not value:
        return True
    return False


def as_list(value: Any) -> List[Any]:
    if _is_empty(value):
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def extract_list(payload: Any, container: str, item: str) -> List[Any]:
    """
    Read `payload[container][item]` as a list.

    A missing/empty container means no elements. A payload that is not a JSON
    object at all is a shape error.
    """
    if not isinstance(payload, Mapping):
        raise ResponseShapeError(
            f"Expected a JSON object with '{container}'",
            {"container": container, "got": type(payload).__name__},
        )
    outer = payload.get(container)
    if _is_empty(outer):
        return []
    if not isinstance(outer, Mapping):
        raise ResponseShapeError(
            f"Expected '{container}' to be an object",
            {"container": container, "got": type(outer).__name__},
        )
    return as_list(outer.get(item))


# Nested list-like fields (order legs, profile accounts) normalize the same way.
ListField = Annotated[List[T], BeforeValidator(as_list)]
