from __future__ import annotations

from typing import Any, Iterable, List, Type, TypeVar

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from common.errors import ResponseShapeError

M = TypeVar("M", bound=BaseModel)


class ApiModel(BaseModel):
    """Base for every decoded response structure."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


def parse_model(model: Type[M], data: Any, *, op: str) -> M:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ResponseShapeError(
            f"Could not decode {model.__name__}: {e.error_count()} error(s)",
            {"op": op, "errors": e.errors(include_url=False)},
        ) from e


def parse_list(model: Type[M], items: Iterable[Any], *, op: str) -> List[M]:
    try:
        return TypeAdapter(List[model]).validate_python(list(items))
    except ValidationError as e:
        raise ResponseShapeError(
            f"Could not decode {model.__name__} list: {e.error_count()} error(s)",
            {"op": op, "errors": e.errors(include_url=False)},
        ) from e
