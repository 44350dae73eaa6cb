"""Chart data entities."""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

# --- Chart Data ---


class DataPoint(BaseModel):
    """One bar: a category name and its non-negative count."""

    name: str = Field(strict=True)
    count: int = Field(ge=0, strict=True)

    model_config = ConfigDict(frozen=True)


_DATA_ADAPTER = TypeAdapter(list[DataPoint])


def coerce_data_points(items: Iterable[Any]) -> list[DataPoint]:
    """
    Normalise DataPoints, mappings and (name, count) pairs into DataPoints.
    Raises pydantic.ValidationError on bad shape or negative counts.
    """
    raw: list[Any] = []
    for item in items:
        if isinstance(item, DataPoint):
            raw.append(item)
        elif isinstance(item, Mapping):
            raw.append(dict(item))
        elif isinstance(item, tuple | list) and len(item) == 2:
            raw.append({"name": item[0], "count": item[1]})
        else:
            raw.append(item)
    return _DATA_ADAPTER.validate_python(raw)
