"""Rectangle value object for layer placement."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Dimensions:
    """A rectangle in card-space pixels."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Dimensions":
        """Create dimensions from a mapping with x, y, width and height keys."""
        return cls(
            x=data.get("x", 0),
            y=data.get("y", 0),
            width=data.get("width", 0),
            height=data.get("height", 0),
        )

    @classmethod
    def coerce(cls, value: Union["Dimensions", Mapping[str, Any]]) -> "Dimensions":
        if isinstance(value, Dimensions):
            return value
        return cls.from_mapping(value)
