"""Data models for the registration certificate PDF renderer."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

FontWeight = Literal["normal", "bold"]


@dataclass(frozen=True)
class FieldPosition:
    """Placement of one field, in points from the top-left corner of the page."""

    top: float
    left: float
    width: float | None = None
    height: float | None = None
    font_size: float = 12
    font_weight: FontWeight = "normal"
    color: str = "#000000"


@dataclass(frozen=True)
class FieldOverlay:
    field: str
    text: str
    position: FieldPosition
    multiline: bool = False


@dataclass(frozen=True)
class PageGeometry:
    width: float
    height: float

    @property
    def size(self) -> tuple[float, float]:
        return self.width, self.height
