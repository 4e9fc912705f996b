"""Static field positions on the registration certificate template.

Coordinates are in points (1/72 inch) from the top-left corner of an A4 page.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .models import FieldPosition, PageGeometry

PAGE = PageGeometry(width=595.28, height=841.89)
PAGE_SIZE = PAGE.size

MULTILINE_FIELDS = frozenset({"ownerAddress"})
MULTILINE_LINE_HEIGHT = 1.2

FIELD_POSITIONS: Mapping[str, FieldPosition] = MappingProxyType(
    {
        "vehicleNumber": FieldPosition(top=180, left=200, width=200, font_size=14, font_weight="bold"),
        "ownerName": FieldPosition(top=220, left=200, width=300, font_size=12),
        "vehicleClass": FieldPosition(top=260, left=200, width=250, font_size=11),
        "fuelType": FieldPosition(top=300, left=200, width=150, font_size=11),
        "chassisNumber": FieldPosition(top=340, left=200, width=250, font_size=10),
        "engineNumber": FieldPosition(top=380, left=200, width=250, font_size=10),
        "manufacturer": FieldPosition(top=420, left=200, width=200, font_size=11),
        "model": FieldPosition(top=460, left=200, width=200, font_size=11),
        "registrationDate": FieldPosition(top=500, left=200, width=150, font_size=11),
        "insuranceValidTill": FieldPosition(top=540, left=200, width=150, font_size=11),
        "rtoOffice": FieldPosition(top=580, left=200, width=250, font_size=11),
        "ownerAddress": FieldPosition(top=620, left=200, width=300, height=60, font_size=10),
    }
)


def get_field_position(
    field_name: str, layout: Mapping[str, FieldPosition] = FIELD_POSITIONS
) -> FieldPosition | None:
    return layout.get(field_name)
