"""PDF rendering for vehicle registration certificates."""

from .background import BackgroundInfo, prepare_background
from .layout import FIELD_POSITIONS, PAGE_SIZE, get_field_position
from .models import FieldOverlay, FieldPosition
from .renderer import build_overlays, render_vehicle_pdf
from .style import PdfStyleEngine

__all__ = [
    "BackgroundInfo",
    "FIELD_POSITIONS",
    "FieldOverlay",
    "FieldPosition",
    "PAGE_SIZE",
    "PdfStyleEngine",
    "build_overlays",
    "get_field_position",
    "prepare_background",
    "render_vehicle_pdf",
]
