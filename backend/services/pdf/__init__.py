"""PDF rendering services."""

from .vehicle_rc.renderer import build_overlays, render_vehicle_pdf
from .vehicle_rc.background import prepare_background

__all__ = ["build_overlays", "prepare_background", "render_vehicle_pdf"]
