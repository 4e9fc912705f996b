"""Registration certificate PDF renderer entry point."""
from __future__ import annotations

import logging
from html import escape
from pathlib import Path
from typing import Mapping

from pydantic.alias_generators import to_camel
from reportlab.platypus import Paragraph

from backend.core import models
from .background import BackgroundInfo, draw_background, prepare_background
from .layout import FIELD_POSITIONS, MULTILINE_FIELDS, PAGE
from .models import FieldOverlay, FieldPosition
from .style import PdfStyleEngine
from .utils import PdfBuffer, format_date, top_to_baseline

logger = logging.getLogger(__name__)

RENDER_ORDER: tuple[str, ...] = tuple(to_camel(name) for name in models.FORM_FIELDS)
DATE_FIELDS = frozenset(to_camel(name) for name in models.DATE_FIELDS)


def build_overlays(
    vehicle: models.Vehicle, layout: Mapping[str, FieldPosition] = FIELD_POSITIONS
) -> list[FieldOverlay]:
    """List the text overlays for ``vehicle``.

    Fields without a layout entry or without a value are left out.
    """

    values = vehicle.model_dump(by_alias=True)
    overlays: list[FieldOverlay] = []
    for field_name in RENDER_ORDER:
        position = layout.get(field_name)
        raw_value = values.get(field_name)
        if position is None or not raw_value:
            continue
        text = format_date(raw_value) if field_name in DATE_FIELDS else raw_value
        overlays.append(
            FieldOverlay(
                field=field_name,
                text=text,
                position=position,
                multiline=field_name in MULTILINE_FIELDS,
            )
        )
    return overlays


def _draw_single_line(canvas, overlay: FieldOverlay, style_engine: PdfStyleEngine) -> None:
    position = overlay.position
    canvas.saveState()
    canvas.setFont(*style_engine.font(position))
    canvas.setFillColor(style_engine.color(position))
    canvas.drawString(
        position.left,
        top_to_baseline(PAGE.height, position.top, position.font_size),
        overlay.text,
    )
    canvas.restoreState()


def _draw_multiline(canvas, overlay: FieldOverlay, style_engine: PdfStyleEngine) -> None:
    position = overlay.position
    markup = "<br/>".join(escape(line) for line in overlay.text.splitlines())
    paragraph = Paragraph(markup, style_engine.paragraph_style(position))
    available_width = position.width or PAGE.width - position.left
    available_height = position.height or PAGE.height - position.top
    _, height = paragraph.wrapOn(canvas, available_width, available_height)
    paragraph.drawOn(canvas, position.left, PAGE.height - position.top - height)


def draw_overlay(canvas, overlay: FieldOverlay, style_engine: PdfStyleEngine) -> None:
    if overlay.multiline:
        _draw_multiline(canvas, overlay, style_engine)
    else:
        _draw_single_line(canvas, overlay, style_engine)


def render_vehicle_pdf(
    vehicle: models.Vehicle,
    *,
    layout: Mapping[str, FieldPosition] = FIELD_POSITIONS,
    background: BackgroundInfo | Path | None = None,
) -> bytes:
    """Render the one-page certificate of ``vehicle`` and return the PDF bytes."""

    if isinstance(background, Path):
        background = prepare_background(background)

    buffer = PdfBuffer()
    canvas = buffer.build_canvas(title=f"{vehicle.vehicle_number or vehicle.id} RC")
    style_engine = PdfStyleEngine()

    if background is not None:
        draw_background(canvas, background, PAGE.size)

    overlays = build_overlays(vehicle, layout)
    for overlay in overlays:
        draw_overlay(canvas, overlay, style_engine)

    canvas.showPage()
    canvas.save()
    logger.debug("Rendered RC for vehicle %s (%d field(s))", vehicle.id, len(overlays))
    return buffer.getvalue()
