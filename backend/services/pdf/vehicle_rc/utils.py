"""Utility helpers for registration certificate PDF generation."""
from __future__ import annotations

from datetime import date, datetime
from io import BytesIO

from reportlab.pdfgen.canvas import Canvas

from .layout import PAGE_SIZE

_SHORT_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def _parse_date(value: str) -> date | None:
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def format_date(value: str | None) -> str:
    """Format an ISO date as ``15 Jan 2023``; other strings are returned as is."""

    if not value:
        return ""
    parsed = _parse_date(value)
    if parsed is None:
        return value
    return f"{parsed.day:02d} {_SHORT_MONTHS[parsed.month - 1]} {parsed.year}"


def top_to_baseline(page_height: float, top: float, font_size: float) -> float:
    """Convert a top offset into a ReportLab baseline (origin bottom-left)."""

    return page_height - top - font_size


class PdfBuffer(BytesIO):
    """In-memory PDF buffer that builds a ReportLab canvas."""

    def build_canvas(self, title: str | None = None) -> Canvas:
        # invariant=1 freezes the creation date and document id
        canvas = Canvas(self, pagesize=PAGE_SIZE, invariant=1)
        if title:
            canvas.setTitle(title)
        return canvas
