"""Typography for the registration certificate overlays."""
from __future__ import annotations

from reportlab.lib import colors
from reportlab.lib.styles import ParagraphStyle

from .layout import MULTILINE_LINE_HEIGHT
from .models import FieldPosition

FONT_BY_WEIGHT = {
    "normal": "Helvetica",
    "bold": "Helvetica-Bold",
}


class PdfStyleEngine:
    """Maps layout entries to ReportLab fonts, colors and paragraph styles."""

    def __init__(self, *, line_height: float = MULTILINE_LINE_HEIGHT) -> None:
        self.line_height = line_height
        self._paragraph_styles: dict[FieldPosition, ParagraphStyle] = {}

    def font(self, position: FieldPosition) -> tuple[str, float]:
        return FONT_BY_WEIGHT.get(position.font_weight, FONT_BY_WEIGHT["normal"]), position.font_size

    def color(self, position: FieldPosition) -> colors.Color:
        try:
            return colors.HexColor(position.color)
        except ValueError:
            return colors.black

    def paragraph_style(self, position: FieldPosition) -> ParagraphStyle:
        style = self._paragraph_styles.get(position)
        if style is None:
            font_name, font_size = self.font(position)
            style = ParagraphStyle(
                name=f"rc-multiline-{len(self._paragraph_styles)}",
                fontName=font_name,
                fontSize=font_size,
                leading=font_size * self.line_height,
                textColor=self.color(position),
            )
            self._paragraph_styles[position] = style
        return style
