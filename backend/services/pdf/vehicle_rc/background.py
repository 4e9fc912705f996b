"""Background template handling for registration certificate PDFs."""
from __future__ import annotations

from io import BytesIO
from pathlib import Path

from PIL import Image, ImageOps
from reportlab.lib.utils import ImageReader


class BackgroundInfo:
    def __init__(self, reader: ImageReader, width: float, height: float, source: Path | None = None):
        self.reader = reader
        self.width = width
        self.height = height
        self.source = source


def _load_image(image_path: Path) -> Image.Image:
    with Image.open(image_path) as img:
        oriented = ImageOps.exif_transpose(img)
        if oriented.mode not in ("RGB", "RGBA", "L"):
            oriented = oriented.convert("RGB")
        return oriented.copy()


def prepare_background(image_path: Path) -> BackgroundInfo:
    if not image_path.exists():
        raise FileNotFoundError(f"Template image not found: {image_path}")

    image = _load_image(image_path)
    buffer = BytesIO()
    image.save(buffer, format="PNG")
    buffer.seek(0)
    reader = ImageReader(buffer)
    return BackgroundInfo(reader=reader, width=image.width, height=image.height, source=image_path)


def draw_background(canvas, background: BackgroundInfo, page_size: tuple[float, float]) -> None:
    """Stretch the template over the whole page, ignoring its aspect ratio."""

    page_width, page_height = page_size
    canvas.drawImage(
        background.reader,
        0,
        0,
        width=page_width,
        height=page_height,
        preserveAspectRatio=False,
        mask="auto",
    )
