"""Single and bulk (zipped) export of registration certificates."""
from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from datetime import date, datetime, timezone
from io import BytesIO
from pathlib import Path
from zipfile import ZIP_DEFLATED, ZipFile, ZipInfo

from backend.core import models
from backend.services.pdf import prepare_background, render_vehicle_pdf
from backend.services.pdf.vehicle_rc import BackgroundInfo

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s")

Renderer = Callable[..., bytes]


class RcExportError(RuntimeError):
    """Raised when a certificate or the archive cannot be produced."""

    def __init__(self, message: str, vehicle_id: str | None = None) -> None:
        super().__init__(message)
        self.vehicle_id = vehicle_id


def pdf_filename(vehicle: models.Vehicle) -> str:
    stem = _WHITESPACE.sub("", vehicle.vehicle_number or "") or vehicle.id
    return f"{stem}_RC.pdf"


def archive_filename(day: date) -> str:
    return f"vehicle_pdfs_{day.isoformat()}.zip"


def _unique_name(vehicle: models.Vehicle, taken: set[str]) -> str:
    name = pdf_filename(vehicle)
    if name in taken:
        name = f"{name[: -len('_RC.pdf')]}_{vehicle.id}_RC.pdf"
    taken.add(name)
    return name


class RcExporter:
    """Renders certificates against an optional background template."""

    def __init__(
        self,
        template_image: Path | None = None,
        *,
        renderer: Renderer = render_vehicle_pdf,
    ) -> None:
        self.template_image = template_image
        self.renderer = renderer
        self._background: BackgroundInfo | None = None

    def background(self) -> BackgroundInfo | None:
        if self.template_image is None:
            return None
        if self._background is None:
            self._background = prepare_background(self.template_image)
        return self._background

    def render(self, vehicle: models.Vehicle) -> bytes:
        return self.renderer(vehicle, background=self.background())

    def build_archive(
        self,
        vehicles: Sequence[models.Vehicle],
        *,
        generated_at: datetime | None = None,
    ) -> bytes:
        """Zip one certificate per vehicle, in the given order.

        Stops at the first failure; the partially built archive is dropped.
        """

        stamp = (generated_at or datetime.now(timezone.utc)).timetuple()[:6]
        buffer = BytesIO()
        taken: set[str] = set()
        with ZipFile(buffer, "w", compression=ZIP_DEFLATED) as archive:
            for vehicle in vehicles:
                try:
                    pdf_bytes = self.render(vehicle)
                except Exception as exc:
                    raise RcExportError(
                        f"Unable to render certificate for vehicle {vehicle.id}: {exc}",
                        vehicle_id=vehicle.id,
                    ) from exc
                info = ZipInfo(_unique_name(vehicle, taken), date_time=stamp)
                info.compress_type = ZIP_DEFLATED
                archive.writestr(info, pdf_bytes)
        logger.info("Built certificate archive with %d document(s)", len(taken))
        return buffer.getvalue()
