"""Dashboard orchestration: load, filter, select, export and delete."""
from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone

from backend.core import models
from backend.core.search import filter_vehicles
from backend.core.selection import Selection
from backend.core.vehicle_store import VehicleStore
from backend.services.rc_exports import (
    RcExporter,
    RcExportError,
    archive_filename,
    pdf_filename,
)

logger = logging.getLogger(__name__)

NO_SELECTION_NOTICE = models.Notice(
    title="No Selection",
    description="Please select vehicles to generate PDFs",
    variant="destructive",
)
EXPORT_FAILED_NOTICE = models.Notice(
    title="Export Failed",
    description="Failed to generate bulk PDFs. Please try again.",
    variant="destructive",
)
DELETED_NOTICE = models.Notice(
    title="Vehicle Deleted", description="Vehicle has been removed successfully"
)
SAMPLE_DATA_NOTICE = models.Notice(
    title="Sample Data Generated", description="Added sample vehicle records for testing"
)


@dataclass(frozen=True)
class ExportResult:
    notice: models.Notice
    archive: bytes | None = None
    filename: str | None = None
    count: int = 0

    @property
    def ok(self) -> bool:
        return self.archive is not None


class DashboardController:
    def __init__(
        self,
        store: VehicleStore,
        exporter: RcExporter | None = None,
        *,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self.store = store
        self.exporter = exporter or RcExporter()
        self._clock = clock
        self.query = ""
        self.vehicles: list[models.Vehicle] = []
        self.filtered: list[models.Vehicle] = []
        self.selection = Selection()
        self.is_exporting = False
        self.load()

    def load(self) -> None:
        self.vehicles = self.store.list_vehicles()
        self._refilter()

    def _refilter(self) -> None:
        self.filtered = filter_vehicles(self.vehicles, self.query, self.store)
        self.selection = self.selection.with_visible(v.id for v in self.filtered)

    def set_query(self, query: str) -> None:
        self.query = query or ""
        self._refilter()

    def toggle(self, vehicle_id: str, checked: bool | None = None) -> None:
        self.selection = self.selection.toggle(vehicle_id, checked)

    def select_all(self) -> None:
        self.selection = self.selection.select_all()

    def select_none(self) -> None:
        self.selection = self.selection.select_none()

    def delete(self, vehicle_id: str) -> models.Notice | None:
        if not self.store.delete_vehicle(vehicle_id):
            return None
        self.selection = self.selection.discard(vehicle_id)
        self.load()
        return DELETED_NOTICE

    def add_sample_data(self) -> models.Notice:
        self.store.generate_sample_data()
        self.load()
        return SAMPLE_DATA_NOTICE

    def selected_vehicles(self) -> list[models.Vehicle]:
        return [vehicle for vehicle in self.vehicles if self.selection.is_selected(vehicle.id)]

    def bulk_export(self) -> ExportResult:
        chosen = self.selected_vehicles()
        if not chosen:
            return ExportResult(notice=NO_SELECTION_NOTICE)

        generated_at = self._clock()
        self.is_exporting = True
        try:
            archive = self.exporter.build_archive(chosen, generated_at=generated_at)
        except RcExportError:
            logger.exception("Error generating bulk PDFs")
            return ExportResult(notice=EXPORT_FAILED_NOTICE)
        finally:
            self.is_exporting = False

        self.selection = self.selection.select_none()
        notice = models.Notice(
            title="Bulk Export Complete",
            description=f"Generated {len(chosen)} PDF(s) in ZIP file",
        )
        return ExportResult(
            notice=notice,
            archive=archive,
            filename=archive_filename(generated_at.date()),
            count=len(chosen),
        )

    def export_one(self, vehicle_id: str) -> tuple[bytes, str] | None:
        vehicle = self.store.get_vehicle(vehicle_id)
        if vehicle is None:
            return None
        try:
            pdf_bytes = self.exporter.render(vehicle)
        except Exception as exc:
            raise RcExportError(str(exc), vehicle_id=vehicle_id) from exc
        return pdf_bytes, pdf_filename(vehicle)

    def snapshot(self) -> models.DashboardSnapshot:
        return models.DashboardSnapshot(
            query=self.query,
            vehicles=self.filtered,
            selected_ids=self.selection.ordered(v.id for v in self.vehicles),
            selection_state=self.selection.state,
            stats=self.store.stats(self.selection.count, self.vehicles),
        )
