"""Create/edit form logic for a single vehicle record."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from pydantic.alias_generators import to_camel

from backend.core import models
from backend.core.vehicle_store import VehicleStore

logger = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")
_FIELD_BY_ALIAS = {to_camel(name): name for name in models.FORM_FIELDS}

VEHICLE_NUMBER_MAX_LENGTH = 13

MISSING_NUMBER_NOTICE = models.Notice(
    title="Error", description="Please enter a vehicle number", variant="destructive"
)
SAVE_FAILED_NOTICE = models.Notice(
    title="Error", description="Failed to save vehicle. Please try again.", variant="destructive"
)
CREATED_NOTICE = models.Notice(
    title="Vehicle Created", description="New vehicle has been added successfully"
)
UPDATED_NOTICE = models.Notice(
    title="Vehicle Updated", description="Vehicle information has been updated successfully"
)


def normalize_vehicle_number(value: str) -> str:
    """Format a registration number as ``AA 00 AA 0000``.

    Non-alphanumeric characters are dropped and letters uppercased, then the
    result is split in groups of 2, 2, 2 and at most 4 characters.
    """

    cleaned = _NON_ALNUM.sub("", value or "").upper()
    if len(cleaned) <= 2:
        return cleaned
    if len(cleaned) <= 4:
        return f"{cleaned[:2]} {cleaned[2:]}"
    if len(cleaned) <= 6:
        return f"{cleaned[:2]} {cleaned[2:4]} {cleaned[4:]}"
    return f"{cleaned[:2]} {cleaned[2:4]} {cleaned[4:6]} {cleaned[6:10]}"


@dataclass(frozen=True)
class FormResult:
    notice: models.Notice
    vehicle: models.Vehicle | None = None

    @property
    def ok(self) -> bool:
        return self.vehicle is not None and not self.notice.is_error


class VehicleFormController:
    def __init__(self, store: VehicleStore, vehicle: models.Vehicle | None = None) -> None:
        self.store = store
        self.vehicle = vehicle
        self.values: dict[str, str] = {name: "" for name in models.FORM_FIELDS}
        if vehicle is not None:
            for name in models.FORM_FIELDS:
                self.values[name] = getattr(vehicle, name) or ""

    @property
    def editing(self) -> bool:
        return self.vehicle is not None

    def set_field(self, name: str, value: str | None) -> str:
        field_name = _FIELD_BY_ALIAS.get(name, name)
        if field_name not in self.values:
            raise ValueError(f"Unknown form field: {name}")
        text = value or ""
        if field_name == "vehicle_number":
            text = normalize_vehicle_number(text)
        self.values[field_name] = text
        return text

    def load(self, data: models.VehicleFormData) -> None:
        for name, value in data.model_dump(exclude_unset=True).items():
            self.set_field(name, value)

    def snapshot(self) -> models.VehicleFormData:
        return models.VehicleFormData(**self.values)

    def validate(self) -> models.Notice | None:
        if not self.values["vehicle_number"].strip():
            return MISSING_NUMBER_NOTICE
        return None

    def submit(self) -> FormResult:
        invalid = self.validate()
        if invalid is not None:
            return FormResult(notice=invalid)

        snapshot = self.snapshot()
        try:
            if self.vehicle is not None:
                saved = self.store.update_vehicle(self.vehicle.id, snapshot)
                if saved is None:
                    logger.warning("Vehicle %s vanished before update", self.vehicle.id)
                    return FormResult(notice=SAVE_FAILED_NOTICE)
                notice = UPDATED_NOTICE
            else:
                saved = self.store.create_vehicle(snapshot)
                notice = CREATED_NOTICE
        except Exception:
            logger.exception("Error saving vehicle")
            return FormResult(notice=SAVE_FAILED_NOTICE)

        self.vehicle = saved
        return FormResult(notice=notice, vehicle=saved)
