"""Persistence of vehicle records on top of a key/value storage backing."""
from __future__ import annotations

import logging
import sqlite3
from collections.abc import Callable, Iterable, Mapping
from datetime import datetime, timezone
from threading import RLock
from typing import Any
from uuid import uuid4

from pydantic import TypeAdapter

from backend.core import models
from backend.core.constants_vehicle_types import (
    ELECTRIC_FUEL,
    LIGHT_VEHICLE_MARKER,
    SAMPLE_VEHICLES,
)
from backend.core.storage import StorageBackend

logger = logging.getLogger(__name__)

STORAGE_KEY = "vehicles"

_vehicle_list = TypeAdapter(list[models.Vehicle])


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid4())


class VehicleStore:
    """CRUD over the vehicle set stored as one JSON array under ``STORAGE_KEY``.

    Every mutation rewrites the full array with a single ``write`` call on the
    backing, so no caller ever sees a partially written set.
    """

    def __init__(
        self,
        storage: StorageBackend,
        *,
        clock: Callable[[], datetime] = _utcnow,
        id_factory: Callable[[], str] = _new_id,
        key: str = STORAGE_KEY,
    ) -> None:
        self.storage = storage
        self.key = key
        self._clock = clock
        self._id_factory = id_factory
        self._lock = RLock()

    def _load(self) -> list[models.Vehicle]:
        try:
            raw = self.storage.read(self.key)
        except (OSError, sqlite3.Error, ValueError) as exc:
            logger.warning("Unable to read vehicle records: %s", exc)
            return []
        if raw is None:
            return []
        try:
            return _vehicle_list.validate_json(raw)
        except ValueError as exc:
            logger.warning("Stored vehicle records are corrupt, ignoring them: %s", exc)
            return []

    def _save(self, vehicles: list[models.Vehicle]) -> None:
        payload = _vehicle_list.dump_json(vehicles, by_alias=True, exclude_none=True)
        self.storage.write(self.key, payload.decode("utf-8"))

    def list_vehicles(self) -> list[models.Vehicle]:
        with self._lock:
            return self._load()

    def get_vehicle(self, vehicle_id: str) -> models.Vehicle | None:
        return next((v for v in self.list_vehicles() if v.id == vehicle_id), None)

    def create_vehicle(
        self, data: models.VehicleFormData | Mapping[str, Any]
    ) -> models.Vehicle:
        form = _as_form_data(data, models.VehicleFormData)
        now = self._clock()
        with self._lock:
            vehicles = self._load()
            taken = {vehicle.id for vehicle in vehicles}
            vehicle_id = self._id_factory()
            while vehicle_id in taken:
                vehicle_id = self._id_factory()
            vehicle = models.Vehicle(
                id=vehicle_id,
                created_at=now,
                updated_at=now,
                **form.model_dump(include=set(models.FORM_FIELDS)),
            )
            vehicles.append(vehicle)
            self._save(vehicles)
        logger.info("Vehicle %s created (%s)", vehicle.id, vehicle.vehicle_number or "-")
        return vehicle

    def update_vehicle(
        self, vehicle_id: str, data: models.VehicleFormData | Mapping[str, Any]
    ) -> models.Vehicle | None:
        changes = _as_form_data(data, models.VehicleUpdate).model_dump(exclude_unset=True)
        with self._lock:
            vehicles = self._load()
            for index, current in enumerate(vehicles):
                if current.id != vehicle_id:
                    continue
                updated_at = max(self._clock(), current.created_at)
                updated = current.model_copy(update={**changes, "updated_at": updated_at})
                vehicles[index] = updated
                self._save(vehicles)
                logger.info("Vehicle %s updated (%d field(s))", vehicle_id, len(changes))
                return updated
        logger.debug("Update ignored, vehicle %s not found", vehicle_id)
        return None

    def delete_vehicle(self, vehicle_id: str) -> bool:
        with self._lock:
            vehicles = self._load()
            remaining = [vehicle for vehicle in vehicles if vehicle.id != vehicle_id]
            if len(remaining) == len(vehicles):
                return False
            self._save(remaining)
        logger.info("Vehicle %s deleted", vehicle_id)
        return True

    def search_vehicles(self, query: str) -> list[models.Vehicle]:
        needle = query.lower()
        return [
            vehicle
            for vehicle in self.list_vehicles()
            if any(needle in str(value).lower() for value in vehicle.storage_dict().values())
        ]

    def generate_sample_data(self) -> list[models.Vehicle]:
        return [self.create_vehicle(sample) for sample in SAMPLE_VEHICLES]

    def stats(
        self, selected_count: int = 0, vehicles: Iterable[models.Vehicle] | None = None
    ) -> models.VehicleStats:
        records = list(vehicles) if vehicles is not None else self.list_vehicles()
        return models.VehicleStats(
            total=len(records),
            selected=selected_count,
            light_vehicles=sum(
                1 for v in records if v.vehicle_class and LIGHT_VEHICLE_MARKER in v.vehicle_class
            ),
            electric=sum(1 for v in records if v.fuel_type == ELECTRIC_FUEL),
        )


def _as_form_data(data, model_cls):
    if isinstance(data, model_cls):
        return data
    if isinstance(data, models.VehicleFormData):
        return model_cls.model_validate(data.model_dump(exclude_unset=True))
    return model_cls.model_validate(dict(data))
